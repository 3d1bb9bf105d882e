"""Unit tests for invocation requests, results and exit-code propagation."""

from prepare_swagger.errors import NonZeroExit
from prepare_swagger.invocation import (
    DEFAULT_PROGRAM,
    InvocationRequest,
    InvocationResult,
    Status,
    Strategy,
    exit_code,
)


class TestCommandLine:
    def test_empty_arguments_are_dropped(self):
        request = InvocationRequest(Strategy.SUBPROCESS, ("--in", "a.yaml", "", "--out", "b.yaml"))
        assert request.command_line == "prepare_swagger --in a.yaml --out b.yaml"
        assert "  " not in request.command_line

    def test_argv_starts_with_program(self):
        request = InvocationRequest(Strategy.SUBPROCESS, ("", "x", ""), program="engine")
        assert request.argv == ["engine", "x"]
        assert request.forwarded_arguments == ("x",)

    def test_no_arguments(self):
        request = InvocationRequest(Strategy.SUBPROCESS)
        assert request.command_line == DEFAULT_PROGRAM

    def test_arguments_keep_their_order(self):
        request = InvocationRequest(Strategy.SUBPROCESS, ("c", "b", "a"))
        assert request.command_line == "prepare_swagger c b a"


class TestExitCode:
    def test_success_is_zero(self):
        assert exit_code(InvocationResult(status=Status.SUCCESS, output="x")) == 0

    def test_failure_is_one(self):
        result = InvocationResult.failed(NonZeroExit(2, "prepare_swagger"), returncode=2)
        assert result.ok is False
        assert exit_code(result) == 1

    def test_cancelled_is_one(self):
        assert exit_code(InvocationResult(status=Status.CANCELLED)) == 1
