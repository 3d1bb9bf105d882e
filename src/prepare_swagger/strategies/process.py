import subprocess
import sys

from ..common import logger
from ..errors import NonZeroExit, SpawnError
from ..invocation import InvocationRequest, InvocationResult, Status


def relay(result: InvocationResult, stdout=None, stderr=None):
    """Copy the child's captured streams to our own"""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if result.stdout:
        stdout.write(result.stdout)
        stdout.flush()
    if result.stderr:
        stderr.write(result.stderr)
        stderr.flush()


def run(request: InvocationRequest, token) -> InvocationResult:
    """
    Run the engine executable as a child process and wait for it.

    The child is attached to the cancellation token while it runs; triggering
    the token terminates it. A token that is already triggered prevents the
    spawn altogether.
    """
    if token.triggered:
        logger().info(f"Cancelled before starting: {request.command_line}")
        return InvocationResult(status=Status.CANCELLED, error=SpawnError("cancelled before start"))

    logger().info(f"Running: {request.command_line}")
    try:
        process = subprocess.Popen(
            request.argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as ex:
        return InvocationResult.failed(SpawnError(f"{request.program}: {ex.strerror or ex}"))

    logger().push().debug(f"Child process {process.pid} started")
    try:
        token.attach(process)
        stdout, stderr = process.communicate()
    finally:
        token.detach()
        logger().pop()

    returncode = process.returncode
    logger().debug(f"Child process {process.pid} exited with {returncode}")

    if returncode == 0:
        return InvocationResult(status=Status.SUCCESS, stdout=stdout, stderr=stderr, returncode=0)

    status = Status.CANCELLED if token.triggered else Status.FAILED
    return InvocationResult(
        status=status,
        stdout=stdout,
        stderr=stderr,
        returncode=returncode,
        error=NonZeroExit(returncode, request.command_line),
    )
