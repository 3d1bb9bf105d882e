from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

DEFAULT_PROGRAM = "prepare_swagger"


class Strategy(str, Enum):
    DIRECT = "direct"
    SUBPROCESS = "subprocess"


class Status(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class InvocationRequest:
    """One instruction for the transformation engine

    strategy: How the engine is invoked
    arguments: Arguments given to this tool after the program name
    content: Input text, for the direct-call strategy
    program: Engine executable name, for the subprocess strategy
    """
    strategy: Strategy
    arguments: Tuple[str, ...] = ()
    content: Optional[str] = None
    program: str = DEFAULT_PROGRAM

    @property
    def forwarded_arguments(self) -> Tuple[str, ...]:
        return tuple(arg for arg in self.arguments if arg)

    @property
    def argv(self) -> list:
        return [self.program, *self.forwarded_arguments]

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


@dataclass
class InvocationResult:
    status: Status
    output: Optional[str] = None
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    error: Optional[Exception] = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS

    @classmethod
    def failed(cls, error: Exception, **kwargs) -> "InvocationResult":
        return cls(status=Status.FAILED, error=error, **kwargs)


def exit_code(result: InvocationResult) -> int:
    """0 on success, 1 for any failure or cancellation"""
    return 0 if result.ok else 1
