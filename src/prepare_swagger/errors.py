class PrepareSwaggerError(Exception):
    pass


class UsageError(PrepareSwaggerError):
    """Required command-line arguments are missing"""


class ConfigError(PrepareSwaggerError):
    pass


class TransformationError(PrepareSwaggerError):
    """The transformation engine failed to convert the input"""


class EngineNotFound(TransformationError):
    pass


class InputOutputError(PrepareSwaggerError):
    """Reading the input or writing the output failed"""


class SpawnError(PrepareSwaggerError):
    """The engine executable could not be started"""


class NonZeroExit(PrepareSwaggerError):
    """The engine executable ran and returned a non-zero status"""

    def __init__(self, returncode: int, command_line: str):
        super().__init__(f"Command failed: {command_line} (exit code {returncode})")
        self.returncode = returncode
        self.command_line = command_line
