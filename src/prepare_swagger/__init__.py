"""Command-line front-end driving the prepare_swagger transformation engine"""

from .errors import (
    ConfigError,
    EngineNotFound,
    InputOutputError,
    NonZeroExit,
    PrepareSwaggerError,
    SpawnError,
    TransformationError,
    UsageError,
)
from .invocation import InvocationRequest, InvocationResult, Status, Strategy, exit_code

__version__ = "0.1.0"
