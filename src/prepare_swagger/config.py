"""
Settings for the prepare-swagger front-end.

Environment Variables:
- PREPARE_SWAGGER_CONFIG: Optional .yaml/.yml/.json settings file providing defaults
- PREPARE_SWAGGER_STRATEGY: 'direct' or 'subprocess' (overrides the program-name rule)
- PREPARE_SWAGGER_PROGRAM: Engine executable for the subprocess strategy
- PREPARE_SWAGGER_ENGINE: Dotted path of the engine callable for the direct strategy
- PREPARE_SWAGGER_ENGINE_NAME: Entry point name in the 'prepare_swagger.engines' group
- PREPARE_SWAGGER_CANCELLATION: Enable cancelling the child on SIGINT/SIGTERM
- PREPARE_SWAGGER_LOG_LEVEL / _LOG_FORMAT / _LOG_FILE: Logger configuration

Environment variables override values from the settings file.
"""

import os
from typing import Optional

import commentjson
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .common import load_document
from .errors import ConfigError
from .invocation import DEFAULT_PROGRAM, Strategy

ENV_PREFIX = "PREPARE_SWAGGER_"
CONFIG_ENV = ENV_PREFIX + "CONFIG"


class Settings(BaseModel):
    strategy: Optional[Strategy] = None
    program: str = DEFAULT_PROGRAM
    engine: Optional[str] = None
    engine_name: Optional[str] = None
    cancellation: bool = True
    log_level: str = "WARNING"
    log_format: str = "color"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        if value not in ("color", "simple", "structured"):
            raise ValueError(f"Invalid log format: {value}")
        return value

    @field_validator("program")
    @classmethod
    def check_program(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("program must not be empty")
        return value


def settings_from_env(environ=None) -> dict:
    environ = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        value = environ.get(ENV_PREFIX + name.upper())
        if value is not None and value != "":
            values[name] = value
    return values


def load_settings(environ=None) -> Settings:
    """Build Settings from the optional settings file, then the environment"""
    environ = os.environ if environ is None else environ
    values = {}

    config_file = environ.get(CONFIG_ENV)
    if config_file:
        try:
            data = load_document(config_file, expand_env=True)
        except (OSError, ValueError, yaml.YAMLError, commentjson.JSONLibraryException) as ex:
            raise ConfigError(f"Could not read settings file {config_file}: {ex}") from ex
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {config_file} must contain a mapping")
        values.update(data)

    values.update(settings_from_env(environ))

    try:
        return Settings(**values)
    except ValidationError as ex:
        raise ConfigError(f"Invalid settings: {ex}") from ex
