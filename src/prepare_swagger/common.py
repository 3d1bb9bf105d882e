import json
import logging
import os
import re
import sys
from importlib import import_module

import commentjson
import yaml
from python_log_indenter import IndentedLoggerAdapter

LOGGER_NAME = "prepare-swagger"


class ColorFormatter(logging.Formatter):
    """Colored console formatter, one color per level"""

    lightgray = "\x1b[1;30m"
    gray = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    def __init__(self, use_colors=True):
        super().__init__()
        colors = {
            logging.DEBUG: self.lightgray,
            logging.INFO: self.gray,
            logging.WARNING: self.yellow,
            logging.ERROR: self.red,
            logging.CRITICAL: self.bold_red,
        }
        self.formatters = {
            level: logging.Formatter(color + self.format_string + self.reset if use_colors else self.format_string)
            for level, color in colors.items()
        }

    def format(self, record):
        formatter = self.formatters.get(record.levelno) or logging.Formatter(self.format_string)
        return formatter.format(record)


class SimpleFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(levelname)s: %(message)s")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log files and collectors"""

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


FORMATTERS = {
    "color": ColorFormatter,
    "simple": SimpleFormatter,
    "structured": StructuredFormatter,
}

_logger = None
_logger_config = None


def logger(
    level: str = None,
    format_type: str = None,
    filename: str = None,
    use_colors: bool = None,
    reset: bool = False,
) -> IndentedLoggerAdapter:
    """
    Get or create the tool's logger.

    The first call configures it; later calls with no arguments return the same
    instance. Passing different arguments (or reset=True) rebuilds the handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'color', 'simple' or 'structured'
        filename: Also log to this file, always in structured form
        use_colors: Force colors on/off (auto-detected from stderr if None)
        reset: Force recreation of the handlers

    Returns:
        An IndentedLoggerAdapter over the named logger
    """
    global _logger, _logger_config

    previous = _logger_config or {}
    current_config = {
        "level": (level or previous.get("level") or "WARNING").upper(),
        "format_type": format_type or previous.get("format_type") or "color",
        "filename": filename if filename is not None else previous.get("filename"),
        "use_colors": use_colors if use_colors is not None else previous.get("use_colors"),
    }

    if not reset and _logger is not None and _logger_config == current_config:
        return _logger

    colors = current_config["use_colors"]
    if colors is None:
        colors = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        handler.close()
    log.handlers.clear()
    log.propagate = False

    numeric_level = getattr(logging, current_config["level"], logging.WARNING)
    log.setLevel(numeric_level)

    formatter_class = FORMATTERS.get(current_config["format_type"], ColorFormatter)
    formatter = formatter_class(use_colors=colors) if formatter_class is ColorFormatter else formatter_class()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    log.addHandler(console_handler)

    if current_config["filename"]:
        file_handler = logging.FileHandler(current_config["filename"])
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(StructuredFormatter())
        log.addHandler(file_handler)

    _logger = IndentedLoggerAdapter(log)
    _logger.setLevel(numeric_level)
    _logger_config = current_config
    return _logger


def locate(dotted_path: str):
    """Import 'package.module.attribute' and return the attribute"""
    module_path, _, attribute = dotted_path.rpartition(".")
    if not module_path:
        raise ImportError(f"'{dotted_path}' is not a dotted path")
    module = import_module(module_path)
    return getattr(module, attribute)


def expand_env_vars(text: str) -> str:
    """Expand environment variables with support for ${VAR:-default} syntax."""

    def replacer(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default_value = var_expr.split(":-", 1)
            return os.environ.get(var_name, default_value.strip("'\""))
        return os.environ.get(var_expr, match.group(0))

    text = re.sub(r"\$\{([^}]+)\}", replacer, text)
    return os.path.expandvars(text)


def loadjson(filename, expand_env: bool = False):
    with open(filename, encoding="utf-8") as f:
        data = f.read()
    if expand_env:
        data = expand_env_vars(data)
    return commentjson.loads(data)


def loadyaml(filename, expand_env: bool = False):
    with open(filename, encoding="utf-8") as f:
        data = f.read()
    if expand_env:
        data = expand_env_vars(data)
    return yaml.safe_load(data)


def load_document(filename, expand_env: bool = False):
    """Load a .json/.yaml/.yml file by extension"""
    ext = os.path.splitext(filename)[1].lower()
    if ext == ".json":
        return loadjson(filename, expand_env)
    if ext in (".yaml", ".yml"):
        return loadyaml(filename, expand_env)
    raise ValueError(f"Unsupported settings file type '{ext}': {filename}")
