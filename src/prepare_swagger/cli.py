import os
import sys
from typing import List, Optional

from .cancellation import create_token, install_signal_handlers, restore_signal_handlers
from .common import logger
from .config import Settings, load_settings
from .engine import resolve_engine
from .errors import ConfigError, PrepareSwaggerError, UsageError
from .invocation import InvocationRequest, Strategy, exit_code
from .strategies import direct, process

USAGE = """usage:
prepare-swagger path_to_config.yaml path_to_schema.yaml"""

EXEC_SUFFIX = "-exec"


def select_strategy(prog: str, settings: Settings) -> Strategy:
    if settings.strategy is not None:
        return settings.strategy
    name = os.path.splitext(os.path.basename(prog or ""))[0]
    if name.endswith(EXEC_SUFFIX):
        return Strategy.SUBPROCESS
    return Strategy.DIRECT


def run_direct(arguments: List[str], settings: Settings, engine=None) -> int:
    if len(arguments) < 2 or not arguments[0] or not arguments[1]:
        raise UsageError(USAGE)

    engine = resolve_engine(engine, settings.engine, settings.engine_name)
    result = direct.convert(arguments[0], arguments[1], engine)
    if not result.ok:
        raise result.error
    return exit_code(result)


def run_subprocess(arguments: List[str], settings: Settings, token=None) -> int:
    request = InvocationRequest(
        strategy=Strategy.SUBPROCESS,
        arguments=tuple(arguments),
        program=settings.program,
    )

    if token is None:
        token = create_token(settings.cancellation)
    previous_handlers = install_signal_handlers(token)
    try:
        result = process.run(request, token)
    finally:
        restore_signal_handlers(previous_handlers)

    process.relay(result)
    if not result.ok:
        print(f"exec error: {result.error}", flush=True)
    return exit_code(result)


def main_direct_strategy(arguments: List[str], settings: Settings, engine=None, token=None) -> int:
    try:
        return run_direct(arguments, settings, engine)
    except UsageError as ex:
        print(ex, file=sys.stderr)
    except PrepareSwaggerError as ex:
        logger().debug("Transformation failed", exc_info=ex)
        print(ex, file=sys.stderr)
    except Exception as ex:
        logger().error(f"Unexpected error: {ex}", exc_info=ex)
        print(ex, file=sys.stderr)
    return 1


def main_subprocess_strategy(arguments: List[str], settings: Settings, engine=None, token=None) -> int:
    try:
        return run_subprocess(arguments, settings, token=token)
    except Exception as ex:
        logger().error(f"Unexpected error: {ex}", exc_info=ex)
        print(f"exec error: {ex}", flush=True)
        return 1


RUNNERS = {
    Strategy.DIRECT: main_direct_strategy,
    Strategy.SUBPROCESS: main_subprocess_strategy,
}


def configure_logging(settings: Settings):
    logger(
        level=settings.log_level,
        format_type=settings.log_format,
        filename=settings.log_file,
    )


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None, engine=None, token=None,
         strategy: Optional[Strategy] = None) -> int:
    """
    Run the tool and return its exit code.

    Args:
        argv: Arguments after the program name (defaults to sys.argv[1:])
        prog: Program name used to pick the strategy (defaults to sys.argv[0])
        engine: Transformation engine callable for the direct strategy
        token: Cancellation token for the subprocess strategy
        strategy: Force a strategy regardless of program name and settings
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    prog = sys.argv[0] if prog is None else prog

    try:
        settings = load_settings()
    except ConfigError as ex:
        print(ex, file=sys.stderr)
        return 1
    configure_logging(settings)

    strategy = strategy or select_strategy(prog, settings)
    logger().debug(f"Strategy {strategy.value} selected for {prog!r}")
    return RUNNERS[strategy](argv, settings, engine=engine, token=token)


def console_main():
    sys.exit(main())


def main_direct():
    sys.exit(main(strategy=Strategy.DIRECT))


def main_exec():
    sys.exit(main(strategy=Strategy.SUBPROCESS))
