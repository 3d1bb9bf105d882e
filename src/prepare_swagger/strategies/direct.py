from ..common import logger
from ..engine import Engine
from ..errors import InputOutputError, TransformationError
from ..invocation import InvocationRequest, InvocationResult, Status, Strategy


def run(request: InvocationRequest, engine: Engine) -> InvocationResult:
    """Call the engine in-process with the request content"""
    logger().debug(f"Calling engine {getattr(engine, '__name__', engine)!r} with {len(request.content or '')} characters")
    try:
        output = engine(request.content)
    except Exception as ex:
        logger().debug("Engine raised", exc_info=ex)
        return InvocationResult.failed(TransformationError(str(ex)))

    if not isinstance(output, str):
        return InvocationResult.failed(
            TransformationError(f"Engine returned {type(output).__name__}, expected text")
        )
    return InvocationResult(status=Status.SUCCESS, output=output)


def read_text(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise InputOutputError(str(ex)) from ex


def write_text(path: str, text: str):
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as ex:
        raise InputOutputError(str(ex)) from ex


def convert(input_path: str, output_path: str, engine: Engine) -> InvocationResult:
    """
    Read input_path, transform it and write the result to output_path.

    The output file is only opened once the engine has returned successfully,
    so a failed transformation leaves output_path untouched.
    """
    request = InvocationRequest(
        strategy=Strategy.DIRECT,
        arguments=(input_path, output_path),
        content=read_text(input_path),
    )
    result = run(request, engine)
    if result.ok:
        write_text(output_path, result.output)
        logger().info(f"Schema written to {output_path}")
    return result
