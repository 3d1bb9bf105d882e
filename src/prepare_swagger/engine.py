from importlib.metadata import entry_points
from typing import Callable, Optional

from .common import locate, logger
from .errors import EngineNotFound

ENGINE_GROUP = "prepare_swagger.engines"

Engine = Callable[[str], str]


def _from_entry_points(name: Optional[str] = None) -> Engine:
    candidates = list(entry_points(group=ENGINE_GROUP))
    if name is not None:
        candidates = [ep for ep in candidates if ep.name == name]
    if not candidates:
        wanted = f"'{name}' " if name else ""
        raise EngineNotFound(f"No transformation engine {wanted}registered in '{ENGINE_GROUP}'")
    entry_point = sorted(candidates, key=lambda ep: ep.name)[0]
    logger().debug(f"Using engine entry point {entry_point.name} = {entry_point.value}")
    return entry_point.load()


def resolve_engine(engine=None, dotted_path: Optional[str] = None, name: Optional[str] = None) -> Engine:
    """
    Find the transformation engine callable.

    Args:
        engine: A callable to use as-is
        dotted_path: 'package.module.function' to import
        name: Entry point name in the prepare_swagger.engines group

    Returns:
        A callable taking the config text and returning the schema text
    """
    if engine is None and dotted_path:
        try:
            engine = locate(dotted_path)
        except (ImportError, AttributeError) as ex:
            raise EngineNotFound(f"Could not import engine '{dotted_path}': {ex}") from ex
    if engine is None:
        engine = _from_entry_points(name)
    if not callable(engine):
        raise EngineNotFound(f"Engine {engine!r} is not callable")
    return engine
