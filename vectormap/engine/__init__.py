"""Map normalization engine."""

from vectormap.engine.registry import stage, Stage, get_registry
from vectormap.engine.context import MapContext
from vectormap.engine.pipeline import Pipeline, create_pipeline


def load_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    import importlib
    import pkgutil

    for layer_name in ["stage0", "stage1", "stage2"]:
        package = importlib.import_module(f"vectormap.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


__all__ = [
    "stage",
    "Stage",
    "get_registry",
    "load_stages",
    "MapContext",
    "Pipeline",
    "create_pipeline",
]
