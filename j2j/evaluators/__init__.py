from .base import Evaluator
from .registry import get_evaluator, register_evaluator, registry


def load_builtin_evaluators() -> None:
    # import side-effects for registration
    from . import quickjs_context  # noqa: F401


def evaluator_names() -> list[str]:
    load_builtin_evaluators()
    return registry.names()


__all__ = [
    "Evaluator",
    "evaluator_names",
    "get_evaluator",
    "load_builtin_evaluators",
    "register_evaluator",
    "registry",
]
