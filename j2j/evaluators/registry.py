from __future__ import annotations

from .base import Evaluator, EvaluatorFactory


class EvaluatorRegistry:
    """Named evaluator backends, so the isolation mechanism can be swapped."""

    def __init__(self) -> None:
        self._factories: dict[str, EvaluatorFactory] = {}

    def register(self, name: str, factory: EvaluatorFactory) -> None:
        key = name.strip()
        if not key:
            raise ValueError("Evaluator name cannot be empty")
        if not callable(factory):
            raise TypeError(f"Evaluator factory for '{key}' must be callable")
        existing = self._factories.get(key)
        if existing is not None and existing is not factory:
            raise ValueError(f"Evaluator already registered: {key}")
        self._factories[key] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def create(self, name: str, *, timeout: float) -> Evaluator:
        if name not in self._factories:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown evaluator: {name} (available: {known})")
        evaluator = self._factories[name](timeout=timeout)
        if not callable(getattr(evaluator, "evaluate", None)):
            raise TypeError(f"Evaluator '{name}' has no evaluate() method")
        return evaluator

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories.keys())


registry = EvaluatorRegistry()


def register_evaluator(name: str):
    def wrapper(factory: EvaluatorFactory) -> EvaluatorFactory:
        registry.register(name, factory)
        return factory

    return wrapper


def get_evaluator(name: str, *, timeout: float) -> Evaluator:
    return registry.create(name, timeout=timeout)
