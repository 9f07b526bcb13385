from __future__ import annotations

from typing import Protocol

from j2j.core.runtime import EvaluationOutcome


class Evaluator(Protocol):
    def evaluate(self, source: str) -> EvaluationOutcome: ...


class EvaluatorFactory(Protocol):
    def __call__(self, *, timeout: float) -> Evaluator: ...
