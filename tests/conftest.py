import io
from dataclasses import dataclass, field

import pytest

from j2j.core.runtime import Evaluation, EvaluationFailed


@dataclass
class FakeEvaluator:
    outcome: Evaluation | EvaluationFailed = field(default_factory=lambda: Evaluation("number", "4"))
    calls: list[str] = field(default_factory=list)

    def evaluate(self, source: str):
        self.calls.append(source)
        return self.outcome


class TTYStream(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def fake_evaluator():
    return FakeEvaluator()


@pytest.fixture
def tty():
    return TTYStream()
