from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TypeTag(str, Enum):
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNDEFINED = "undefined"
    FUNCTION = "function"
    OTHER = "other"

    @classmethod
    def from_typeof(cls, name: str) -> "TypeTag":
        try:
            return cls(name)
        except ValueError:
            # bigint, symbol, or whatever else an engine reports
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Evaluation:
    """A value produced inside the isolate.

    ``payload`` is the value's JSON text as rendered by the isolate, or
    ``None`` when it has none; ``problem`` then says why, if anything threw.
    """

    type_name: str
    payload: str | None = None
    problem: str | None = None

    @property
    def tag(self) -> TypeTag:
        return TypeTag.from_typeof(self.type_name)


@dataclass(frozen=True, slots=True)
class EvaluationFailed:
    message: str


EvaluationOutcome = Union[Evaluation, EvaluationFailed]
