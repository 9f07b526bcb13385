from .classifier import ACCEPTED_TAGS, classify
from .runtime import Evaluation, EvaluationFailed, EvaluationOutcome, TypeTag
from .serializer import decorate, output, serialize

__all__ = [
    "ACCEPTED_TAGS",
    "classify",
    "Evaluation",
    "EvaluationFailed",
    "EvaluationOutcome",
    "TypeTag",
    "decorate",
    "output",
    "serialize",
]
