from __future__ import annotations

import json
from typing import Any

from j2j.errors import ExecutionFailure, RejectionError, SerializationError
from .runtime import Evaluation, EvaluationFailed, EvaluationOutcome, TypeTag

# typeof null is "object", so null gets through as well
ACCEPTED_TAGS = frozenset({TypeTag.OBJECT, TypeTag.STRING, TypeTag.NUMBER})


def classify(outcome: EvaluationOutcome) -> Any:
    """Turn an evaluation outcome into a host value, or raise."""
    match outcome:
        case EvaluationFailed(message=message):
            raise ExecutionFailure(message)
        case Evaluation(type_name=type_name) if outcome.tag not in ACCEPTED_TAGS:
            raise RejectionError(type_name)
        case Evaluation(payload=None, problem=problem):
            raise SerializationError(problem or "value has no JSON representation")
        case Evaluation(payload=payload):
            return json.loads(payload)
    raise TypeError(f"Unsupported evaluation outcome: {outcome!r}")
