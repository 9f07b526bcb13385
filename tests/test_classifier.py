import pytest

from j2j.core.classifier import classify
from j2j.core.runtime import Evaluation, EvaluationFailed, TypeTag
from j2j.errors import ExecutionFailure, RejectionError, SerializationError


def test_object_payload_is_decoded():
    assert classify(Evaluation("object", '{"foo":"bar","baz":2}')) == {"foo": "bar", "baz": 2}


def test_number_is_not_coerced():
    assert classify(Evaluation("number", "4")) == 4


def test_string_and_null():
    assert classify(Evaluation("string", '"hi"')) == "hi"
    assert classify(Evaluation("object", "null")) is None


@pytest.mark.parametrize("type_name", ["undefined", "function", "boolean", "bigint", "symbol"])
def test_rejected_types_are_named(type_name):
    with pytest.raises(RejectionError) as excinfo:
        classify(Evaluation(type_name, None))
    assert excinfo.value.type_name == type_name
    assert str(excinfo.value) == f"input evaluated to {type_name}, which is no good"


def test_failure_passes_through():
    with pytest.raises(ExecutionFailure) as excinfo:
        classify(EvaluationFailed("timeout"))
    assert excinfo.value.message == "timeout"


def test_missing_payload_is_a_serialization_error():
    with pytest.raises(SerializationError, match="circular"):
        classify(Evaluation("object", None, "TypeError: circular reference"))


def test_unknown_typeof_maps_to_other():
    assert Evaluation("bigint").tag is TypeTag.OTHER
    assert Evaluation("function").tag is TypeTag.FUNCTION
