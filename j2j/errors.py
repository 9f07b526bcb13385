from __future__ import annotations


class J2JError(Exception):
    """Base class for everything the conversion pipeline raises."""


class EmptyInputError(J2JError):
    def __init__(self) -> None:
        super().__init__("input parameter cannot be empty")


class ExecutionFailure(J2JError):
    """The isolated evaluation threw, hit an undefined name, or timed out."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RejectionError(J2JError):
    """Evaluation worked but produced something JSON cannot represent."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"input evaluated to {type_name}, which is no good")
        self.type_name = type_name


class SerializationError(J2JError):
    pass


class CoercionError(J2JError):
    def __init__(self, message: str = "cannot coerce input into anything usable") -> None:
        super().__init__(message)


class DecorationWarning(UserWarning):
    """Highlighting failed; plain JSON was emitted instead."""
