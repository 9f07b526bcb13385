"""Convert JavaScript object literals into strict JSON.

The input is evaluated as a JavaScript expression inside a throwaway
QuickJS context, so expressions work as long as everything they use is
defined: ``{foo: 2 + 2}`` becomes ``{"foo": 4}``. This executes code. Do not
feed it anything you would not run yourself.
"""

from .config.options import Options, resolve_options
from .core.pipeline import (
    convert,
    convert_with_callback,
    parse,
    parse_with_callback,
    run,
    write,
    write_with_callback,
)
from .core.serializer import output, serialize
from .errors import (
    CoercionError,
    DecorationWarning,
    EmptyInputError,
    ExecutionFailure,
    J2JError,
    RejectionError,
    SerializationError,
)

__version__ = "0.1.0"

options = resolve_options

__all__ = [
    "Options",
    "options",
    "resolve_options",
    "convert",
    "convert_with_callback",
    "parse",
    "parse_with_callback",
    "run",
    "write",
    "write_with_callback",
    "output",
    "serialize",
    "CoercionError",
    "DecorationWarning",
    "EmptyInputError",
    "ExecutionFailure",
    "J2JError",
    "RejectionError",
    "SerializationError",
]
