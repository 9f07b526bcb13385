from __future__ import annotations

import json
import re
import sys
import warnings
from typing import Any, TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer

from j2j.config.options import Options, resolve_options
from j2j.errors import DecorationWarning, SerializationError

_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _escape_surrogates(text: str) -> str:
    # lone surrogates cannot be encoded as UTF-8, so keep them escaped
    return _SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def serialize(value: Any, opts: Options | None = None) -> str:
    opts = resolve_options(opts)
    try:
        if opts.indent == 0:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(value, indent=opts.indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(str(exc)) from exc
    return _escape_surrogates(text)


def decorate(text: str, opts: Options) -> str:
    """Colorize JSON for a terminal; fall back to ``text`` if that fails."""
    try:
        rendered = highlight(text, JsonLexer(), TerminalFormatter(linenos=opts.line_numbers))
    except Exception as exc:
        warnings.warn(f"Could not highlight! Exception: {exc}", DecorationWarning, stacklevel=2)
        return text
    return rendered.rstrip("\n")


def should_decorate(opts: Options, stream: TextIO) -> bool:
    if not opts.colorize or opts.output is not None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def output(value: Any, opts: Options | None = None, stream: TextIO | None = None) -> str:
    """Stringify ``value``, colorized when it is headed for a terminal."""
    opts = resolve_options(opts)
    text = serialize(value, opts)
    if should_decorate(opts, stream or sys.stdout):
        return decorate(text, opts)
    return text
