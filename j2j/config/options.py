from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

DEFAULT_INDENT = 2
DEFAULT_ENGINE = "quickjs"
DEFAULT_TIMEOUT = 1.0

# command-line spellings -> (field, inverted)
_ALIASES: dict[str, tuple[str, bool]] = {
    "no-color": ("colorize", True),
    "no_color": ("colorize", True),
    "color": ("colorize", False),
    "line-nos": ("line_numbers", False),
    "line_nos": ("line_numbers", False),
    "lineNumbers": ("line_numbers", False),
}


@dataclass(frozen=True, slots=True)
class Options:
    indent: int = DEFAULT_INDENT
    colorize: bool = False
    line_numbers: bool = False
    debug: bool = False
    output: Path | None = None
    engine: str = DEFAULT_ENGINE
    timeout: float = DEFAULT_TIMEOUT
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


_FIELD_NAMES = {f.name for f in fields(Options)} - {"extra"}


def _coerce_indent(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError:
            raise ValueError(f"indent must be an integer, got {value!r}") from None
    if not isinstance(value, (int, float)):
        raise ValueError(f"indent must be an integer, got {value!r}")
    return max(0, int(value))


def _coerce_output(value: Any) -> Path | None:
    if value is None or value == "":
        return None
    return Path(value)


def resolve_options(raw: Any = None) -> Options:
    """Merge caller-supplied options over the defaults.

    Any key given with a non-``None`` value wins, even a falsy one, so
    ``{"indent": False}`` asks for compact output. ``None`` and callables
    count as "no options"; the latter lets a callback sit where options
    would go. Unknown keys are kept in ``Options.extra`` and otherwise
    ignored.
    """
    if raw is None or callable(raw):
        return Options()
    if isinstance(raw, Options):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"options must be a mapping, got {type(raw).__name__}")

    given: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if key in _FIELD_NAMES:
            given[key] = value
        elif key in _ALIASES:
            name, inverted = _ALIASES[key]
            # canonical spelling beats an alias when both are present
            given.setdefault(name, (not value) if inverted else value)
        else:
            extra[key] = value

    merged = Options()
    if "indent" in given:
        merged = replace(merged, indent=_coerce_indent(given["indent"]))
    for name in ("colorize", "line_numbers", "debug"):
        if name in given:
            merged = replace(merged, **{name: bool(given[name])})
    if "output" in given:
        merged = replace(merged, output=_coerce_output(given["output"]))
    if "engine" in given:
        merged = replace(merged, engine=str(given["engine"]))
    if "timeout" in given:
        timeout = float(given["timeout"])
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        merged = replace(merged, timeout=timeout)
    if extra:
        merged = replace(merged, extra=MappingProxyType(extra))
    return merged
