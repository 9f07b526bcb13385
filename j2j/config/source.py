from __future__ import annotations

import re
from pathlib import Path
from typing import TextIO

_EXPORT_PREFIX = re.compile(r"^\s*(?:module\.exports\s*=\s*|export\s+default\s+)")
_SHEBANG = re.compile(r"^#![^\n]*\n?")
_QUOTES = ("'", '"', "`")


def _strip_comments(text: str) -> str:
    """Remove // and /* */ comments while preserving string literals."""
    out: list[str] = []
    i = 0
    in_string = False
    string_quote = ""
    escaped = False
    in_line_comment = False
    in_block_comment = False

    while i < len(text):
        ch = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""

        if in_line_comment:
            if ch == "\n":
                in_line_comment = False
                out.append(ch)
            i += 1
            continue

        if in_block_comment:
            if ch == "*" and nxt == "/":
                in_block_comment = False
                # keep tokens on either side apart
                out.append(" ")
                i += 2
            else:
                i += 1
            continue

        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == string_quote:
                in_string = False
            i += 1
            continue

        if ch in _QUOTES:
            in_string = True
            string_quote = ch
            out.append(ch)
            i += 1
            continue

        if ch == "/" and nxt == "/":
            in_line_comment = True
            i += 2
            continue

        if ch == "/" and nxt == "*":
            in_block_comment = True
            i += 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def normalize_source(text: str) -> str:
    """Turn a config fragment into a single expression.

    Drops a byte-order mark, a shebang line, comments, a leading
    ``module.exports =`` or ``export default``, and any trailing semicolons.
    """
    text = text.lstrip("\ufeff")
    text = _SHEBANG.sub("", text, count=1)
    text = _strip_comments(text)
    text = _EXPORT_PREFIX.sub("", text, count=1)
    text = text.strip()
    while text.endswith(";"):
        text = text[:-1].rstrip()
    return text


def is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def read_source_file(path: Path) -> str:
    return path.read_text(encoding="utf-8-sig")


def read_source_stream(stream: TextIO) -> str:
    return stream.read()
