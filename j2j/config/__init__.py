from .options import DEFAULT_INDENT, Options, resolve_options
from .source import is_blank, normalize_source, read_source_file, read_source_stream

__all__ = [
    "DEFAULT_INDENT",
    "Options",
    "resolve_options",
    "is_blank",
    "normalize_source",
    "read_source_file",
    "read_source_stream",
]
