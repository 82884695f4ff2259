"""POSIX-style path handling that accepts Windows-style input.

The top-level functions always return forward-slash paths; the ``native_*``
functions follow the host platform untouched. ``posix`` and ``win32`` are
self-referential views over the two rule sets.
"""

from .coercion import ensure_posix, has_non_ascii, is_extended_length_path
from .facade import (
    basename,
    delimiter,
    dirname,
    extname,
    format,
    is_absolute,
    join,
    normalize,
    parse,
    relative,
    resolve,
    sep,
    to_namespaced_path,
)
from .native import (
    native_basename,
    native_delimiter,
    native_dirname,
    native_extname,
    native_format,
    native_is_absolute,
    native_join,
    native_normalize,
    native_parse,
    native_relative,
    native_resolve,
    native_sep,
    native_to_namespaced_path,
)
from .rules import HOST_RULES, POSIX_RULES, WIN32_RULES, PathRules
from .schema import ParsedPath
from .views import PlatformView, get_view, posix, win32

__all__ = [
    "ensure_posix",
    "has_non_ascii",
    "is_extended_length_path",
    "basename",
    "delimiter",
    "dirname",
    "extname",
    "format",
    "is_absolute",
    "join",
    "normalize",
    "parse",
    "relative",
    "resolve",
    "sep",
    "to_namespaced_path",
    "native_basename",
    "native_delimiter",
    "native_dirname",
    "native_extname",
    "native_format",
    "native_is_absolute",
    "native_join",
    "native_normalize",
    "native_parse",
    "native_relative",
    "native_resolve",
    "native_sep",
    "native_to_namespaced_path",
    "HOST_RULES",
    "POSIX_RULES",
    "WIN32_RULES",
    "PathRules",
    "ParsedPath",
    "PlatformView",
    "get_view",
    "posix",
    "win32",
]
