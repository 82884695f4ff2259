"""Backslash to forward-slash coercion of path strings."""
from __future__ import annotations

import re

from .rules import PathArg, fspath_str
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

EXTENDED_LENGTH_PREFIX = "\\\\?\\"
# U+0080 counts as "ASCII" here; the check is a heuristic, not a Unicode test.
_NON_ASCII = re.compile(r"[^\x00-\x80]")


def is_extended_length_path(path: str) -> bool:
    """Return ``True`` for Windows verbatim paths such as ``\\\\?\\C:\\x``."""

    return path.startswith(EXTENDED_LENGTH_PREFIX)


def has_non_ascii(path: str) -> bool:
    return _NON_ASCII.search(path) is not None


def ensure_posix(path: PathArg) -> str:
    """Return ``path`` with every backslash replaced by a forward slash.

    Extended-length paths and paths containing non-ASCII characters are
    returned unchanged: rewriting either could corrupt a path that is already
    meaningful as written.
    """

    path = fspath_str(path)
    if is_extended_length_path(path) or has_non_ascii(path):
        LOGGER.debug("Leaving %r uncoerced", path)
        return path
    return path.replace("\\", "/")
