"""Complete path primitive sets built on :mod:`posixpath` and :mod:`ntpath`.

The standard library flavour modules have no ``parse``/``format`` pair and
differ from the conventions used throughout crosspath on several edges:
``dirname("a")`` is ``""`` rather than ``"."``, trailing separators hide the
base name, and ``join`` restarts at an absolute segment. :class:`PathRules`
wraps one flavour module and provides the full operation set with the
following conventions:

* ``join`` concatenates every non-empty segment and normalizes the result.
* ``normalize`` keeps a trailing separator and maps ``""`` to ``"."``.
* ``dirname``, ``basename``, ``extname`` and ``parse`` ignore trailing
  separators.
* ``relative`` returns ``""`` for identical paths.
"""
from __future__ import annotations

import ntpath
import os
import posixpath
from types import ModuleType
from typing import Any, Mapping, Optional, Tuple, Union

from .schema import ParsedPath
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

PathArg = Union[str, "os.PathLike[str]"]
RecordArg = Union[ParsedPath, Mapping[str, Any]]


def fspath_str(value: Any, name: str = "path") -> str:
    """Return ``value`` as ``str``, accepting ``os.PathLike`` objects.

    Raises :class:`TypeError` for anything else, including ``bytes``.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        result = os.fspath(value)
        if isinstance(result, str):
            return result
    raise TypeError(
        f'The "{name}" argument must be of type str or os.PathLike[str]; got {type(value).__name__}'
    )


class PathRules:
    """Path operations following the rules of one flavour module."""

    def __init__(self, flavour: ModuleType) -> None:
        self._flavour = flavour
        self.name = "win32" if flavour is ntpath else "posix"
        self.sep: str = flavour.sep
        self.delimiter: str = flavour.pathsep
        self._separators: Tuple[str, ...] = ("\\", "/") if flavour is ntpath else ("/",)

    def __repr__(self) -> str:
        return f"PathRules({self.name!r})"

    def _strip_trailing(self, path: str) -> str:
        drive, rest = self._flavour.splitdrive(path)
        stripped = rest.rstrip("".join(self._separators))
        if rest and not stripped:
            stripped = rest[0]
        return drive + stripped

    def join(self, *paths: PathArg) -> str:
        segments = [fspath_str(path, f"paths[{index}]") for index, path in enumerate(paths)]
        joined = ""
        for segment in segments:
            if not segment:
                continue
            if not joined:
                joined = segment
            elif joined.endswith(self._separators):
                # keep a root segment from doubling the separator
                joined += segment.lstrip("".join(self._separators))
            else:
                joined += self.sep + segment
        if not joined:
            return "."
        return self.normalize(joined)

    def normalize(self, path: PathArg) -> str:
        path = fspath_str(path)
        if not path:
            return "."
        normalized = self._flavour.normpath(path)
        if self._flavour is posixpath and normalized.startswith("//"):
            # normpath keeps exactly two leading slashes
            normalized = normalized[1:]
        if path.endswith(self._separators) and not normalized.endswith(self._separators):
            normalized += self.sep
        return normalized

    def resolve(self, *paths: PathArg) -> str:
        """Resolve ``paths`` right to left into an absolute path.

        Segments before the last absolute one are ignored; if none is
        absolute, the current working directory is prepended.
        """

        segments = [fspath_str(path, f"paths[{index}]") for index, path in enumerate(paths)]
        return self._flavour.abspath(self._flavour.join("", *segments))

    def relative(self, from_: PathArg, to: PathArg) -> str:
        start = self.resolve(fspath_str(from_, "from_"))
        target = self.resolve(fspath_str(to, "to"))
        if start == target:
            return ""
        try:
            result = self._flavour.relpath(target, start)
        except ValueError:
            # different drives
            LOGGER.debug("No relative path from %s to %s; returning target", start, target)
            return target
        return "" if result == "." else result

    def dirname(self, path: PathArg) -> str:
        path = fspath_str(path)
        if not path:
            return "."
        return self._flavour.dirname(self._strip_trailing(path)) or "."

    def basename(self, path: PathArg, suffix: Optional[str] = None) -> str:
        base = self._flavour.basename(self._strip_trailing(fspath_str(path)))
        if suffix is not None:
            suffix = fspath_str(suffix, "suffix")
            if suffix and suffix != base and base.endswith(suffix):
                base = base[: -len(suffix)]
        return base

    def extname(self, path: PathArg) -> str:
        return self._flavour.splitext(self.basename(path))[1]

    def parse(self, path: PathArg) -> ParsedPath:
        path = fspath_str(path)
        if not path:
            return ParsedPath()
        drive, rest = self._flavour.splitdrive(path)
        root = drive + rest[0] if rest.startswith(self._separators) else drive
        stripped = self._strip_trailing(path)
        base = self._flavour.basename(stripped)
        name, ext = self._flavour.splitext(base)
        return ParsedPath(
            root=root,
            dir=self._flavour.dirname(stripped),
            base=base,
            name=name,
            ext=ext,
        )

    def format(self, record: RecordArg) -> str:
        parsed = ParsedPath.coerce(record)
        directory = parsed.dir or parsed.root
        base = parsed.base or f"{parsed.name}{parsed.ext}"
        if not directory:
            return base
        if directory == parsed.root:
            return directory + base
        return directory + self.sep + base

    def is_absolute(self, path: PathArg) -> bool:
        path = fspath_str(path)
        if path.startswith(self._separators):
            return True
        if self._flavour is ntpath:
            return ntpath.splitdrive(path)[1].startswith(self._separators)
        return False

    def to_namespaced_path(self, path: PathArg) -> str:
        """Return the ``\\\\?\\`` form of an absolute Windows path.

        POSIX rules have no namespaced form and return ``path`` unchanged, as
        do relative paths under Windows rules.
        """

        path = fspath_str(path)
        if self._flavour is not ntpath or not self.is_absolute(path):
            return path
        resolved = ntpath.normpath(path)
        if resolved.startswith("\\\\"):
            if resolved[2:3] not in ("?", "."):
                return "\\\\?\\UNC\\" + resolved[2:]
        elif resolved[:1].isalpha() and resolved[1:3] == ":\\":
            return "\\\\?\\" + resolved
        return path


POSIX_RULES = PathRules(posixpath)
WIN32_RULES = PathRules(ntpath)
HOST_RULES = PathRules(os.path)
