"""POSIX-forced path operations.

Every string result uses forward slashes, whatever the host platform or the
notation of the input. String-only operations coerce their arguments with
:func:`~crosspath.coercion.ensure_posix` and apply POSIX rules, so
``C:\\Users\\foo`` is split at its backslashes. An argument that keeps a
backslash after coercion (an extended-length or non-ASCII path) is handled
with Windows rules instead and comes back uncoerced.

:func:`resolve` and :func:`relative` depend on the working directory, so they
run the host primitive on the raw arguments and only coerce the result.
"""
from __future__ import annotations

from typing import Optional

from .coercion import ensure_posix
from .rules import HOST_RULES, POSIX_RULES, WIN32_RULES, PathArg, PathRules, RecordArg, fspath_str
from .schema import ParsedPath

sep = POSIX_RULES.sep
delimiter = POSIX_RULES.delimiter


def _rules_for(*paths: str) -> PathRules:
    if any("\\" in path for path in paths):
        return WIN32_RULES
    return POSIX_RULES


def _coerce_fields(record: ParsedPath) -> ParsedPath:
    return ParsedPath(
        root=ensure_posix(record.root),
        dir=ensure_posix(record.dir),
        base=ensure_posix(record.base),
        name=ensure_posix(record.name),
        ext=record.ext,
    )


def join(*paths: PathArg) -> str:
    """Join all segments and normalize the resulting path."""

    segments = [ensure_posix(path) for path in paths]
    return ensure_posix(_rules_for(*segments).join(*segments))


def normalize(path: PathArg) -> str:
    """Normalize ``path``, reducing ``..`` and ``.`` parts.

    Redundant separators collapse to one and a trailing separator is kept.
    An explicit leading ``./`` is kept too, so ``./foo`` stays ``./foo``.
    """

    coerced = ensure_posix(path)
    rules = _rules_for(coerced)
    normalized = rules.normalize(coerced)
    dot_prefix = "." + rules.sep
    if coerced.startswith(("./", dot_prefix)) and normalized not in (".", ".."):
        if not normalized.startswith((dot_prefix, ".." + rules.sep)):
            normalized = dot_prefix + normalized
    return ensure_posix(normalized)


def resolve(*paths: PathArg) -> str:
    """Resolve ``paths`` into an absolute path against the working directory."""

    return ensure_posix(HOST_RULES.resolve(*paths))


def relative(from_: PathArg, to: PathArg) -> str:
    """Return the relative path leading from ``from_`` to ``to``.

    This is the reverse of :func:`resolve`; both arguments are resolved first.
    """

    return ensure_posix(HOST_RULES.relative(from_, to))


def dirname(path: PathArg) -> str:
    coerced = ensure_posix(path)
    return ensure_posix(_rules_for(coerced).dirname(coerced))


def basename(path: PathArg, suffix: Optional[str] = None) -> str:
    coerced = ensure_posix(path)
    return ensure_posix(_rules_for(coerced).basename(coerced, suffix))


def extname(path: PathArg) -> str:
    coerced = ensure_posix(path)
    return _rules_for(coerced).extname(coerced)


def parse(path: PathArg) -> ParsedPath:
    """Split ``path`` into a :class:`ParsedPath` with forward-slash fields."""

    coerced = ensure_posix(path)
    return _coerce_fields(_rules_for(coerced).parse(coerced))


def format(record: RecordArg) -> str:  # noqa: A001
    """Build a forward-slash path string from a parsed record."""

    return POSIX_RULES.format(_coerce_fields(ParsedPath.coerce(record)))


def is_absolute(path: PathArg) -> bool:
    """Return ``True`` for ``/``-rooted, drive-rooted and UNC paths."""

    coerced = ensure_posix(path)
    return POSIX_RULES.is_absolute(coerced) or WIN32_RULES.is_absolute(coerced)


def to_namespaced_path(path: PathArg) -> str:
    """Return ``path`` unchanged; namespaced paths have no POSIX form."""

    return fspath_str(path)
