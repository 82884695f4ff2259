"""Host-platform path operations with no coercion applied."""
from __future__ import annotations

from typing import Optional

from .rules import HOST_RULES, PathArg, RecordArg
from .schema import ParsedPath

native_sep = HOST_RULES.sep
native_delimiter = HOST_RULES.delimiter


def native_is_absolute(path: PathArg) -> bool:
    return HOST_RULES.is_absolute(native_normalize(path))


def native_normalize(path: PathArg) -> str:
    return HOST_RULES.normalize(path)


def native_dirname(path: PathArg) -> str:
    return HOST_RULES.dirname(path)


def native_join(*paths: PathArg) -> str:
    return HOST_RULES.join(*paths)


def native_parse(path: PathArg) -> ParsedPath:
    return HOST_RULES.parse(native_normalize(path))


def native_format(record: RecordArg) -> str:
    formatted = HOST_RULES.format(record)
    # an empty record formats to "", which normalize would turn into "."
    return native_normalize(formatted) if formatted else formatted


def native_resolve(*paths: PathArg) -> str:
    return native_normalize(HOST_RULES.resolve(*paths))


def native_basename(path: PathArg, suffix: Optional[str] = None) -> str:
    return HOST_RULES.basename(path, suffix)


def native_extname(path: PathArg) -> str:
    return HOST_RULES.extname(path)


def native_relative(from_: PathArg, to: PathArg) -> str:
    return HOST_RULES.relative(from_, to)


def native_to_namespaced_path(path: PathArg) -> str:
    return HOST_RULES.to_namespaced_path(path)
