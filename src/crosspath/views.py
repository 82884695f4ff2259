"""The ``posix`` and ``win32`` platform views.

Each view bundles one complete operation set. ``view.posix`` and
``view.win32`` navigate between the two singletons, so any chain of accessors
ends at one of them: ``posix.win32.posix is posix``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from . import facade
from .rules import HOST_RULES, WIN32_RULES, PathArg, RecordArg
from .schema import ParsedPath
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


class PlatformView:
    """Operation set bound to one path flavour."""

    def __init__(self, name: str, operations: Any) -> None:
        self.name = name
        self._operations = operations

    def __repr__(self) -> str:
        return f"<PlatformView {self.name}>"

    @property
    def posix(self) -> "PlatformView":
        # looked up on access; the views keep no reference to each other
        return posix

    @property
    def win32(self) -> "PlatformView":
        return win32

    @property
    def sep(self) -> str:
        return self._operations.sep

    @property
    def delimiter(self) -> str:
        return self._operations.delimiter

    def join(self, *paths: PathArg) -> str:
        return self._operations.join(*paths)

    def normalize(self, path: PathArg) -> str:
        return self._operations.normalize(path)

    def resolve(self, *paths: PathArg) -> str:
        return self._operations.resolve(*paths)

    def relative(self, from_: PathArg, to: PathArg) -> str:
        return self._operations.relative(from_, to)

    def dirname(self, path: PathArg) -> str:
        return self._operations.dirname(path)

    def basename(self, path: PathArg, suffix: Optional[str] = None) -> str:
        return self._operations.basename(path, suffix)

    def extname(self, path: PathArg) -> str:
        return self._operations.extname(path)

    def parse(self, path: PathArg) -> ParsedPath:
        return self._operations.parse(path)

    def format(self, record: RecordArg) -> str:
        return self._operations.format(record)

    def is_absolute(self, path: PathArg) -> bool:
        return self._operations.is_absolute(path)

    def to_namespaced_path(self, path: PathArg) -> str:
        return self._operations.to_namespaced_path(path)


posix = PlatformView("posix", facade)
win32 = PlatformView("win32", WIN32_RULES)
# Entry point only: not reachable from posix or win32.
native = PlatformView("native", HOST_RULES)

_VIEWS: Dict[str, PlatformView] = {"posix": posix, "win32": win32, "native": native}


def get_view(name: str) -> PlatformView:
    """Return the view called ``name`` (``posix``, ``win32`` or ``native``)."""

    try:
        view = _VIEWS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown view {name!r}; expected one of {sorted(_VIEWS)}") from None
    LOGGER.debug("Selected %r view", view.name)
    return view
