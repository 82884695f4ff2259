"""Pydantic model describing a path split into its components."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict


class ParsedPath(BaseModel):
    """The ``root``/``dir``/``base``/``name``/``ext`` decomposition of a path.

    ``base`` is always ``name + ext``. Instances are immutable; use
    :meth:`pydantic.BaseModel.model_copy` to derive a modified record.
    """

    model_config = ConfigDict(frozen=True)

    root: str = ""
    dir: str = ""
    base: str = ""
    name: str = ""
    ext: str = ""

    @classmethod
    def coerce(cls, record: Union["ParsedPath", Mapping[str, Any]]) -> "ParsedPath":
        """Return ``record`` as a :class:`ParsedPath`, validating plain mappings."""

        if isinstance(record, cls):
            return record
        return cls.model_validate(dict(record))

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump()
