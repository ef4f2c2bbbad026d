"""Base model and enum for iwd property bags.

Every interface record inherits from :class:`IwdBaseModel` which
provides:

* ``alias_generator=to_pascal`` so the PascalCase D-Bus property names
  map automatically to snake_case fields.
* ``extra="allow"`` so properties added by newer daemons survive a
  decode and are emitted again by :meth:`IwdBaseModel.to_properties`.
* Wire names only: a snake_case key is an unknown property, not a
  stand-in for the PascalCase one.
* Strict string/boolean types: D-Bus is statically typed, a ``"true"``
  where a ``b`` is expected is a schema violation, not something to coerce.

Enumerations inherit from :class:`IwdEnum`. Unlike open-ended state
codes, iwd's enumerations are closed: a value without a member is a
decode error for the whole object.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_pascal

_OBJECT_PATH_PATTERN = r"^/([A-Za-z0-9_]+(/[A-Za-z0-9_]+)*)?$"

ObjectPath = Annotated[str, StringConstraints(strict=True, pattern=_OBJECT_PATH_PATTERN)]
"""A D-Bus object path (``o``), validated against the path grammar."""


class IwdEnum(StrEnum):
    """Base for iwd string enumerations (matched case-sensitively)."""


class IwdBaseModel(BaseModel):
    """Base for typed iwd interface records."""

    INTERFACE: ClassVar[str]
    """Exact D-Bus interface name this record decodes."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_pascal,
    )

    def to_properties(self) -> dict[str, Any]:
        """Re-encode as a D-Bus property bag.

        Absent optional properties are omitted, the same way the daemon
        omits them, and unrecognized properties are emitted unchanged.
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def field_for_property(cls, property_name: str) -> str | None:
        """Return the logical field name for a wire *property_name*."""
        for name, info in cls.model_fields.items():
            if property_name in (info.alias, name):
                return name
        return None
