"""Capability-tagged object path handles.

An :class:`ObjectHandle` pairs an object path with a static type
parameter naming the proxy the path is asserted to support, e.g.
``ObjectHandle[StationProxy]``. The tag exists for type checkers only:
construction never checks it, and ``str(handle)`` hands back the bare
path for use on the wire. A wrong assertion shows up as an ordinary
:class:`~pyiwd.exceptions.IwdCallError` when an operation is invoked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, Self, TypeVar

from pyiwd._transport import Bus


class FromObjectPath(Protocol):
    """A proxy type that can bind itself to an object path."""

    @classmethod
    async def from_path(cls, bus: Bus, path: str) -> Self:
        ...


P = TypeVar("P", bound=FromObjectPath)


@dataclass(frozen=True)
class ObjectHandle(Generic[P]):
    """An object path asserted to support capability ``P``."""

    path: str

    @classmethod
    def from_path(cls, path: str) -> ObjectHandle[P]:
        return cls(str(path))

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"ObjectHandle({self.path!r})"

    async def proxy(self, bus: Bus, proxy_type: type[P]) -> P:
        """Resolve into a live proxy bound to this path.

        Only transport failures are raised here.
        """
        return await proxy_type.from_path(bus, self.path)
