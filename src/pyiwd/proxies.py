"""Live proxies for the remote operations pyiwd invokes."""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import StrictInt, TypeAdapter, ValidationError

from pyiwd._constants import OBJECT_MANAGER_INTERFACE, ROOT_PATH, STATION_INTERFACE
from pyiwd._transport import Bus, RemoteInterface
from pyiwd.exceptions import IwdDecodeError
from pyiwd.models import ObjectPath, OrderedNetwork

_logger = logging.getLogger(__name__)

_ORDERED_NETWORKS = TypeAdapter(list[tuple[ObjectPath, StrictInt]])


class ObjectManagerProxy:
    """``org.freedesktop.DBus.ObjectManager`` on the daemon's root object."""

    def __init__(self, remote: RemoteInterface) -> None:
        self._remote = remote

    @classmethod
    async def from_path(cls, bus: Bus, path: str = ROOT_PATH) -> Self:
        return cls(await bus.get_interface(path, OBJECT_MANAGER_INTERFACE))

    async def get_managed_objects(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Return every object path with its interfaces and raw property bags."""
        reply = await self._remote.call("GetManagedObjects")
        if not isinstance(reply, dict):
            raise IwdDecodeError(
                f"GetManagedObjects returned {type(reply).__name__}, expected a mapping",
                interface=OBJECT_MANAGER_INTERFACE,
                value=reply,
            )
        return reply


class StationProxy:
    """``net.connman.iwd.Station`` operations on one station object."""

    def __init__(self, remote: RemoteInterface, path: str) -> None:
        self._remote = remote
        self.path = path

    @classmethod
    async def from_path(cls, bus: Bus, path: str) -> Self:
        return cls(await bus.get_interface(path, STATION_INTERFACE), path)

    async def scan(self) -> None:
        """Request a scan. Returns once the daemon has accepted the request."""
        await self._remote.call("Scan")

    async def get_ordered_networks(self) -> list[OrderedNetwork]:
        """Return visible networks, best first, in the daemon's own order."""
        reply = await self._remote.call("GetOrderedNetworks")
        try:
            entries = _ORDERED_NETWORKS.validate_python(reply)
        except ValidationError as exc:
            raise IwdDecodeError(
                f"GetOrderedNetworks on {self.path} returned a malformed reply: {exc.errors()[0]['msg']}",
                interface=STATION_INTERFACE,
                field="ordered_networks",
                value=reply,
                path=self.path,
            ) from exc
        _logger.debug("Station %s reports %d ordered networks", self.path, len(entries))
        return [OrderedNetwork(path=path, signal=signal) for path, signal in entries]
