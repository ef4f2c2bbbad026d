"""High-level async client for the iwd wireless daemon."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from pyiwd._transport import Bus
from pyiwd.catalog import ObjectCatalog, build_catalog
from pyiwd.config import IwdConfig
from pyiwd.exceptions import IwdError, IwdTransportError
from pyiwd.objects import ObjectBundle, decode_managed_objects
from pyiwd.proxies import ObjectManagerProxy, StationProxy
from pyiwd.ranking import RankedNetwork, join_ranked

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class IwdClient:
    """Async client for the iwd D-Bus API.

    Usage::

        async with IwdClient(config) as client:
            for network in await client.list_networks():
                print(network.name)
    """

    def __init__(
        self,
        config: IwdConfig | None = None,
        *,
        bus: Bus | None = None,
    ) -> None:
        self._config = config or IwdConfig()
        self._external_bus = bus is not None
        self._bus = bus
        self._closing: set[asyncio.Task[None]] = set()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> IwdClient:
        if self._bus is None:
            self._bus = await self._connect()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_bus and self._bus is not None:
            bus = self._bus
            self._bus = None
            await bus.close()

    async def _connect(self) -> Bus:
        # Imported here so test doubles never need dbus-python.
        from pyiwd._dbus import SystemBusTransport

        # The connect thread cannot be interrupted; shield it so a late
        # connection is still handed to us and closed.
        pending = asyncio.ensure_future(SystemBusTransport.connect(self._config))
        try:
            return await asyncio.wait_for(asyncio.shield(pending), timeout=self._config.call_timeout)
        except TimeoutError as exc:
            pending.add_done_callback(self._close_abandoned)
            raise IwdTransportError(f"connect timed out after {self._config.call_timeout}s") from exc

    def _close_abandoned(self, pending: asyncio.Future[Bus]) -> None:
        if pending.cancelled() or pending.exception() is not None:
            return
        _logger.debug("Closing connection that arrived after connect timed out")
        task = asyncio.ensure_future(pending.result().close())
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_bus(self) -> Bus:
        if self._bus is None:
            raise IwdError("Client not initialized. Use 'async with IwdClient(...) as client:'")
        return self._bus

    async def _bounded(self, call: Awaitable[T], what: str) -> T:
        """Await *call* within ``call_timeout``; expiry is a transport failure."""
        try:
            return await asyncio.wait_for(call, timeout=self._config.call_timeout)
        except TimeoutError as exc:
            raise IwdTransportError(f"{what} timed out after {self._config.call_timeout}s") from exc

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    async def get_managed_objects(self) -> dict[str, ObjectBundle]:
        """Fetch and decode every object the daemon manages."""
        bus = self._require_bus()
        manager = await self._bounded(ObjectManagerProxy.from_path(bus), "resolve object manager")
        objects = await self._bounded(manager.get_managed_objects(), "GetManagedObjects")
        return decode_managed_objects(objects, skip_invalid=self._config.skip_invalid_objects)

    async def get_catalog(self) -> ObjectCatalog:
        """Enumerate objects and classify them."""
        bundles = await self.get_managed_objects()
        return build_catalog(bundles, selection=self._config.station_selection)

    # ------------------------------------------------------------------
    # Station
    # ------------------------------------------------------------------

    async def get_station(self, catalog: ObjectCatalog | None = None) -> StationProxy | None:
        """Resolve the station proxy, or ``None`` if no object qualifies."""
        if catalog is None:
            catalog = await self.get_catalog()
        if catalog.station is None:
            return None
        return await self._bounded(catalog.station.proxy(self._require_bus(), StationProxy), "resolve station")

    async def scan(self, station: StationProxy) -> bool:
        """Request a scan; failures are logged and reported as ``False``.

        Results from an earlier scan may still be valid, so a failed
        scan must not stop the caller from listing networks.
        """
        try:
            await self._bounded(station.scan(), "Scan")
        except IwdError as exc:
            _logger.warning("Scan on %s failed: %s", station.path, exc)
            return False
        return True

    async def list_networks(self) -> list[RankedNetwork]:
        """Enumerate, scan, and return visible networks in the daemon's ranked order.

        Returns an empty list, without scanning, when there is no station.
        """
        catalog = await self.get_catalog()
        station = await self.get_station(catalog)
        if station is None:
            _logger.info("No station object found")
            return []
        if self._config.scan:
            await self.scan(station)
        ordered = await self._bounded(station.get_ordered_networks(), "GetOrderedNetworks")
        return join_ranked(ordered, catalog.networks)
