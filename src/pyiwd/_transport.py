"""Structural bus interfaces used by proxies and the client.

Having protocols here makes it easy to pass test doubles while keeping
the production implementation (:class:`pyiwd._dbus.SystemBusTransport`)
concrete.
"""

from __future__ import annotations

from typing import Any, Protocol


class RemoteInterface(Protocol):
    """One interface on one remote object, ready for method calls."""

    async def call(self, method: str, *args: Any) -> Any:
        """Invoke *method* and return its reply converted to plain Python values."""
        ...


class Bus(Protocol):
    """A live bus connection to the wireless daemon."""

    async def get_interface(self, path: str, interface: str) -> RemoteInterface:
        ...

    async def close(self) -> None:
        ...
