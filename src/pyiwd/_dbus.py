"""dbus-python backed bus transport.

dbus-python calls block, so each one runs in a worker thread. Replies
are converted from ``dbus.*`` wrapper types to plain Python values
before they leave this module.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import dbus
import dbus.bus

from pyiwd._constants import TRANSPORT_ERROR_NAMES
from pyiwd.config import IwdConfig
from pyiwd.exceptions import IwdCallError, IwdTransportError

_logger = logging.getLogger(__name__)


def dbus_to_python(value: Any) -> Any:
    """Recursively unwrap ``dbus.*`` values into builtin types."""
    # dbus.Boolean subclasses int; check it first.
    if isinstance(value, dbus.Boolean):
        return bool(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, dict):
        return {dbus_to_python(k): dbus_to_python(v) for k, v in value.items()}
    if isinstance(value, (dbus.Struct, tuple)):
        return tuple(dbus_to_python(v) for v in value)
    if isinstance(value, list):
        return [dbus_to_python(v) for v in value]
    return value


class _DBusInterface:
    """A ``dbus.Interface`` with async, timeout-bounded calls."""

    def __init__(self, iface: dbus.Interface, path: str, interface: str, timeout: float) -> None:
        self._iface = iface
        self._path = path
        self._interface = interface
        self._timeout = timeout

    async def call(self, method: str, *args: Any) -> Any:
        _logger.debug("CALL %s %s.%s", self._path, self._interface, method)
        bound = getattr(self._iface, method)
        try:
            reply = await asyncio.to_thread(bound, *args, timeout=self._timeout)
        except dbus.exceptions.DBusException as exc:
            name = exc.get_dbus_name() or ""
            message = f"{self._interface}.{method} on {self._path} failed: {exc.get_dbus_message() or name}"
            if name in TRANSPORT_ERROR_NAMES:
                raise IwdTransportError(message, name=name, path=self._path) from exc
            raise IwdCallError(
                message,
                name=name,
                path=self._path,
                interface=self._interface,
                method=method,
            ) from exc
        return dbus_to_python(reply)


class SystemBusTransport:
    """Bus connection used by :class:`pyiwd.client.IwdClient` in production."""

    def __init__(self, config: IwdConfig, connection: dbus.bus.BusConnection) -> None:
        self._config = config
        self._connection = connection

    @classmethod
    async def connect(cls, config: IwdConfig) -> SystemBusTransport:
        """Open a private connection to the system bus (or ``config.bus_address``)."""
        try:
            if config.bus_address:
                connection = await asyncio.to_thread(dbus.bus.BusConnection, config.bus_address)
            else:
                connection = await asyncio.to_thread(dbus.SystemBus, private=True)
        except dbus.exceptions.DBusException as exc:
            raise IwdTransportError(
                f"Cannot connect to D-Bus: {exc.get_dbus_message() or exc}",
                name=exc.get_dbus_name() or "",
            ) from exc
        _logger.debug("Connected to D-Bus (%s)", config.bus_address or "system bus")
        return cls(config, connection)

    async def get_interface(self, path: str, interface: str) -> _DBusInterface:
        # No introspection: a wrong capability surfaces at call time.
        # get_object still resolves the name owner, a blocking round trip.
        try:
            proxy = await asyncio.to_thread(
                self._connection.get_object,
                self._config.service,
                path,
                introspect=False,
            )
        except dbus.exceptions.DBusException as exc:
            raise IwdTransportError(
                f"Cannot reach {self._config.service} at {path}: {exc.get_dbus_message() or exc}",
                name=exc.get_dbus_name() or "",
                path=path,
            ) from exc
        iface = dbus.Interface(proxy, dbus_interface=interface)
        return _DBusInterface(iface, path, interface, self._config.call_timeout)

    async def close(self) -> None:
        self._connection.close()
