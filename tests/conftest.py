from __future__ import annotations

import copy
import inspect
from collections.abc import Callable
from typing import Any

import pytest

from pyiwd.exceptions import IwdCallError

ROOT_PATH = "/net/connman/iwd"
ADAPTER_PATH = "/net/connman/iwd/0"
STATION_PATH = "/net/connman/iwd/0/4"
HOME_PATH = "/net/connman/iwd/0/4/486f6d65_psk"
CAFE_PATH = "/net/connman/iwd/0/4/43616665_open"
OFFICE_PATH = "/net/connman/iwd/0/4/4f6666696365_8021x"
KNOWN_HOME_PATH = "/net/connman/iwd/486f6d65_psk"

STATION_PROPS: dict[str, Any] = {
    "State": "connected",
    "ConnectedNetwork": HOME_PATH,
    "Scanning": False,
}
DEVICE_PROPS: dict[str, Any] = {
    "Name": "wlan0",
    "Address": "8c:c6:81:2a:10:3e",
    "Powered": True,
    "Adapter": ADAPTER_PATH,
    "Mode": "station",
}
NETWORK_PROPS: dict[str, Any] = {
    "Name": "Home",
    "Type": "psk",
    "Connected": True,
    "Device": STATION_PATH,
    "KnownNetwork": KNOWN_HOME_PATH,
}
KNOWN_NETWORK_PROPS: dict[str, Any] = {
    "Name": "Home",
    "Type": "psk",
    "Hidden": False,
    "LastConnectedTime": "2026-10-18T21:04:11Z",
    "AutoConnect": True,
}
ADAPTER_PROPS: dict[str, Any] = {
    "Name": "phy0",
    "Powered": True,
    "Model": "Wireless 8265 / 8275",
    "Vendor": "Intel Corporation",
    "SupportedModes": ["ad-hoc", "station", "ap"],
}

MANAGED_OBJECTS: dict[str, dict[str, dict[str, Any]]] = {
    ROOT_PATH: {
        "net.connman.iwd.AgentManager": {},
        "org.freedesktop.DBus.Properties": {},
    },
    ADAPTER_PATH: {
        "net.connman.iwd.Adapter": ADAPTER_PROPS,
        "org.freedesktop.DBus.Properties": {},
    },
    STATION_PATH: {
        "net.connman.iwd.Device": DEVICE_PROPS,
        "net.connman.iwd.Station": STATION_PROPS,
        "net.connman.iwd.SimpleConfiguration": {},
        "org.freedesktop.DBus.Properties": {},
    },
    HOME_PATH: {
        "net.connman.iwd.Network": NETWORK_PROPS,
    },
    CAFE_PATH: {
        "net.connman.iwd.Network": {
            "Name": "Cafe",
            "Type": "open",
            "Connected": False,
            "Device": STATION_PATH,
        },
    },
    OFFICE_PATH: {
        "net.connman.iwd.Network": {
            "Name": "Office",
            "Type": "8021x",
            "Connected": False,
            "Device": STATION_PATH,
        },
    },
    KNOWN_HOME_PATH: {
        "net.connman.iwd.KnownNetwork": KNOWN_NETWORK_PROPS,
    },
}

ORDERED_NETWORKS: list[tuple[str, int]] = [
    (HOME_PATH, -4500),
    (OFFICE_PATH, -6200),
    (CAFE_PATH, -7800),
]


class FakeRemote:
    def __init__(self, bus: FakeBus, path: str, interface: str) -> None:
        self._bus = bus
        self.path = path
        self.interface = interface

    async def call(self, method: str, *args: Any) -> Any:
        self._bus.calls.append((self.path, self.interface, method))
        handler = self._bus.handlers.get((self.interface, method))
        if handler is None:
            raise IwdCallError(
                f"No such method {self.interface}.{method} on {self.path}",
                name="org.freedesktop.DBus.Error.UnknownMethod",
                path=self.path,
                interface=self.interface,
                method=method,
            )
        result = handler(self.path, *args)
        if inspect.isawaitable(result):
            result = await result
        return result


class FakeBus:
    """In-memory bus: handlers keyed by (interface, method)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self.resolved: list[tuple[str, str]] = []
        self.handlers: dict[tuple[str, str], Callable[..., Any]] = {}
        self.closed = False

    def on(self, interface: str, method: str, handler: Callable[..., Any]) -> None:
        self.handlers[(interface, method)] = handler

    def methods_called(self) -> list[str]:
        return [method for _path, _interface, method in self.calls]

    async def get_interface(self, path: str, interface: str) -> FakeRemote:
        self.resolved.append((path, interface))
        return FakeRemote(self, path, interface)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def managed_objects() -> dict[str, dict[str, dict[str, Any]]]:
    return copy.deepcopy(MANAGED_OBJECTS)


@pytest.fixture
def bus(managed_objects: dict[str, dict[str, dict[str, Any]]]) -> FakeBus:
    fake = FakeBus()
    fake.on("org.freedesktop.DBus.ObjectManager", "GetManagedObjects", lambda _path: managed_objects)
    fake.on("net.connman.iwd.Station", "Scan", lambda _path: None)
    fake.on("net.connman.iwd.Station", "GetOrderedNetworks", lambda _path: list(ORDERED_NETWORKS))
    return fake
