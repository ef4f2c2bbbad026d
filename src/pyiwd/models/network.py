"""Network and known-network models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, StrictBool, StrictStr

from pyiwd._constants import KNOWN_NETWORK_INTERFACE, NETWORK_INTERFACE
from pyiwd.models._base import IwdBaseModel, IwdEnum, ObjectPath


class SecurityType(IwdEnum):
    OPEN = "open"
    WEP = "wep"
    PSK = "psk"
    ENTERPRISE = "8021x"
    HOTSPOT = "hotspot"


class Network(IwdBaseModel):
    """Properties of ``net.connman.iwd.Network``.

    One object per visible SSID/security pair, owned by a device.
    """

    INTERFACE: ClassVar[str] = NETWORK_INTERFACE

    name: StrictStr
    """Network SSID, decoded for display."""
    security: SecurityType = Field(alias="Type")
    connected: StrictBool
    device: ObjectPath
    """Path of the device that sees this network."""
    known_network: ObjectPath | None = None
    """Path of the stored profile, present when the network is known."""

    @property
    def is_known(self) -> bool:
        return self.known_network is not None


class KnownNetwork(IwdBaseModel):
    """Properties of ``net.connman.iwd.KnownNetwork``."""

    INTERFACE: ClassVar[str] = KNOWN_NETWORK_INTERFACE

    name: StrictStr
    security: SecurityType = Field(alias="Type")
    hidden: StrictBool
    last_connected_time: StrictStr
    """ISO 8601 timestamp as sent by the daemon; kept as text."""
    auto_connect: StrictBool
