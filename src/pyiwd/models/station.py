"""Station model: connection management for one radio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pydantic import StrictBool

from pyiwd._constants import STATION_INTERFACE
from pyiwd.models._base import IwdBaseModel, IwdEnum, ObjectPath


class StationState(IwdEnum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    DISCONNECTING = "disconnecting"
    ROAMING = "roaming"


class Station(IwdBaseModel):
    """Properties of ``net.connman.iwd.Station``."""

    INTERFACE: ClassVar[str] = STATION_INTERFACE

    state: StationState
    connected_network: ObjectPath | None = None
    """Path of the network currently connected to, if any."""
    scanning: StrictBool

    @property
    def is_connected(self) -> bool:
        return self.state is StationState.CONNECTED


@dataclass(frozen=True, slots=True)
class OrderedNetwork:
    """One entry of ``GetOrderedNetworks``.

    ``signal`` is on the daemon's own scale (dBm * 100); only the
    relative order carries meaning.
    """

    path: str
    signal: int
