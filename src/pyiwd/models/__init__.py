"""Typed records for iwd D-Bus interfaces."""

from pyiwd.models._base import IwdBaseModel, IwdEnum, ObjectPath
from pyiwd.models.adapter import Adapter
from pyiwd.models.device import Device, DeviceMode
from pyiwd.models.network import KnownNetwork, Network, SecurityType
from pyiwd.models.station import OrderedNetwork, Station, StationState

__all__ = [
    "Adapter",
    "Device",
    "DeviceMode",
    "IwdBaseModel",
    "IwdEnum",
    "KnownNetwork",
    "Network",
    "ObjectPath",
    "OrderedNetwork",
    "SecurityType",
    "Station",
    "StationState",
]
