"""Device model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictBool, StrictStr

from pyiwd._constants import DEVICE_INTERFACE
from pyiwd.models._base import IwdBaseModel, IwdEnum, ObjectPath


class DeviceMode(IwdEnum):
    AD_HOC = "ad-hoc"
    STATION = "station"
    ACCESS_POINT = "ap"


class Device(IwdBaseModel):
    """Properties of ``net.connman.iwd.Device``."""

    INTERFACE: ClassVar[str] = DEVICE_INTERFACE

    name: StrictStr
    """Interface name (e.g. ``"wlan0"``)."""
    address: StrictStr
    """Hardware (MAC) address."""
    powered: StrictBool
    adapter: ObjectPath
    """Path of the owning adapter."""
    mode: DeviceMode
