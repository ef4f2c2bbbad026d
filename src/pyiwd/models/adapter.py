"""Adapter model: one physical radio."""

from __future__ import annotations

from typing import ClassVar

from pydantic import StrictBool, StrictStr

from pyiwd._constants import ADAPTER_INTERFACE
from pyiwd.models._base import IwdBaseModel
from pyiwd.models.device import DeviceMode


class Adapter(IwdBaseModel):
    """Properties of ``net.connman.iwd.Adapter``."""

    INTERFACE: ClassVar[str] = ADAPTER_INTERFACE

    name: StrictStr
    """PHY name (e.g. ``"phy0"``)."""
    powered: StrictBool
    model: StrictStr | None = None
    vendor: StrictStr | None = None
    supported_modes: list[DeviceMode]
    """Modes the hardware supports, in the order the daemon lists them."""
