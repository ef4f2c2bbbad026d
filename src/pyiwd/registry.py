"""Capability registry: the closed set of typed iwd interfaces.

Each :class:`Capability` ties one exact D-Bus interface name to the
record that decodes its property bag and to the :class:`ObjectBundle`
slot the record lands in. The set is fixed at import time; interfaces
outside it are carried as raw property bags.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from pyiwd.exceptions import IwdDecodeError
from pyiwd.models import Adapter, Device, KnownNetwork, Network, Station
from pyiwd.models._base import IwdBaseModel


@dataclass(frozen=True, slots=True)
class Capability:
    """A typed interface schema."""

    interface: str
    model: type[IwdBaseModel]
    slot: str

    def decode(self, properties: Mapping[str, Any], *, path: str | None = None) -> IwdBaseModel:
        """Decode one property bag, raising :class:`IwdDecodeError` on any schema violation."""
        try:
            return self.model.model_validate(properties)
        except ValidationError as exc:
            raise _to_decode_error(self, exc, path) from exc


def _to_decode_error(capability: Capability, exc: ValidationError, path: str | None) -> IwdDecodeError:
    # Report the first violation only; the whole bag is rejected either way.
    error = exc.errors()[0]
    loc = error.get("loc", ())
    where = f" on {path}" if path else ""
    if not loc:
        return IwdDecodeError(
            f"{capability.interface}{where}: expected a property mapping, got {type(error.get('input')).__name__}",
            interface=capability.interface,
            value=error.get("input"),
            path=path,
        )

    property_name = str(loc[0])
    field = capability.model.field_for_property(property_name) or property_name
    if error["type"] == "missing":
        return IwdDecodeError(
            f"{capability.interface}{where}: missing required field {field!r}",
            interface=capability.interface,
            field=field,
            path=path,
        )

    value = error.get("input")
    return IwdDecodeError(
        f"{capability.interface}{where}: invalid value {value!r} for field {field!r} ({error['msg']})",
        interface=capability.interface,
        field=field,
        value=value,
        path=path,
    )


STATION = Capability(Station.INTERFACE, Station, "station")
DEVICE = Capability(Device.INTERFACE, Device, "device")
NETWORK = Capability(Network.INTERFACE, Network, "network")
KNOWN_NETWORK = Capability(KnownNetwork.INTERFACE, KnownNetwork, "known_network")
ADAPTER = Capability(Adapter.INTERFACE, Adapter, "adapter")

CAPABILITIES: tuple[Capability, ...] = (STATION, DEVICE, NETWORK, KNOWN_NETWORK, ADAPTER)

_BY_INTERFACE: dict[str, Capability] = {capability.interface: capability for capability in CAPABILITIES}

RECOGNIZED_INTERFACES: frozenset[str] = frozenset(_BY_INTERFACE)


def lookup_capability(interface: str) -> Capability | None:
    """Return the capability for *interface*, or ``None`` if it has no schema."""
    return _BY_INTERFACE.get(interface)
