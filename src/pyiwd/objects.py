"""Object decoder: one object's interfaces to a typed :class:`ObjectBundle`.

A ``GetManagedObjects`` reply maps every object path to a mapping of
interface name to property bag. Recognized interfaces are decoded into
their typed record; everything else is kept verbatim in ``rest``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from pyiwd.exceptions import IwdDecodeError
from pyiwd.models import Adapter, Device, KnownNetwork, Network, Station
from pyiwd.models._base import IwdBaseModel
from pyiwd.registry import lookup_capability

_logger = logging.getLogger(__name__)

PropertyBag: TypeAlias = Mapping[str, Any]
InterfaceMap: TypeAlias = Mapping[str, PropertyBag] | Iterable[tuple[str, PropertyBag]]
ManagedObjects: TypeAlias = Mapping[str, InterfaceMap]


@dataclass(frozen=True, slots=True)
class ObjectBundle:
    """Every interface of one remote object.

    Each typed slot holds the decoded record for its interface, or
    ``None`` when the object does not expose it. ``rest`` maps the
    names of unrecognized interfaces to their raw property bags and
    never contains a recognized name.
    """

    station: Station | None = None
    device: Device | None = None
    network: Network | None = None
    known_network: KnownNetwork | None = None
    adapter: Adapter | None = None
    rest: Mapping[str, PropertyBag] = field(default_factory=dict)

    @property
    def is_station(self) -> bool:
        """Whether this object is a radio in station mode (Station + Device)."""
        return self.station is not None and self.device is not None

    @property
    def interfaces(self) -> frozenset[str]:
        """Names of all interfaces present, recognized or not."""
        names = {record.INTERFACE for record in self._records()}
        names.update(self.rest)
        return frozenset(names)

    def _records(self) -> list[IwdBaseModel]:
        slots = (self.station, self.device, self.network, self.known_network, self.adapter)
        return [record for record in slots if record is not None]


def _iter_interfaces(interfaces: InterfaceMap) -> Iterable[tuple[str, PropertyBag]]:
    if isinstance(interfaces, Mapping):
        return interfaces.items()
    return interfaces


def decode_object(interfaces: InterfaceMap, *, path: str | None = None) -> ObjectBundle:
    """Decode one object's interfaces into an :class:`ObjectBundle`.

    *interfaces* is either a mapping or an iterable of ``(interface,
    properties)`` pairs. Pairs are applied in order, so when a
    recognized interface is delivered twice the later bag wins.

    Raises
    ------
    IwdDecodeError
        If any recognized interface violates its schema. No partial
        bundle is produced.
    """
    decoded: dict[str, IwdBaseModel] = {}
    rest: dict[str, PropertyBag] = {}
    for interface, properties in _iter_interfaces(interfaces):
        capability = lookup_capability(interface)
        if capability is None:
            rest[interface] = properties
            continue
        decoded[capability.slot] = capability.decode(properties, path=path)
    return ObjectBundle(rest=rest, **decoded)  # type: ignore[arg-type]


def decode_managed_objects(
    objects: ManagedObjects,
    *,
    skip_invalid: bool = False,
) -> dict[str, ObjectBundle]:
    """Decode a full ``GetManagedObjects`` reply.

    Parameters
    ----------
    objects : Mapping
        Object path to interface map.
    skip_invalid : bool
        When ``False`` (the default) the first decode error aborts the
        enumeration. When ``True`` the offending object is left out and
        a warning is logged.

    Returns
    -------
    dict[str, ObjectBundle]
        One bundle per decoded object path.
    """
    bundles: dict[str, ObjectBundle] = {}
    for path, interfaces in objects.items():
        try:
            bundles[path] = decode_object(interfaces, path=path)
        except IwdDecodeError as exc:
            if not skip_invalid:
                raise
            _logger.warning("Skipping undecodable object %s: %s", path, exc)
    _logger.debug("Decoded %d of %d managed objects", len(bundles), len(objects))
    return bundles
