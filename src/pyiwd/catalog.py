"""Object catalog: classify decoded bundles into station, networks, and the rest."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from pyiwd.handle import ObjectHandle
from pyiwd.models import Network
from pyiwd.objects import ObjectBundle

if TYPE_CHECKING:
    from pyiwd.proxies import StationProxy

_logger = logging.getLogger(__name__)


class StationSelection(StrEnum):
    """Which qualifying object becomes the station, by object path order."""

    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class ObjectCatalog:
    """What a single enumeration found.

    ``networks`` shares the decoded :class:`Network` records with the
    bundles they came from.
    """

    station: ObjectHandle[StationProxy] | None = None
    networks: Mapping[str, Network] = field(default_factory=dict)
    unclassified: tuple[str, ...] = ()


def build_catalog(
    bundles: Mapping[str, ObjectBundle],
    *,
    selection: StationSelection | str = StationSelection.FIRST,
) -> ObjectCatalog:
    """Classify every bundle; the first matching rule wins.

    1. Station and Device present: station candidate.
    2. Network present: added to the network lookup.
    3. Anything else: unclassified.

    When several objects qualify as station the choice is made by path
    order according to *selection*, and a warning is logged.
    """
    selection = StationSelection(selection)
    candidates: list[str] = []
    networks: dict[str, Network] = {}
    unclassified: list[str] = []

    for path, bundle in bundles.items():
        if bundle.is_station:
            candidates.append(path)
        elif bundle.network is not None:
            networks[path] = bundle.network
        else:
            unclassified.append(path)

    station: ObjectHandle[StationProxy] | None = None
    if candidates:
        candidates.sort()
        chosen = candidates[0] if selection is StationSelection.FIRST else candidates[-1]
        if len(candidates) > 1:
            ignored = [path for path in candidates if path != chosen]
            _logger.warning("Multiple station objects found; using %s, ignoring %s", chosen, ", ".join(ignored))
        station = ObjectHandle.from_path(chosen)
        _logger.debug("Station object: %s", chosen)

    return ObjectCatalog(
        station=station,
        networks=networks,
        unclassified=tuple(sorted(unclassified)),
    )
