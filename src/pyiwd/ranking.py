"""Join the station's ordered network list with the catalog's network records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pyiwd.models import Network, OrderedNetwork, SecurityType


@dataclass(frozen=True, slots=True)
class RankedNetwork:
    """A visible network ready for display."""

    path: str
    name: str
    signal: int
    security: SecurityType
    connected: bool
    known: bool


def join_ranked(
    ordered: Iterable[OrderedNetwork],
    networks: Mapping[str, Network],
) -> list[RankedNetwork]:
    """Resolve *ordered* entries against *networks*, keeping the given order.

    Entries whose path is not in *networks* are skipped: networks come
    and go between enumeration and scan.
    """
    ranked: list[RankedNetwork] = []
    for entry in ordered:
        network = networks.get(entry.path)
        if network is None:
            continue
        ranked.append(
            RankedNetwork(
                path=entry.path,
                name=network.name,
                signal=entry.signal,
                security=network.security,
                connected=network.connected,
                known=network.is_known,
            )
        )
    return ranked
