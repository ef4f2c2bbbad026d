"""Command-line entry point: list visible networks in ranked order."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pyiwd.catalog import StationSelection
from pyiwd.client import IwdClient
from pyiwd.config import IwdConfig
from pyiwd.exceptions import IwdError
from pyiwd.ranking import RankedNetwork


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyiwd",
        description="Scan with iwd and list visible wireless networks, best first.",
    )
    parser.add_argument("--bus-address", help="D-Bus address to use instead of the system bus")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for each bus call")
    parser.add_argument("--no-scan", action="store_true", help="List cached results without requesting a scan")
    parser.add_argument(
        "--station",
        choices=[selection.value for selection in StationSelection],
        help="Station to use when several qualify, by object path order",
    )
    parser.add_argument("--skip-invalid", action="store_true", help="Skip objects whose properties fail to decode")
    parser.add_argument("--details", action="store_true", help="Show connected/known flags and signal strength")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> IwdConfig:
    overrides: dict[str, Any] = {}
    if args.bus_address:
        overrides["bus_address"] = args.bus_address
    if args.timeout is not None:
        overrides["call_timeout"] = args.timeout
    if args.no_scan:
        overrides["scan"] = False
    if args.station:
        overrides["station_selection"] = args.station
    if args.skip_invalid:
        overrides["skip_invalid_objects"] = True
    return IwdConfig.from_env(**overrides)


def format_network(network: RankedNetwork, *, details: bool = False) -> str:
    if not details:
        return network.name
    return f"{network.name} ({network.connected} {network.known}) {network.signal}"


async def _run(config: IwdConfig, *, details: bool) -> None:
    async with IwdClient(config) as client:
        networks = await client.list_networks()
    for network in networks:
        print(format_network(network, details=details))


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _config_from_args(args)
        asyncio.run(_run(config, details=args.details))
    except IwdError as exc:
        print(f"pyiwd: error: {exc}", file=sys.stderr)
        return 1
    return 0
