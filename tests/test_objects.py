"""Tests for the object decoder and the capability registry."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

import pytest
from conftest import (
    ADAPTER_PATH,
    DEVICE_PROPS,
    HOME_PATH,
    NETWORK_PROPS,
    STATION_PATH,
    STATION_PROPS,
)

from pyiwd._constants import DEVICE_INTERFACE, NETWORK_INTERFACE, STATION_INTERFACE
from pyiwd.exceptions import IwdDecodeError
from pyiwd.models import StationState
from pyiwd.objects import ObjectBundle, decode_managed_objects, decode_object
from pyiwd.registry import CAPABILITIES, RECOGNIZED_INTERFACES, lookup_capability

# ------------------------------------------------------------------
# Registry
# ------------------------------------------------------------------


def test_registry_slots_match_bundle_fields() -> None:
    bundle_slots = {f.name for f in dataclasses.fields(ObjectBundle)} - {"rest"}
    assert {capability.slot for capability in CAPABILITIES} == bundle_slots


def test_registry_interfaces_match_models() -> None:
    for capability in CAPABILITIES:
        assert capability.model.INTERFACE == capability.interface
    assert len(RECOGNIZED_INTERFACES) == 5


def test_lookup_is_exact() -> None:
    assert lookup_capability(STATION_INTERFACE) is not None
    assert lookup_capability("net.connman.iwd.station") is None
    assert lookup_capability("net.connman.iwd.SimpleConfiguration") is None


# ------------------------------------------------------------------
# decode_object
# ------------------------------------------------------------------


def test_decode_station_object(managed_objects: dict[str, Any]) -> None:
    bundle = decode_object(managed_objects[STATION_PATH], path=STATION_PATH)
    assert bundle.is_station
    assert bundle.station is not None
    assert bundle.station.state is StationState.CONNECTED
    assert bundle.device is not None
    assert bundle.device.name == "wlan0"
    assert bundle.network is None
    assert set(bundle.rest) == {"net.connman.iwd.SimpleConfiguration", "org.freedesktop.DBus.Properties"}
    assert STATION_INTERFACE in bundle.interfaces


def test_unrecognized_interfaces_are_kept_verbatim() -> None:
    bag = {"Foo": [1, 2, 3], "Bar": {"nested": True}}
    bundle = decode_object({"org.example.Custom": bag})
    assert bundle.rest["org.example.Custom"] is bag


def test_residual_never_holds_recognized_interfaces(managed_objects: dict[str, Any]) -> None:
    for path, interfaces in managed_objects.items():
        bundle = decode_object(interfaces, path=path)
        assert not RECOGNIZED_INTERFACES & set(bundle.rest)


def test_duplicate_interface_last_write_wins() -> None:
    first = {**STATION_PROPS, "State": "connecting"}
    second = {**STATION_PROPS, "State": "disconnecting"}
    bundle = decode_object([(STATION_INTERFACE, first), (STATION_INTERFACE, second)])
    assert bundle.station is not None
    assert bundle.station.state is StationState.DISCONNECTING


def test_mapping_order_does_not_matter(managed_objects: dict[str, Any]) -> None:
    interfaces = managed_objects[STATION_PATH]
    reversed_interfaces = dict(reversed(list(interfaces.items())))
    assert decode_object(interfaces) == decode_object(reversed_interfaces)


def test_invalid_enum_fails_with_field_and_interface() -> None:
    bag = {**STATION_PROPS, "State": "unknown-state"}
    with pytest.raises(IwdDecodeError) as exc_info:
        decode_object({STATION_INTERFACE: bag, DEVICE_INTERFACE: DEVICE_PROPS}, path=STATION_PATH)

    exc = exc_info.value
    assert exc.field == "state"
    assert exc.interface == STATION_INTERFACE
    assert exc.value == "unknown-state"
    assert exc.path == STATION_PATH
    assert "Station" in str(exc)
    assert "'state'" in str(exc)


def test_missing_required_field() -> None:
    bag = {k: v for k, v in DEVICE_PROPS.items() if k != "Address"}
    with pytest.raises(IwdDecodeError) as exc_info:
        decode_object({DEVICE_INTERFACE: bag})
    assert exc_info.value.field == "address"
    assert exc_info.value.value is None
    assert "missing" in str(exc_info.value)


def test_wrong_shape_reports_logical_field_name() -> None:
    bag = {**NETWORK_PROPS, "Type": "wpa3"}
    with pytest.raises(IwdDecodeError) as exc_info:
        decode_object({NETWORK_INTERFACE: bag})
    assert exc_info.value.field == "security"
    assert exc_info.value.value == "wpa3"


def test_non_mapping_property_bag() -> None:
    with pytest.raises(IwdDecodeError) as exc_info:
        decode_object({NETWORK_INTERFACE: ["Name", "Home"]})  # type: ignore[dict-item]
    assert exc_info.value.field is None
    assert exc_info.value.interface == NETWORK_INTERFACE


def test_decode_error_is_not_downgraded_to_residual() -> None:
    # A later valid duplicate does not rescue an earlier invalid bag.
    with pytest.raises(IwdDecodeError):
        decode_object(
            [
                (STATION_INTERFACE, {**STATION_PROPS, "Scanning": "no"}),
                (STATION_INTERFACE, STATION_PROPS),
            ]
        )


# ------------------------------------------------------------------
# decode_managed_objects
# ------------------------------------------------------------------


def test_decode_managed_objects(managed_objects: dict[str, Any]) -> None:
    bundles = decode_managed_objects(managed_objects)
    assert set(bundles) == set(managed_objects)
    assert bundles[HOME_PATH].network is not None
    assert bundles[HOME_PATH].network.name == "Home"
    assert bundles[ADAPTER_PATH].adapter is not None


def test_decode_error_aborts_enumeration_by_default(managed_objects: dict[str, Any]) -> None:
    managed_objects[HOME_PATH][NETWORK_INTERFACE]["Connected"] = "yes"
    with pytest.raises(IwdDecodeError) as exc_info:
        decode_managed_objects(managed_objects)
    assert exc_info.value.path == HOME_PATH
    assert exc_info.value.field == "connected"


def test_skip_invalid_leaves_object_out(managed_objects: dict[str, Any], caplog: pytest.LogCaptureFixture) -> None:
    managed_objects[HOME_PATH][NETWORK_INTERFACE]["Connected"] = "yes"
    with caplog.at_level(logging.WARNING, logger="pyiwd.objects"):
        bundles = decode_managed_objects(managed_objects, skip_invalid=True)
    assert HOME_PATH not in bundles
    assert STATION_PATH in bundles
    assert HOME_PATH in caplog.text
