"""Client configuration for pyiwd."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyiwd._constants import DEFAULT_CALL_TIMEOUT, IWD_SERVICE
from pyiwd.exceptions import IwdConfigError

_STATION_SELECTIONS = frozenset({"first", "last"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class IwdConfig:
    """Client configuration.

    Parameters
    ----------
    service : str
        Well-known bus name of the wireless daemon.
    bus_address : str or None
        Explicit D-Bus address (e.g. ``"unix:path=/run/dbus/system_bus_socket"``).
        ``None`` connects to the system bus.
    call_timeout : float
        Seconds to wait for any single bus call before treating it as a
        transport failure.
    scan : bool
        Request a fresh scan before listing networks.
    station_selection : str
        Which station to use when several objects qualify, ``"first"`` or
        ``"last"`` in object path order.
    skip_invalid_objects : bool
        Leave out objects whose properties fail to decode (logging a
        warning) instead of aborting the whole enumeration.
    """

    service: str = IWD_SERVICE
    bus_address: str | None = None
    call_timeout: float = DEFAULT_CALL_TIMEOUT
    scan: bool = True
    station_selection: str = "first"
    skip_invalid_objects: bool = False

    def __post_init__(self) -> None:
        if not self.service:
            raise IwdConfigError("service must be non-empty")
        if self.call_timeout <= 0:
            raise IwdConfigError(f"call_timeout must be positive, got {self.call_timeout}")
        if self.station_selection not in _STATION_SELECTIONS:
            raise IwdConfigError(
                f"station_selection must be one of {sorted(_STATION_SELECTIONS)}, got {self.station_selection!r}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> IwdConfig:
        """Create configuration from environment variables.

        Reads optional ``IWD_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        IwdConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        _ENV_CONFIG_MAP = {
            "IWD_SERVICE": "service",
            "IWD_BUS_ADDRESS": "bus_address",
            "IWD_STATION_SELECTION": "station_selection",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("IWD_CALL_TIMEOUT")
        if timeout_env is not None and "call_timeout" not in overrides:
            try:
                config_kwargs["call_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise IwdConfigError(f"IWD_CALL_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "scan" not in overrides:
            config_kwargs["scan"] = _env_bool(env.get("IWD_SCAN"), True)

        if "skip_invalid_objects" not in overrides:
            config_kwargs["skip_invalid_objects"] = _env_bool(env.get("IWD_SKIP_INVALID_OBJECTS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
