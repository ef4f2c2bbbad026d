"""Custom exception hierarchy for pyiwd."""

from __future__ import annotations

from typing import Any


class IwdError(Exception):
    """Base exception for all pyiwd errors."""


class IwdConfigError(IwdError):
    """Invalid or missing configuration."""


class IwdTransportError(IwdError):
    """Bus-level failure (unreachable bus, disconnect, timeout, no reply)."""

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        path: str = "",
    ) -> None:
        self.name = name
        self.path = path
        super().__init__(message)


class IwdCallError(IwdError):
    """A remote method returned a D-Bus error.

    This is also how a handle resolved against an object that lacks the
    asserted capability fails: the daemon answers with
    ``org.freedesktop.DBus.Error.UnknownMethod`` or ``UnknownInterface``.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        path: str = "",
        interface: str = "",
        method: str = "",
    ) -> None:
        self.name = name
        self.path = path
        self.interface = interface
        self.method = method
        super().__init__(message)


class IwdDecodeError(IwdError):
    """A property bag or method reply does not match its schema.

    ``field`` is the logical (snake_case) field name, ``value`` the
    offending input (``None`` when the field is missing).
    """

    def __init__(
        self,
        message: str,
        *,
        interface: str,
        field: str | None = None,
        value: Any = None,
        path: str | None = None,
    ) -> None:
        self.interface = interface
        self.field = field
        self.value = value
        self.path = path
        super().__init__(message)
