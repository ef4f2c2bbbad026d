"""Internal constants shared across the library."""

IWD_SERVICE = "net.connman.iwd"
ROOT_PATH = "/"

OBJECT_MANAGER_INTERFACE = "org.freedesktop.DBus.ObjectManager"

# ------------------------------------------------------------------
# iwd interfaces with a typed schema
# ------------------------------------------------------------------

STATION_INTERFACE = "net.connman.iwd.Station"
DEVICE_INTERFACE = "net.connman.iwd.Device"
NETWORK_INTERFACE = "net.connman.iwd.Network"
KNOWN_NETWORK_INTERFACE = "net.connman.iwd.KnownNetwork"
ADAPTER_INTERFACE = "net.connman.iwd.Adapter"

#: libdbus' own default reply timeout, in seconds.
DEFAULT_CALL_TIMEOUT: float = 25.0

# D-Bus error names that mean the bus itself failed rather than the method.
TRANSPORT_ERROR_NAMES: frozenset[str] = frozenset(
    {
        "org.freedesktop.DBus.Error.NoReply",
        "org.freedesktop.DBus.Error.Timeout",
        "org.freedesktop.DBus.Error.TimedOut",
        "org.freedesktop.DBus.Error.Disconnected",
        "org.freedesktop.DBus.Error.NoServer",
        "org.freedesktop.DBus.Error.ServiceUnknown",
        "org.freedesktop.DBus.Error.NameHasNoOwner",
        "org.freedesktop.DBus.Error.AccessDenied",
    }
)
