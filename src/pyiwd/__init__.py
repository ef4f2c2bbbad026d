"""pyiwd - Async Python client for the iwd wireless daemon over D-Bus."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyiwd")
except PackageNotFoundError:
    __version__ = "0+local"
from pyiwd.catalog import ObjectCatalog, StationSelection, build_catalog
from pyiwd.client import IwdClient
from pyiwd.config import IwdConfig
from pyiwd.exceptions import (
    IwdCallError,
    IwdConfigError,
    IwdDecodeError,
    IwdError,
    IwdTransportError,
)
from pyiwd.handle import ObjectHandle
from pyiwd.models import (
    Adapter,
    Device,
    DeviceMode,
    KnownNetwork,
    Network,
    OrderedNetwork,
    SecurityType,
    Station,
    StationState,
)
from pyiwd.objects import ObjectBundle, decode_managed_objects, decode_object
from pyiwd.proxies import ObjectManagerProxy, StationProxy
from pyiwd.ranking import RankedNetwork, join_ranked

__all__ = [
    "__version__",
    "Adapter",
    "Device",
    "DeviceMode",
    "IwdCallError",
    "IwdClient",
    "IwdConfig",
    "IwdConfigError",
    "IwdDecodeError",
    "IwdError",
    "IwdTransportError",
    "KnownNetwork",
    "Network",
    "ObjectBundle",
    "ObjectCatalog",
    "ObjectHandle",
    "ObjectManagerProxy",
    "OrderedNetwork",
    "RankedNetwork",
    "SecurityType",
    "Station",
    "StationProxy",
    "StationSelection",
    "StationState",
    "build_catalog",
    "decode_managed_objects",
    "decode_object",
    "join_ranked",
]
