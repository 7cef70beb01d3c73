"""hostfacts: processor facts from kernel parameters."""

from .collection import FactCollection
from .config_manager import ConfigError, ConfigManager
from .protocols import IFactCollection, ISysctl
from .resolvers import ProcessorResolver
from .sysctl import (
    LibcSysctl,
    PsutilSysctl,
    SysctlError,
    SysctlUnavailableError,
    create_sysctl,
)

__all__ = [
    "FactCollection",
    "ConfigError",
    "ConfigManager",
    "IFactCollection",
    "ISysctl",
    "ProcessorResolver",
    "LibcSysctl",
    "PsutilSysctl",
    "SysctlError",
    "SysctlUnavailableError",
    "create_sysctl",
]
