"""Kernel parameter queries by name.

Two backends implement ``ISysctl``:

- ``LibcSysctl`` calls sysctlbyname(3) from the C library via ctypes
  (macOS and the BSDs).
- ``PsutilSysctl`` answers the processor sysctl names from psutil and
  the platform module on hosts without sysctlbyname.
"""

import ctypes
import ctypes.util
import errno
import logging
import os
import platform
import sys
from typing import Any, Callable

import psutil

from hostfacts.constants import (
    BACKEND_AUTO,
    BACKEND_LIBC,
    BACKEND_PSUTIL,
    SYSCTL_CPU_BRAND_STRING,
    SYSCTL_LOGICAL_CPU_MAX,
    SYSCTL_PHYSICAL_CPU_MAX,
)
from hostfacts.protocols import ISysctl

logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"


class SysctlError(OSError):
    """A sysctl query failed.

    ``errno`` and ``strerror`` follow OSError; ``name`` is the queried
    sysctl name.
    """

    def __init__(self, code: int, name: str):
        super().__init__(code, os.strerror(code), name)

    @property
    def name(self) -> str:
        return self.filename


class SysctlUnavailableError(RuntimeError):
    """The requested sysctl backend cannot be used on this host."""


def _load_sysctlbyname() -> Callable[..., int]:
    """Load sysctlbyname from the C library with errno capture enabled."""
    libc_path = ctypes.util.find_library("c")
    try:
        libc = ctypes.CDLL(libc_path, use_errno=True)
        func = libc.sysctlbyname
    except (OSError, AttributeError, TypeError) as e:
        raise SysctlUnavailableError(f"sysctlbyname is not available: {e}") from e

    func.argtypes = [
        ctypes.c_char_p,                  # name
        ctypes.c_void_p,                  # oldp
        ctypes.POINTER(ctypes.c_size_t),  # oldlenp
        ctypes.c_void_p,                  # newp
        ctypes.c_size_t,                  # newlen
    ]
    func.restype = ctypes.c_int
    return func


class LibcSysctl:
    """Queries the kernel through sysctlbyname(3)."""

    def __init__(self, sysctlbyname: Callable[..., int] | None = None):
        self._sysctlbyname = sysctlbyname or _load_sysctlbyname()

    def _call(self, name: str, oldp: Any, oldlenp: Any) -> None:
        if self._sysctlbyname(name.encode("ascii"), oldp, oldlenp, None, 0) != 0:
            raise SysctlError(ctypes.get_errno(), name)

    def read_int(self, name: str) -> int:
        """Read a C int value."""
        value = ctypes.c_int(0)
        size = ctypes.c_size_t(ctypes.sizeof(value))
        self._call(name, ctypes.pointer(value), ctypes.pointer(size))
        return value.value

    def read_string(self, name: str, size: int) -> str:
        """Read a NUL-terminated string into a buffer of ``size`` bytes."""
        buffer = ctypes.create_string_buffer(size)
        length = ctypes.c_size_t(size)
        self._call(name, buffer, ctypes.pointer(length))
        raw = buffer.raw[:length.value]
        return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class PsutilSysctl:
    """Answers processor sysctl names using psutil."""

    def read_int(self, name: str) -> int:
        if name == SYSCTL_LOGICAL_CPU_MAX:
            value = psutil.cpu_count(logical=True)
        elif name == SYSCTL_PHYSICAL_CPU_MAX:
            value = psutil.cpu_count(logical=False)
        else:
            raise SysctlError(errno.ENOENT, name)

        if value is None:
            raise SysctlError(errno.ENOENT, name)
        return value

    def read_string(self, name: str, size: int) -> str:
        if name != SYSCTL_CPU_BRAND_STRING:
            raise SysctlError(errno.ENOENT, name)

        value = self._brand_string()
        if not value:
            raise SysctlError(errno.ENOENT, name)
        # Room for the terminating NUL, as sysctlbyname requires
        if len(value.encode("utf-8")) + 1 > size:
            raise SysctlError(errno.ENOMEM, name)
        return value

    @staticmethod
    def _brand_string() -> str:
        """Get the CPU model from /proc/cpuinfo, falling back to platform."""
        try:
            with open(CPUINFO_PATH, "r", encoding="utf-8") as f:
                for line in f:
                    key, sep, model = line.partition(":")
                    if sep and key.strip() == "model name":
                        return model.strip()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.debug(f"Cannot read {CPUINFO_PATH}: {e}")

        return platform.processor().strip()


def create_sysctl(backend: str = BACKEND_AUTO) -> ISysctl:
    """Create the sysctl backend named by ``backend``.

    ``auto`` picks libc on macOS and psutil elsewhere.

    Raises:
        ValueError: If the backend name is unknown.
        SysctlUnavailableError: If the libc backend cannot be loaded.
    """
    if backend == BACKEND_AUTO:
        backend = BACKEND_LIBC if sys.platform == "darwin" else BACKEND_PSUTIL

    if backend == BACKEND_LIBC:
        return LibcSysctl()
    elif backend == BACKEND_PSUTIL:
        return PsutilSysctl()

    raise ValueError(f"Unknown sysctl backend: {backend}")
