"""Shared pytest fixtures for hostfacts tests."""

import errno
import logging

import pytest

from hostfacts.collection import FactCollection
from hostfacts.constants import (
    SYSCTL_CPU_BRAND_STRING,
    SYSCTL_LOGICAL_CPU_MAX,
    SYSCTL_PHYSICAL_CPU_MAX,
)
from hostfacts.sysctl import SysctlError


class FakeSysctl:
    """In-memory ISysctl that records every call.

    Values may be an int/str result, a SysctlError to raise, or a list
    of outcomes consumed one per call. String results behave like
    sysctlbyname: ENOMEM if value plus NUL does not fit the buffer.
    """

    def __init__(self, ints=None, strings=None):
        self.ints = dict(ints or {})
        self.strings = dict(strings or {})
        self.calls: list[tuple] = []

    @staticmethod
    def _next(table, name):
        if name not in table:
            raise SysctlError(errno.ENOENT, name)
        outcome = table[name]
        if isinstance(outcome, list):
            outcome = outcome.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def read_int(self, name):
        self.calls.append(("read_int", name))
        return self._next(self.ints, name)

    def read_string(self, name, size):
        self.calls.append(("read_string", name, size))
        value = self._next(self.strings, name)
        if len(value.encode("utf-8")) + 1 > size:
            raise SysctlError(errno.ENOMEM, name)
        return value

    @property
    def string_sizes(self) -> list[int]:
        return [call[2] for call in self.calls if call[0] == "read_string"]


@pytest.fixture
def fake_sysctl():
    """Provide a FakeSysctl answering like a 4-thread, 2-core Mac."""
    return FakeSysctl(
        ints={SYSCTL_LOGICAL_CPU_MAX: 4, SYSCTL_PHYSICAL_CPU_MAX: 2},
        strings={SYSCTL_CPU_BRAND_STRING: "Example CPU"},
    )


@pytest.fixture
def facts():
    """Provide an empty fact collection."""
    return FactCollection()


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    """Undo log level changes made by HostFacts.initialize()."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
