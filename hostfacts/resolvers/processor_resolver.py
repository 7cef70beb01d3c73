"""Processor facts resolved from sysctl."""

import errno
import logging
from typing import Any

from hostfacts.constants import (
    DEFAULT_BRAND_STRING_BUFFER_SIZE,
    FACT_PHYSICAL_PROCESSOR_COUNT,
    FACT_PROCESSOR,
    FACT_PROCESSOR_COUNT,
    FACT_PROCESSORS,
    SYSCTL_CPU_BRAND_STRING,
    SYSCTL_LOGICAL_CPU_MAX,
    SYSCTL_PHYSICAL_CPU_MAX,
)
from hostfacts.protocols import IFactCollection, ISysctl
from hostfacts.sysctl import SysctlError

logger = logging.getLogger(__name__)


class ProcessorResolver:
    """Resolves the structured ``processors`` fact.

    The record holds up to three keys:

    - ``count``: logical processor count
    - ``physicalcount``: physical processor count
    - ``models``: the CPU brand string, once per logical processor

    Query failures are logged at debug level and never raised.
    """

    def __init__(
        self,
        sysctl: ISysctl,
        initial_buffer_size: int = DEFAULT_BRAND_STRING_BUFFER_SIZE,
    ):
        self._sysctl = sysctl
        self._initial_buffer_size = initial_buffer_size

    def resolve(self, facts: IFactCollection) -> None:
        """Add the ``processors`` fact to ``facts`` if anything resolved."""
        processors: dict[str, Any] = {}

        logical_count = 0
        try:
            logical_count = self._sysctl.read_int(SYSCTL_LOGICAL_CPU_MAX)
        except SysctlError as e:
            self._log_failure(e, f"{FACT_PROCESSOR_COUNT} fact is")
        else:
            processors["count"] = logical_count

        try:
            physical_count = self._sysctl.read_int(SYSCTL_PHYSICAL_CPU_MAX)
        except SysctlError as e:
            self._log_failure(e, f"{FACT_PHYSICAL_PROCESSOR_COUNT} fact is")
        else:
            processors["physicalcount"] = physical_count

        models: list[str] = []
        if logical_count > 0:
            try:
                description = self._read_brand_string()
            except SysctlError as e:
                # Counts gathered so far are dropped along with the models
                self._log_failure(e, f"{FACT_PROCESSOR} facts are")
                return
            # The brand string is per package, not per core
            models = [description] * logical_count

        if models:
            processors["models"] = models

        if processors:
            facts.add(FACT_PROCESSORS, processors)

    def _read_brand_string(self) -> str:
        """Read the brand string, doubling the buffer on ENOMEM."""
        size = self._initial_buffer_size
        while True:
            try:
                return self._sysctl.read_string(SYSCTL_CPU_BRAND_STRING, size)
            except SysctlError as e:
                if e.errno != errno.ENOMEM:
                    raise
            size *= 2

    @staticmethod
    def _log_failure(error: SysctlError, unavailable: str) -> None:
        logger.debug(
            f"sysctl {error.name} failed: {error.strerror} ({error.errno}): "
            f"{unavailable} unavailable."
        )
