"""Protocol definitions for dependency injection.

Defines interfaces for the resolver's collaborators so they can be replaced
by fakes in tests.
"""

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class ISysctl(Protocol):
    """Interface for kernel parameter queries by name."""

    def read_int(self, name: str) -> int:
        """Read a fixed-size integer value.

        Raises:
            SysctlError: If the query fails.
        """
        ...

    def read_string(self, name: str, size: int) -> str:
        """Read a string value into a buffer of ``size`` bytes.

        Raises:
            SysctlError: With errno ENOMEM if the buffer is too small,
                or another errno if the query fails.
        """
        ...


@runtime_checkable
class IFactCollection(Protocol):
    """Interface for the fact sink a resolver writes into."""

    def add(self, name: str, value: Any) -> None:
        """Add a fact, replacing any previous value."""
        ...

    def get(self, name: str, default: Any = None) -> Any:
        """Get a fact value."""
        ...

    def __contains__(self, name: object) -> bool:
        ...

    def __iter__(self) -> Iterator[str]:
        ...

    def __len__(self) -> int:
        ...
