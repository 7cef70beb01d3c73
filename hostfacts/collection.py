"""Fact collection populated by resolvers."""

import copy
import logging
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class FactCollection:
    """Ordered mapping of fact name to resolved value."""

    def __init__(self):
        self._facts: dict[str, Any] = {}

    def add(self, name: str, value: Any) -> None:
        """Add a fact.

        Adding ``None`` removes the fact. Containers are copied so the
        caller's record can be discarded or reused after the call.
        """
        if value is None:
            self.remove(name)
            return

        if isinstance(value, (dict, list)):
            value = copy.deepcopy(value)

        logger.debug(f"Fact '{name}' resolved")
        self._facts[name] = value

    def remove(self, name: str) -> None:
        """Remove a fact if present."""
        self._facts.pop(name, None)

    def get(self, name: str, default: Any = None) -> Any:
        """Get a fact value."""
        return self._facts.get(name, default)

    def query(self, expression: str) -> Any:
        """Look up a value by dotted path, e.g. ``processors.models.0``.

        Returns None when any segment does not resolve.
        """
        name, _, rest = expression.partition(".")
        value = self._facts.get(name)
        if not rest:
            return value

        for segment in rest.split("."):
            if isinstance(value, dict):
                value = value.get(segment)
            elif isinstance(value, list):
                try:
                    value = value[int(segment)]
                except (ValueError, IndexError):
                    return None
            else:
                return None
            if value is None:
                return None
        return value

    def names(self) -> list[str]:
        """Get the names of all resolved facts."""
        return list(self._facts)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of all facts."""
        return copy.deepcopy(self._facts)

    def __contains__(self, name: object) -> bool:
        return name in self._facts

    def __iter__(self) -> Iterator[str]:
        return iter(self._facts)

    def __len__(self) -> int:
        return len(self._facts)
