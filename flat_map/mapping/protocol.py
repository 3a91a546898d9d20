"""Reader and writer strategy protocols.

Every mapping owns one reader and one writer. Custom strategies passed via
the ``reader``/``writer`` mapping options are constructed with the mapping
as their only argument and must implement these interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ReaderStrategy(Protocol):
    """Reads the current value of a mapped attribute."""

    def read(self, *args: Any) -> Any:
        """Return the current value, optionally transformed."""
        ...


@runtime_checkable
class WriterStrategy(Protocol):
    """Assigns a raw value to a mapped attribute."""

    def write(self, value: Any) -> Any:
        """Assign ``value`` onto the target."""
        ...
