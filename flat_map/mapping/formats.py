"""Format registry.

Named pure functions applied to a value on read, never on write. Every
format passes ``None`` through untouched.

New formats are added by subclassing ``Formats`` and pointing a
``FormattedReader`` subclass at the subclass.
"""

from __future__ import annotations

import datetime
import numbers
from collections.abc import Callable
from typing import Any


class Formats:
    """Built-in formats, looked up by name."""

    @staticmethod
    def enum(value: Any) -> Any:
        """Return the ``name`` of an enum member (or enum-like record)."""
        if value is None:
            return None
        return value.name

    @staticmethod
    def i18n_l(value: Any) -> str | None:
        """Render a value using the current locale's conventions."""
        if value is None:
            return None
        # datetime is a subclass of date, so it goes first
        if isinstance(value, datetime.datetime):
            return value.strftime("%x %X")
        if isinstance(value, datetime.date):
            return value.strftime("%x")
        if isinstance(value, datetime.time):
            return value.strftime("%X")
        if isinstance(value, numbers.Number) and not isinstance(value, bool):
            return format(value, "n")
        return str(value)

    @classmethod
    def names(cls) -> list[str]:
        """List all defined format names, sorted alphabetically."""
        return sorted(
            name
            for name in dir(cls)
            if not name.startswith("_") and name not in ("names", "get", "has")
        )

    @classmethod
    def has(cls, name: str) -> bool:
        return name in cls.names()

    @classmethod
    def get(cls, name: str) -> Callable[[Any], Any] | None:
        """Look up a format function by name, ``None`` if undefined."""
        if not cls.has(name):
            return None
        return getattr(cls, name)  # type: ignore[no-any-return]
