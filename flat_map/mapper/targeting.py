"""Integration between a mapper and its target.

Persistence-style methods (``save``, ``persisted``, ``id``) are optional on
a target: when missing, a safe default is returned instead of failing.
"""

from __future__ import annotations

from typing import Any

from flat_map.core.config import MapperConfig
from flat_map.core.exceptions import MapperConfigurationError


class Targeting:
    """Mixin for building mappers and delegating to their targets."""

    target: Any

    @classmethod
    def build(cls, config: MapperConfig, *args: Any, **kwargs: Any) -> Any:
        """Create a mapper around a new instance of ``config.target_class``.

        Extra arguments are passed to the target class constructor.

        Raises:
            MapperConfigurationError: If ``config`` has no target class.
        """
        if config.target_class is None:
            raise MapperConfigurationError(
                f"Cannot build {cls.__name__}: no target_class configured"
            )
        return cls(config.target_class(*args, **kwargs), config)

    @property
    def persisted(self) -> bool:
        """Delegate persistence status to the target, ``False`` if unknown."""
        persisted = getattr(self.target, "persisted", False)
        if callable(persisted):
            persisted = persisted()
        return bool(persisted)

    @property
    def id(self) -> Any:
        return getattr(self.target, "id", None)

    def save_target(self) -> bool:
        """Save the target if it knows how to, ``True`` otherwise."""
        save = getattr(self.target, "save", None)
        if not callable(save):
            return True
        result = save()
        # Savers returning None are treated as successful
        return True if result is None else bool(result)
