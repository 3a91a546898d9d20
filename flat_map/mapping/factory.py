"""Mapping factories.

Frozen dataclasses created once per declaration, at class-definition time.
A factory produces one live ``Mapping`` per mapper instance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from flat_map.mapping.mapping import Mapping

if TYPE_CHECKING:
    from flat_map.mapper.base import Mapper

# Option names, reserved: they can never be used as mapping names
MAPPING_OPTIONS = frozenset({"reader", "writer", "format", "multiparam"})

# None -> default strategy, False -> disabled, str -> mapper method name,
# strategy class -> built with the mapping, other callable -> proc strategy
StrategyOption = Union[None, bool, str, type, Callable[..., Any]]


@dataclass(frozen=True)
class MappingOptions:
    """Modifiers shared by all mappings of one declaration."""

    reader: StrategyOption = None
    writer: StrategyOption = None
    format: str | None = None
    multiparam: Callable[..., Any] | None = None


@dataclass(frozen=True)
class MappingFactory:
    """Immutable mapping descriptor: external name -> target attribute."""

    name: str
    target_attribute: str
    options: MappingOptions = MappingOptions()

    @property
    def multiparam(self) -> bool:
        return self.options.multiparam is not None

    def create(self, owner: Mapper) -> Mapping:
        """Build a live mapping bound to ``owner``."""
        return Mapping(self, owner)
