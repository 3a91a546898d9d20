"""Mapper - owner of a target and of its live mappings."""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from typing import Any

from flat_map.core.config import MapperConfig
from flat_map.core.exceptions import NoTargetError
from flat_map.mapper.attribute_methods import AttributeMethods
from flat_map.mapper.declarations import Declarations
from flat_map.mapper.targeting import Targeting
from flat_map.mapping.mapping import Mapping

logger = logging.getLogger(__name__)


class Mapper(Declarations, AttributeMethods, Targeting):
    """Moves values between a flat params dict and a target object.

    Mappings are declared on the class with ``map`` and realized lazily,
    once per mapper instance, on the first read, write or dynamic access.

    Example:
        class CustomerMapper(Mapper):
            pass

        CustomerMapper.map("name", "email").map(source_name="source", format="enum")

        mapper = CustomerMapper(customer)
        mapper.write({"name": "Alice"})
        mapper.read()  # {"name": "Alice", "email": ..., "source_name": ...}

    Args:
        target: Object the mappings read from and write to.
        config: Mapper configuration, defaults to ``MapperConfig()``.

    Raises:
        NoTargetError: If ``target`` is ``None``.
    """

    def __init__(self, target: Any, config: MapperConfig | None = None) -> None:
        if target is None:
            raise NoTargetError(type(self).__name__)
        self._target = target
        self._mappings: tuple[Mapping, ...] | None = None
        self._config = config if config is not None else MapperConfig()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} target={self._target!r}>"

    @property
    def target(self) -> Any:
        return self._target

    @property
    def config(self) -> MapperConfig:
        return self._config

    @property
    def mappings(self) -> tuple[Mapping, ...]:
        """Live mappings of this mapper, in declaration order."""
        if self._mappings is None:
            self._mappings = tuple(
                factory.create(self) for factory in type(self).mapping_factories()
            )
            logger.debug(
                "Realized %d mappings for %s", len(self._mappings), type(self).__name__
            )
        return self._mappings

    def write(self, params: MappingABC[str, Any]) -> MappingABC[str, Any]:
        """Write ``params`` to the target through every mapping.

        Keys absent from ``params`` leave their attributes untouched. The
        first failing mapping aborts the write with its original error.

        Returns:
            ``params``, unchanged.
        """
        logger.debug("Writing %d params through %s", len(params), type(self).__name__)
        for mapping in self.mappings:
            mapping.write_from_params(params)
        return params

    def read(self) -> dict[str, Any]:
        """Read every mapping into one flat dict.

        On a shared full name the later-declared mapping wins.
        """
        params: dict[str, Any] = {}
        for mapping in self.mappings:
            params.update(mapping.read_as_params())
        return params
