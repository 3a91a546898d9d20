"""Mapping declarations and the per-class mapping registry.

Each mapper class keeps the factories it declares itself in an immutable
tuple stored in its own ``__dict__``. The effective registry of a class is
composed from those tuples along its MRO, base classes first, so a subclass
extends its parents without ever touching their registries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from flat_map.core.exceptions import MappingDeclarationError
from flat_map.mapping.factory import (
    MAPPING_OPTIONS,
    MappingFactory,
    MappingOptions,
    StrategyOption,
)
from flat_map.mapping.formats import Formats
from flat_map.mapping.reader import FormattedReader

logger = logging.getLogger(__name__)

_REGISTRY_ATTR = "_declared_mappings"


def _formats_for(reader: StrategyOption) -> type[Formats] | None:
    """Format registry the given reader option will format with, if any."""
    if reader is None:
        return Formats
    if isinstance(reader, type) and issubclass(reader, FormattedReader):
        return reader.formats
    return None


class Declarations:
    """Class-level ``map`` DSL.

    Example:
        CustomerMapper.map("name", "email").map(account_source="source", format="enum")
        # is equivalent to:
        CustomerMapper.map(name="name", email="email")
        CustomerMapper.map(account_source="source", format="enum")
    """

    @classmethod
    def map(
        cls,
        /,
        *names: str | dict[str, str],
        reader: StrategyOption = None,
        writer: StrategyOption = None,
        format: str | None = None,  # noqa: A002
        multiparam: Callable[..., Any] | None = None,
        **pairs: str,
    ) -> type:
        """Declare one or more mappings sharing the same options.

        Args:
            *names: Names mapped onto attributes of the same name, or dicts
                of ``{external_name: target_attribute}``.
            reader: Reader strategy override (``False`` disables reading).
            writer: Writer strategy override (``False`` disables writing).
            format: Name of a ``Formats`` function applied on read.
            multiparam: Callable assembling a value from positional fragments.
            **pairs: ``external_name=target_attribute`` mappings. A pair
                replaces a positional name given with the same external name.

        Returns:
            The mapper class, for chaining.

        Raises:
            MappingDeclarationError: On reserved names, unknown formats or
                an empty declaration.
        """
        mappings: dict[str, str] = {}
        for item in names:
            pairs_given = item.items() if isinstance(item, dict) else [(item, item)]
            for name, target_attribute in pairs_given:
                cls._add_pair(mappings, name, target_attribute)
        for name, target_attribute in pairs.items():
            cls._add_pair(mappings, name, target_attribute)

        options = MappingOptions(
            reader=reader, writer=writer, format=format, multiparam=multiparam
        )
        cls._validate_declaration(mappings, options)

        factories = tuple(
            MappingFactory(name, target_attribute, options)
            for name, target_attribute in mappings.items()
        )
        cls._warn_duplicates(factories)
        cls._warn_shadowed(factories)
        setattr(cls, _REGISTRY_ATTR, cls.__dict__.get(_REGISTRY_ATTR, ()) + factories)
        logger.debug("Declared mappings %s on %s", list(mappings), cls.__name__)
        return cls

    @classmethod
    def mapping_factories(cls) -> tuple[MappingFactory, ...]:
        """All mapping factories of this class, in declaration order."""
        factories: tuple[MappingFactory, ...] = ()
        for klass in reversed(cls.__mro__):
            factories += klass.__dict__.get(_REGISTRY_ATTR, ())
        return factories

    @classmethod
    def _validate_declaration(cls, mappings: dict[str, str], options: MappingOptions) -> None:
        if not mappings:
            raise MappingDeclarationError(cls.__name__, "no mappings given")

        for name, target_attribute in mappings.items():
            for value in (name, target_attribute):
                if not isinstance(value, str) or not value:
                    raise MappingDeclarationError(
                        cls.__name__, f"mapping names must be non-empty strings, got {value!r}"
                    )
            reserved = {name, target_attribute.rpartition(".")[2]} & MAPPING_OPTIONS
            if reserved:
                raise MappingDeclarationError(
                    cls.__name__,
                    f"'{sorted(reserved)[0]}' is a reserved option name "
                    f"and cannot be mapped ({name} -> {target_attribute})",
                )
            if name.startswith("_"):
                raise MappingDeclarationError(
                    cls.__name__, f"mapping name '{name}' must not start with an underscore"
                )

        formats = _formats_for(options.reader)
        if options.format is not None and formats is not None and not formats.has(options.format):
            raise MappingDeclarationError(
                cls.__name__,
                f"unknown format '{options.format}', expected one of {formats.names()}",
            )
        if options.multiparam is not None and not callable(options.multiparam):
            raise MappingDeclarationError(
                cls.__name__, f"multiparam must be callable, got {options.multiparam!r}"
            )

    @classmethod
    def _add_pair(cls, mappings: dict[str, str], name: str, target_attribute: str) -> None:
        if name in mappings and mappings[name] != target_attribute:
            logger.warning(
                "Mapping '%s' is given twice in one declaration on %s; "
                "'%s' replaces '%s'",
                name,
                cls.__name__,
                target_attribute,
                mappings[name],
            )
        mappings[name] = target_attribute

    @classmethod
    def _warn_shadowed(cls, factories: tuple[MappingFactory, ...]) -> None:
        for factory in factories:
            if hasattr(cls, factory.name):
                logger.warning(
                    "Mapping '%s' on %s is shadowed by a mapper attribute; "
                    "it is only reachable through read() and write()",
                    factory.name,
                    cls.__name__,
                )

    @classmethod
    def _warn_duplicates(cls, factories: tuple[MappingFactory, ...]) -> None:
        seen = {factory.name for factory in cls.mapping_factories()}
        for factory in factories:
            if factory.name in seen:
                logger.warning(
                    "Mapping '%s' is declared more than once on %s; "
                    "the last declaration wins on read",
                    factory.name,
                    cls.__name__,
                )
            seen.add(factory.name)
