"""Live mapping: one per (factory, mapper) pair.

Reader and writer strategies are realized on first use. The target is
resolved from the mapper on every access, never cached.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import TYPE_CHECKING, Any

from flat_map.core.exceptions import MissingTargetAttributeError
from flat_map.mapping.multiparam import extract_fragments
from flat_map.mapping.reader import (
    BasicReader,
    FormattedReader,
    MethodReader,
    ProcReader,
)
from flat_map.mapping.writer import (
    BasicWriter,
    MethodWriter,
    MultiparamWriter,
    ProcWriter,
)

if TYPE_CHECKING:
    from flat_map.mapper.base import Mapper
    from flat_map.mapping.factory import MappingFactory
    from flat_map.mapping.protocol import ReaderStrategy, WriterStrategy

_UNSET: Any = object()


class Mapping:
    """Binding between one external field name and one target attribute.

    ``target_attribute`` may be a dotted path: ``"address.city"`` reads and
    writes ``city`` on ``mapper.target.address``.

    Args:
        factory: The declaring factory (shared by all mappers of a class).
        owner: The mapper this mapping belongs to.
    """

    def __init__(self, factory: MappingFactory, owner: Mapper) -> None:
        self.factory = factory
        self.owner = owner
        self._reader: Any = _UNSET
        self._writer: Any = _UNSET

    def __repr__(self) -> str:
        return (
            f"<Mapping {self.full_name!r} -> "
            f"{type(self.owner).__name__}.target.{self.target_attribute}>"
        )

    @property
    def name(self) -> str:
        return self.factory.name

    @property
    def target_attribute(self) -> str:
        return self.factory.target_attribute

    @property
    def attribute_name(self) -> str:
        """Last segment of the target attribute path."""
        return self.target_attribute.rpartition(".")[2]

    @property
    def full_name(self) -> str:
        """External field name, suffixed when the mapper has a suffix."""
        suffix = self.owner.config.suffix
        return f"{self.name}_{suffix}" if suffix else self.name

    @property
    def multiparam(self) -> bool:
        return self.factory.multiparam

    @property
    def target(self) -> Any:
        """Object that holds the attribute, walking any dotted path."""
        target = self.owner.target
        path, _, _ = self.target_attribute.rpartition(".")
        if path:
            for segment in path.split("."):
                try:
                    target = getattr(target, segment)
                except AttributeError as e:
                    raise MissingTargetAttributeError(type(target).__name__, segment) from e
        return target

    @property
    def reader(self) -> ReaderStrategy | None:
        if self._reader is _UNSET:
            self._reader = self._fetch_reader()
        return self._reader  # type: ignore[no-any-return]

    @property
    def writer(self) -> WriterStrategy | None:
        if self._writer is _UNSET:
            self._writer = self._fetch_writer()
        return self._writer  # type: ignore[no-any-return]

    def read(self, *args: Any) -> Any:
        """Return the current value via the reader, ``None`` if disabled."""
        reader = self.reader
        if reader is None:
            return None
        return reader.read(*args)

    def write(self, value: Any) -> Any:
        """Assign ``value`` via the writer; no-op if disabled."""
        writer = self.writer
        if writer is None:
            return None
        return writer.write(value)

    def write_from_params(self, params: MappingABC[str, Any]) -> None:
        """Write this mapping's value out of a flat params dict.

        A missing key leaves the target untouched; a key present with
        ``None`` writes ``None``.
        """
        if self.writer is None:
            return

        full_name = self.full_name
        if self.multiparam:
            fragments = extract_fragments(params, full_name)
            if fragments is not None:
                self.write(None if all(v is None for v in fragments) else fragments)
                return

        if full_name in params:
            self.write(params[full_name])

    def read_as_params(self) -> dict[str, Any]:
        """Return ``{full_name: value}``, or ``{}`` if the reader is disabled."""
        if self.reader is None:
            return {}
        return {self.full_name: self.read()}

    def _fetch_reader(self) -> ReaderStrategy | None:
        option = self.factory.options.reader
        if option is False:
            return None
        if isinstance(option, str):
            return MethodReader(self, option)
        format_name = self.factory.options.format
        if isinstance(option, type):
            if issubclass(option, FormattedReader) and format_name is not None:
                return option(self, format_name)
            return option(self)  # type: ignore[no-any-return]
        if callable(option):
            return ProcReader(self, option)
        if format_name is not None:
            return FormattedReader(self, format_name)
        return BasicReader(self)

    def _fetch_writer(self) -> WriterStrategy | None:
        option = self.factory.options.writer
        if option is False:
            return None
        if isinstance(option, str):
            return MethodWriter(self, option)
        if isinstance(option, type):
            return option(self)  # type: ignore[no-any-return]
        if callable(option):
            return ProcWriter(self, option)
        if self.factory.options.multiparam is not None:
            return MultiparamWriter(self, self.factory.options.multiparam)
        return BasicWriter(self)
