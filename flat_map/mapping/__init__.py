"""Mapping layer - bind flat field names to target attributes."""

from __future__ import annotations

from flat_map.mapping.factory import MAPPING_OPTIONS, MappingFactory, MappingOptions
from flat_map.mapping.formats import Formats
from flat_map.mapping.mapping import Mapping
from flat_map.mapping.protocol import ReaderStrategy, WriterStrategy
from flat_map.mapping.reader import (
    BasicReader,
    FormattedReader,
    MethodReader,
    ProcReader,
    Reader,
)
from flat_map.mapping.writer import (
    BasicWriter,
    MethodWriter,
    MultiparamWriter,
    ProcWriter,
    Writer,
)

__all__ = [
    "MAPPING_OPTIONS",
    "MappingFactory",
    "MappingOptions",
    "Mapping",
    "Formats",
    # Strategies
    "ReaderStrategy",
    "WriterStrategy",
    "Reader",
    "BasicReader",
    "FormattedReader",
    "MethodReader",
    "ProcReader",
    "Writer",
    "BasicWriter",
    "MethodWriter",
    "MultiparamWriter",
    "ProcWriter",
]
