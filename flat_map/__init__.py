"""FlatMap - bidirectional mapping between flat params and target objects."""

from __future__ import annotations

from flat_map.core.config import MapperConfig
from flat_map.core.exceptions import (
    FlatMapError,
    MapperConfigurationError,
    MapperError,
    MappingDeclarationError,
    MappingError,
    MissingTargetAttributeError,
    NoTargetError,
    UnknownFormatError,
)
from flat_map.mapper.base import Mapper
from flat_map.mapping.formats import Formats
from flat_map.mapping.reader import FormattedReader, Reader
from flat_map.mapping.writer import Writer

__all__ = [
    # Mapper
    "Mapper",
    "MapperConfig",
    # Strategies
    "Reader",
    "FormattedReader",
    "Writer",
    "Formats",
    # Exceptions
    "FlatMapError",
    "MappingError",
    "MappingDeclarationError",
    "MissingTargetAttributeError",
    "UnknownFormatError",
    "MapperError",
    "NoTargetError",
    "MapperConfigurationError",
]
