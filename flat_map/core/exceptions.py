"""FlatMap exception hierarchy.

Errors raised by a target while a value is being assigned are never
wrapped: they propagate to the caller of ``write`` unmodified.
"""

from __future__ import annotations


class FlatMapError(Exception):
    """Base exception for all FlatMap errors."""


# --- Mapping ---


class MappingError(FlatMapError):
    """Base for mapping errors."""


class MappingDeclarationError(MappingError):
    """Raised when a mapping declaration is invalid."""

    def __init__(self, mapper_class: str, detail: str) -> None:
        self.mapper_class = mapper_class
        super().__init__(f"Invalid mapping declaration in {mapper_class}: {detail}")


class MissingTargetAttributeError(MappingError, AttributeError):
    """Raised when a mapped attribute does not exist on the target."""

    def __init__(self, target_class: str, attribute: str) -> None:
        self.target_class = target_class
        self.attribute = attribute
        super().__init__(f"{target_class} has no attribute '{attribute}' to map")


class UnknownFormatError(MappingError):
    """Raised when a read is asked for a format that is not defined."""

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(f"Unknown format: '{format_name}'")


# --- Mapper ---


class MapperError(FlatMapError):
    """Base for mapper (owner) errors."""


class NoTargetError(MapperError, ValueError):
    """Raised when a mapper is initialized with no target."""

    def __init__(self, mapper_class: str) -> None:
        self.mapper_class = mapper_class
        super().__init__(f"Target object is required to initialize {mapper_class}")


class MapperConfigurationError(MapperError):
    """Raised when a mapper configuration cannot satisfy a request."""
