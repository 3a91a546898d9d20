"""Reader strategies.

Readers never cache: every read goes to the live target.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from flat_map.core.exceptions import MissingTargetAttributeError, UnknownFormatError
from flat_map.mapping.formats import Formats

if TYPE_CHECKING:
    from flat_map.mapping.mapping import Mapping


class Reader:
    """Base reader. Holds a back-reference to its mapping."""

    def __init__(self, mapping: Mapping) -> None:
        self.mapping = mapping

    @property
    def target(self) -> Any:
        return self.mapping.target

    @property
    def target_attribute(self) -> str:
        return self.mapping.attribute_name

    def read(self, *args: Any) -> Any:
        raise NotImplementedError


class BasicReader(Reader):
    """Reads the attribute straight from the target."""

    def read(self, *args: Any) -> Any:
        target = self.target
        try:
            return getattr(target, self.target_attribute)
        except AttributeError as e:
            # Declared on the class but not assigned yet: the target's own error
            if hasattr(type(target), self.target_attribute):
                raise
            raise MissingTargetAttributeError(
                type(target).__name__, self.target_attribute
            ) from e


class FormattedReader(BasicReader):
    """Reads the attribute and passes it through a named format.

    Args:
        mapping: The owning mapping.
        format_name: Name of the format applied by default.
    """

    formats: type[Formats] = Formats

    def __init__(self, mapping: Mapping, format_name: str) -> None:
        super().__init__(mapping)
        self.format_name = format_name

    def read(self, format: str | None = None) -> Any:  # noqa: A002
        """Return the formatted value; ``format`` overrides the default."""
        return self.format_value(super().read(), format or self.format_name)

    def format_value(self, value: Any, format_name: str) -> Any:
        formatter = self.formats.get(format_name)
        if formatter is None:
            raise UnknownFormatError(format_name)
        return formatter(value)


class MethodReader(Reader):
    """Delegates the read to a named method of the mapper.

    The method is called with the target: ``mapper.<method>(target)``.
    """

    def __init__(self, mapping: Mapping, method: str) -> None:
        super().__init__(mapping)
        self.method = method

    def read(self, *args: Any) -> Any:
        return getattr(self.mapping.owner, self.method)(self.target)


class ProcReader(Reader):
    """Delegates the read to a callable: ``proc(target)``."""

    def __init__(self, mapping: Mapping, proc: Callable[[Any], Any]) -> None:
        super().__init__(mapping)
        self.proc = proc

    def read(self, *args: Any) -> Any:
        return self.proc(self.target)
