"""Writer strategies.

Errors raised by the target during assignment are not caught here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from flat_map.core.exceptions import MissingTargetAttributeError

if TYPE_CHECKING:
    from flat_map.mapping.mapping import Mapping


class Writer:
    """Base writer. Holds a back-reference to its mapping."""

    def __init__(self, mapping: Mapping) -> None:
        self.mapping = mapping

    @property
    def target(self) -> Any:
        return self.mapping.target

    @property
    def target_attribute(self) -> str:
        return self.mapping.attribute_name

    def write(self, value: Any) -> Any:
        raise NotImplementedError


class BasicWriter(Writer):
    """Assigns the value directly to the target attribute."""

    def write(self, value: Any) -> Any:
        target = self.target
        # A plain object would silently grow a new attribute. Slots and
        # properties are declared on the class even before first assignment.
        if not (
            hasattr(type(target), self.target_attribute)
            or hasattr(target, self.target_attribute)
        ):
            raise MissingTargetAttributeError(type(target).__name__, self.target_attribute)
        setattr(target, self.target_attribute, value)
        return value


class MethodWriter(Writer):
    """Delegates the write to a named method of the mapper.

    The method is called as ``mapper.<method>(target, value)``.
    """

    def __init__(self, mapping: Mapping, method: str) -> None:
        super().__init__(mapping)
        self.method = method

    def write(self, value: Any) -> Any:
        return getattr(self.mapping.owner, self.method)(self.target, value)


class ProcWriter(Writer):
    """Delegates the write to a callable: ``proc(target, value)``."""

    def __init__(self, mapping: Mapping, proc: Callable[[Any, Any], Any]) -> None:
        super().__init__(mapping)
        self.proc = proc

    def write(self, value: Any) -> Any:
        return self.proc(self.target, value)


class MultiparamWriter(BasicWriter):
    """Assembles a composite value from positional parts before assigning it.

    Args:
        mapping: The owning mapping.
        factory: Callable building the composite, e.g. ``datetime.date``.
    """

    def __init__(self, mapping: Mapping, factory: Callable[..., Any]) -> None:
        super().__init__(mapping)
        self.factory = factory

    def write(self, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            value = self.factory(*value)
        return super().write(value)
