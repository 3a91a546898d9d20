"""Dynamic attribute access to mapped values.

A mapper exposes every mapping as an attribute named after its full name:

    mapper.name            # -> mapping.read()
    mapper.name = "Bob"    # -> mapping.write("Bob")

The accessor table is built lazily, for all mappings at once, on the first
access to a mapped name. Private names (including ``__iter__``, ``__len__``
and other protocol probes) and names defined on the class never reach the
mappings and fail with the standard ``AttributeError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flat_map.mapping.mapping import Mapping

logger = logging.getLogger(__name__)

_TABLE_ATTR = "_attribute_methods"


@dataclass(frozen=True)
class AttributeMethod:
    """Reader/writer pair bound to a single mapping."""

    name: str
    read: Callable[..., Any]
    write: Callable[[Any], Any]


def _reserved(owner: Any, name: str) -> bool:
    return name.startswith("_") or hasattr(type(owner), name)


def _missing(owner: Any, name: str) -> AttributeError:
    return AttributeError(
        f"'{type(owner).__name__}' object has no attribute '{name}'", name=name, obj=owner
    )


class AttributeMethods:
    """Mixin resolving unknown attributes against the mapper's mappings."""

    mappings: Sequence[Mapping]

    def __getattr__(self, name: str) -> Any:
        if _reserved(self, name):
            raise _missing(self, name)
        methods = self._attribute_methods_for(name)
        if methods is None or name not in methods:
            raise _missing(self, name)
        return methods[name].read()

    def __setattr__(self, name: str, value: Any) -> None:
        if not _reserved(self, name):
            methods = self._attribute_methods_for(name)
            if methods is not None and name in methods:
                methods[name].write(value)
                return
        super().__setattr__(name, value)

    @property
    def attribute_methods_defined(self) -> bool:
        return self.__dict__.get(_TABLE_ATTR) is not None

    @property
    def attribute_methods(self) -> MappingProxyType[str, AttributeMethod]:
        """Read-only view of the installed accessors (empty until bound)."""
        return MappingProxyType(self.__dict__.get(_TABLE_ATTR) or {})

    def _attribute_methods_for(self, name: str) -> dict[str, AttributeMethod] | None:
        """Return the accessor table, installing it if ``name`` is mapped.

        Returns ``None`` and installs nothing when the mapper is unbound and
        ``name`` matches no mapping.
        """
        methods: dict[str, AttributeMethod] | None = self.__dict__.get(_TABLE_ATTR)
        if methods is not None:
            return methods

        if name not in self._declared_full_names():
            return None

        methods = self._define_attribute_methods(self.mappings)
        self.__dict__[_TABLE_ATTR] = methods
        logger.debug(
            "Bound %d attribute methods on %s", len(methods), type(self).__name__
        )
        return methods

    def _declared_full_names(self) -> set[str]:
        """External names of the declared mappings, without realizing them.

        Empty until the mapper is initialized.
        """
        config = self.__dict__.get("_config")
        if config is None:
            return set()
        names = {factory.name for factory in type(self).mapping_factories()}  # type: ignore[attr-defined]
        if config.suffix:
            return {f"{name}_{config.suffix}" for name in names}
        return names

    @staticmethod
    def _define_attribute_methods(mappings: Sequence[Mapping]) -> dict[str, AttributeMethod]:
        # Later mappings win on a shared full name, as in read()
        return {
            mapping.full_name: AttributeMethod(mapping.full_name, mapping.read, mapping.write)
            for mapping in mappings
        }
