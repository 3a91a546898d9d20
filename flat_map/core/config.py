"""Mapper configuration.

MapperConfig is a frozen Pydantic model: it is resolved once when a mapper
is constructed and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class MapperConfig(BaseModel):
    """Configuration for a mapper instance.

    Args:
        target_class: Class used by ``Mapper.build`` to create a fresh target.
        suffix: Appended to every mapping name (``name_suffix``) to form the
            external field names of this mapper.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    target_class: type | None = None
    suffix: str | None = None

    @field_validator("suffix")
    @classmethod
    def _non_blank_suffix(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("suffix must not be blank")
        return value
