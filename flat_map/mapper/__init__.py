"""Mapper layer - owners of targets and their mappings."""

from __future__ import annotations

from flat_map.mapper.attribute_methods import AttributeMethod, AttributeMethods
from flat_map.mapper.base import Mapper
from flat_map.mapper.declarations import Declarations
from flat_map.mapper.targeting import Targeting

__all__ = [
    "Mapper",
    "Declarations",
    "AttributeMethods",
    "AttributeMethod",
    "Targeting",
]
