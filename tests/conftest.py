"""Shared test fixtures."""

from __future__ import annotations

import pytest

from flat_map.core.config import MapperConfig
from flat_map.mapper.base import Mapper


@pytest.fixture
def make_mapper_class():
    """Helper creating a fresh Mapper subclass per test.

    Declarations are class-level, so every test gets its own class.

    Usage:
        CustomerMapper = make_mapper_class("CustomerMapper")
        CustomerMapper.map("name", "email")
    """

    def _make(name: str = "CustomerMapper", base: type = Mapper) -> type:
        return type(name, (base,), {})

    return _make


@pytest.fixture
def suffixed_config() -> MapperConfig:
    """Config giving every external field name a ``_billing`` suffix."""
    return MapperConfig(suffix="billing")
