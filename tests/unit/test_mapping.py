"""Unit tests for live Mapping objects."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

import pytest

from flat_map.core.config import MapperConfig
from flat_map.core.exceptions import MissingTargetAttributeError
from flat_map.mapping.mapping import Mapping


@dataclass
class Address:
    city: str | None = None


@dataclass
class Customer:
    name: str | None = None
    born_on: datetime.date | None = None
    address: Address = field(default_factory=Address)


@pytest.fixture
def customer_mapper_class(make_mapper_class):
    cls = make_mapper_class()
    cls.map("name")
    cls.map("born_on", multiparam=datetime.date)
    cls.map(city="address.city")
    return cls


def _by_name(mapper, name: str) -> Mapping:
    return next(m for m in mapper.mappings if m.name == name)


class TestMappingIdentity:
    def test_full_name_defaults_to_name(self, customer_mapper_class) -> None:
        mapping = _by_name(customer_mapper_class(Customer()), "name")
        assert mapping.full_name == "name"

    def test_full_name_with_suffix(
        self, customer_mapper_class, suffixed_config: MapperConfig
    ) -> None:
        mapping = _by_name(customer_mapper_class(Customer(), suffixed_config), "name")
        assert mapping.name == "name"
        assert mapping.full_name == "name_billing"

    def test_factory_shared_between_mappers(self, customer_mapper_class) -> None:
        first = _by_name(customer_mapper_class(Customer()), "name")
        second = _by_name(customer_mapper_class(Customer()), "name")
        assert first is not second
        assert first.factory is second.factory

    def test_repr(self, customer_mapper_class) -> None:
        mapping = _by_name(customer_mapper_class(Customer()), "city")
        assert repr(mapping) == "<Mapping 'city' -> CustomerMapper.target.address.city>"


class TestTargetResolution:
    def test_plain_attribute_targets_mapper_target(self, customer_mapper_class) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer), "name")
        assert mapping.target is customer
        assert mapping.attribute_name == "name"

    def test_dotted_path_resolves_nested_object(self, customer_mapper_class) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer), "city")
        assert mapping.target is customer.address
        assert mapping.attribute_name == "city"

    def test_missing_intermediate_object(self, make_mapper_class) -> None:
        cls = make_mapper_class()
        cls.map(zip="billing.zip")
        mapping = _by_name(cls(Customer()), "zip")
        with pytest.raises(MissingTargetAttributeError, match="Customer has no attribute 'billing'"):
            mapping.read()

    def test_nested_target_resolved_on_every_access(self, customer_mapper_class) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer), "city")
        customer.address = Address(city="Oslo")
        assert mapping.read() == "Oslo"


class TestWriteFromParams:
    def test_present_key_writes(self, customer_mapper_class) -> None:
        customer = Customer(name="Alice")
        _by_name(customer_mapper_class(customer), "name").write_from_params({"name": "Bob"})
        assert customer.name == "Bob"

    def test_absent_key_leaves_attribute(self, customer_mapper_class) -> None:
        customer = Customer(name="Alice")
        _by_name(customer_mapper_class(customer), "name").write_from_params({"email": "x"})
        assert customer.name == "Alice"

    def test_present_none_writes_none(self, customer_mapper_class) -> None:
        customer = Customer(name="Alice")
        _by_name(customer_mapper_class(customer), "name").write_from_params({"name": None})
        assert customer.name is None

    def test_falsy_value_writes(self, customer_mapper_class) -> None:
        customer = Customer(name="Alice")
        _by_name(customer_mapper_class(customer), "name").write_from_params({"name": ""})
        assert customer.name == ""

    def test_suffixed_key(self, customer_mapper_class, suffixed_config: MapperConfig) -> None:
        customer = Customer(name="Alice")
        mapping = _by_name(customer_mapper_class(customer, suffixed_config), "name")
        mapping.write_from_params({"name": "Ignored", "name_billing": "Bob"})
        assert customer.name == "Bob"

    def test_dotted_path_write(self, customer_mapper_class) -> None:
        customer = Customer()
        _by_name(customer_mapper_class(customer), "city").write_from_params({"city": "Lima"})
        assert customer.address.city == "Lima"

    def test_disabled_writer_skips(self, make_mapper_class) -> None:
        cls = make_mapper_class()
        cls.map("name", writer=False)
        customer = Customer(name="Alice")
        _by_name(cls(customer), "name").write_from_params({"name": "Bob"})
        assert customer.name == "Alice"


class TestMultiparamWriteFromParams:
    def test_fragments_assembled(self, customer_mapper_class) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer), "born_on")
        mapping.write_from_params({"born_on(1i)": "1990", "born_on(2i)": "7", "born_on(3i)": "14"})
        assert customer.born_on == datetime.date(1990, 7, 14)

    def test_untyped_fragments(self, make_mapper_class) -> None:
        cls = make_mapper_class()
        cls.map(name="name", multiparam=lambda *parts: " ".join(parts))
        customer = Customer()
        _by_name(cls(customer), "name").write_from_params(
            {"name(2)": "Lovelace", "name(1)": "Ada"}
        )
        assert customer.name == "Ada Lovelace"

    def test_all_blank_fragments_write_none(self, customer_mapper_class) -> None:
        customer = Customer(born_on=datetime.date(2000, 1, 1))
        mapping = _by_name(customer_mapper_class(customer), "born_on")
        mapping.write_from_params({"born_on(1i)": "", "born_on(2i)": "", "born_on(3i)": ""})
        assert customer.born_on is None

    def test_plain_key_without_fragments(self, customer_mapper_class) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer), "born_on")
        mapping.write_from_params({"born_on": datetime.date(1990, 7, 14)})
        assert customer.born_on == datetime.date(1990, 7, 14)

    def test_no_keys_leaves_attribute(self, customer_mapper_class) -> None:
        customer = Customer(born_on=datetime.date(2000, 1, 1))
        _by_name(customer_mapper_class(customer), "born_on").write_from_params({})
        assert customer.born_on == datetime.date(2000, 1, 1)

    def test_suffixed_fragments(
        self, customer_mapper_class, suffixed_config: MapperConfig
    ) -> None:
        customer = Customer()
        mapping = _by_name(customer_mapper_class(customer, suffixed_config), "born_on")
        mapping.write_from_params(
            {"born_on_billing(1i)": "2001", "born_on_billing(2i)": "2", "born_on_billing(3i)": "3"}
        )
        assert customer.born_on == datetime.date(2001, 2, 3)

    def test_params_not_mutated(self, customer_mapper_class) -> None:
        params = {"born_on(1i)": "1990", "born_on(2i)": "7", "born_on(3i)": "14"}
        _by_name(customer_mapper_class(Customer()), "born_on").write_from_params(params)
        assert params == {"born_on(1i)": "1990", "born_on(2i)": "7", "born_on(3i)": "14"}

    def test_invalid_composite_propagates(self, customer_mapper_class) -> None:
        mapping = _by_name(customer_mapper_class(Customer()), "born_on")
        with pytest.raises(ValueError):
            mapping.write_from_params({"born_on(1i)": "1990", "born_on(2i)": "13", "born_on(3i)": "1"})


class TestReadAsParams:
    def test_single_entry(self, customer_mapper_class) -> None:
        mapping = _by_name(customer_mapper_class(Customer(name="Alice")), "name")
        assert mapping.read_as_params() == {"name": "Alice"}

    def test_suffixed_key(self, customer_mapper_class, suffixed_config: MapperConfig) -> None:
        mapping = _by_name(customer_mapper_class(Customer(name="Alice"), suffixed_config), "name")
        assert mapping.read_as_params() == {"name_billing": "Alice"}

    def test_disabled_reader(self, make_mapper_class) -> None:
        cls = make_mapper_class()
        cls.map("name", reader=False)
        mapping = _by_name(cls(Customer(name="Alice")), "name")
        assert mapping.read_as_params() == {}
        assert mapping.read() is None
