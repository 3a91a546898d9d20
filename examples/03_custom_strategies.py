"""
Example 03: Custom Strategies

This example demonstrates mapper-method, callable and class-based readers
and writers, nested targets and suffixed mappers sharing one form.
"""

from dataclasses import dataclass, field
from typing import Any

from flat_map import Mapper, MapperConfig, Writer


@dataclass
class Address:
    street: str | None = None
    city: str | None = None


@dataclass
class Person:
    first_name: str = ""
    last_name: str = ""
    tags: list[str] = field(default_factory=list)
    address: Address = field(default_factory=Address)


class TagsWriter(Writer):
    """Splits a comma-separated field into a list"""

    def write(self, value: Any) -> Any:
        tags = [tag.strip() for tag in (value or "").split(",") if tag.strip()]
        setattr(self.target, self.target_attribute, tags)


class PersonMapper(Mapper):
    def read_full_name(self, target: Person) -> str:
        return f"{target.first_name} {target.last_name}".strip()

    def write_full_name(self, target: Person, value: str) -> None:
        target.first_name, _, target.last_name = value.partition(" ")


PersonMapper.map(full_name="first_name", reader="read_full_name", writer="write_full_name")
PersonMapper.map("tags", reader=lambda target: ", ".join(target.tags), writer=TagsWriter)
PersonMapper.map(street="address.street", city="address.city")


def main():
    print("=== Custom Strategies ===\n")

    params = {
        "full_name_buyer": "Ada Lovelace",
        "tags_buyer": "vip, newsletter",
        "city_buyer": "London",
        "full_name_seller": "Charles Babbage",
        "street_seller": "Dorset Street",
    }

    buyer = PersonMapper.build(MapperConfig(target_class=Person, suffix="buyer"))
    seller = PersonMapper.build(MapperConfig(target_class=Person, suffix="seller"))
    buyer.write(params)
    seller.write(params)

    print("1. Targets:")
    print(f"   Buyer:  {buyer.target}")
    print(f"   Seller: {seller.target}\n")

    print("2. Flat read-out:")
    print(f"   {buyer.read()}")
    print(f"   {seller.read()}\n")


if __name__ == "__main__":
    main()
