"""
Example 01: Basic Mapping

This example demonstrates declaring mappings and moving form params into a
dataclass target and back out again.
"""

from dataclasses import dataclass

from flat_map import Mapper


@dataclass
class Customer:
    """Customer target using dataclass"""
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class CustomerMapper(Mapper):
    """Maps the customer form"""


CustomerMapper.map("name", "email").map(phone_number="phone")


def main():
    customer = Customer(name="Alice", email="alice@example.com")
    mapper = CustomerMapper(customer)

    print("=== Basic Mapping ===\n")

    print("1. Read:")
    print(f"   {mapper.read()}\n")

    print("2. Write (absent keys are left alone, None clears):")
    mapper.write({"phone_number": "555-0100", "email": None})
    print(f"   Target: {customer}\n")

    print("3. Attribute access:")
    mapper.name = "Alice Smith"
    print(f"   mapper.name = {mapper.name}")
    print(f"   mapper.phone_number = {mapper.phone_number}")
    print(f"   Bound accessors: {list(mapper.attribute_methods)}\n")


if __name__ == "__main__":
    main()
