"""
Example 02: Formats and Multiparam Values

This example demonstrates formatted reads and composite values assembled
from several form fields, using a Pydantic target.
"""

import datetime
import enum

from pydantic import BaseModel, ConfigDict

from flat_map import Mapper


class Plan(enum.Enum):
    FREE = "free"
    PRO = "pro"


class Subscription(BaseModel):
    """Subscription target using Pydantic"""
    model_config = ConfigDict(validate_assignment=True)

    plan: Plan = Plan.FREE
    seats: int = 1
    starts_on: datetime.date | None = None


class SubscriptionMapper(Mapper):
    pass


SubscriptionMapper.map("seats")
SubscriptionMapper.map(plan_name="plan", format="enum", writer=False)
SubscriptionMapper.map("starts_on", multiparam=datetime.date)
SubscriptionMapper.map(starts_on_text="starts_on", format="i18n_l", writer=False)


def main():
    subscription = Subscription(plan=Plan.PRO)
    mapper = SubscriptionMapper(subscription)

    print("=== Formats and Multiparam ===\n")

    print("1. Date select fields:")
    mapper.write({
        "seats": "3",
        "starts_on(1i)": "2025",
        "starts_on(2i)": "1",
        "starts_on(3i)": "15",
    })
    print(f"   Target: {subscription!r}\n")

    print("2. Formatted read:")
    for key, value in mapper.read().items():
        print(f"   {key}: {value!r}")
    print()


if __name__ == "__main__":
    main()
