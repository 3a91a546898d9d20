"""Integration tests: full form cycles against Pydantic targets."""

from __future__ import annotations

import datetime
import enum

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flat_map import Mapper, MapperConfig, MissingTargetAttributeError


class Plan(enum.Enum):
    FREE = "free"
    PRO = "pro"


class Address(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    city: str | None = None
    zip_code: str | None = None


class Account(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None
    login: str = ""
    seats: int = 1
    plan: Plan = Plan.FREE
    started_on: datetime.date | None = None
    address: Address = Field(default_factory=Address)


class AccountMapper(Mapper):
    def read_login(self, target: Account) -> str:
        return target.login.lower()


AccountMapper.map("seats", username="login")
AccountMapper.map(plan_name="plan", format="enum", writer=False)
AccountMapper.map("started_on", multiparam=datetime.date)
AccountMapper.map({"city": "address.city", "zip": "address.zip_code"})
AccountMapper.map(display_login="login", reader="read_login", writer=False)


@pytest.fixture
def account() -> Account:
    return Account(id=3, login="Ada", seats=2, plan=Plan.PRO)


class TestFormCycle:
    def test_read_flattens_target(self, account: Account) -> None:
        assert AccountMapper(account).read() == {
            "seats": 2,
            "username": "Ada",
            "plan_name": "PRO",
            "started_on": None,
            "city": None,
            "zip": None,
            "display_login": "ada",
        }

    def test_write_form_submission(self, account: Account) -> None:
        AccountMapper(account).write(
            {
                "username": "grace",
                "seats": "5",
                "started_on(1i)": "2024",
                "started_on(2i)": "2",
                "started_on(3i)": "29",
                "city": "Arlington",
                "plan_name": "FREE",
            }
        )
        assert account.login == "grace"
        assert account.seats == 5
        assert account.started_on == datetime.date(2024, 2, 29)
        assert account.address.city == "Arlington"
        assert account.plan is Plan.PRO

    def test_validation_error_surfaces_unmodified(self, account: Account) -> None:
        with pytest.raises(ValidationError):
            AccountMapper(account).write({"seats": "many", "username": "grace"})
        assert account.login == "Ada"

    def test_write_read_round_trip(self, account: Account) -> None:
        mapper = AccountMapper(account)
        before = account.model_copy(deep=True)
        mapper.write(mapper.read())
        assert account == before

    def test_dynamic_accessors(self, account: Account) -> None:
        mapper = AccountMapper(account)
        assert mapper.plan_name == "PRO"
        mapper.zip = "22201"
        assert account.address.zip_code == "22201"
        assert mapper.display_login == "ada"

    def test_persistence_delegation(self, account: Account) -> None:
        mapper = AccountMapper(account)
        assert mapper.id == 3
        assert mapper.persisted is False
        assert mapper.save_target() is True


class TestSuffixedForm:
    def test_two_mappers_share_one_submission(self) -> None:
        home, work = Account(), Account()
        params = {"city_home": "Paris", "city_work": "Lyon", "seats_work": 9}

        AccountMapper(home, MapperConfig(suffix="home")).write(params)
        AccountMapper(work, MapperConfig(suffix="work")).write(params)

        assert home.address.city == "Paris"
        assert home.seats == 1
        assert work.address.city == "Lyon"
        assert work.seats == 9


class TestBuiltTargets:
    def test_build_and_write(self) -> None:
        mapper = AccountMapper.build(MapperConfig(target_class=Account))
        mapper.write({"username": "linus", "zip": "00100"})
        assert mapper.target.login == "linus"
        assert mapper.read()["zip"] == "00100"


class TestMisconfiguredMapper:
    def test_unknown_attribute_fails_fast(self, account: Account) -> None:
        class BrokenMapper(Mapper):
            pass

        BrokenMapper.map("nickname")
        mapper = BrokenMapper(account)
        with pytest.raises(MissingTargetAttributeError):
            mapper.read()
        with pytest.raises(MissingTargetAttributeError):
            mapper.write({"nickname": "x"})
