"""
Shared fixture data for Account Analytics tests.

Ten sample accounts with mixed sexes, email domains and positive,
negative and zero balances, plus a collision account that shares the
richest balance and id of account 3.
"""

import pytest
from datetime import date
from decimal import Decimal

from account_analytics.models.account import Account, Sex


def _account(id, first_name, last_name, email, birthday, sex, creation_date, balance):
    return Account(
        id=id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        birthday=date.fromisoformat(birthday),
        sex=sex,
        creation_date=date.fromisoformat(creation_date),
        balance=Decimal(balance),
    )


SAMPLE_ACCOUNTS = [
    _account(0, "Emmanuel", "Macron", "emmanuel.macron@gmail.com",
             "1977-12-21", Sex.MALE, "2018-05-12", "520000.75"),
    _account(1, "Angela", "Merkel", "angela.merkel@icloud.com",
             "1954-07-17", Sex.FEMALE, "2013-11-19", "610000.00"),
    _account(2, "Boris", "Johnson", "boris.johnson@yahoo.com",
             "1964-06-19", Sex.MALE, "2020-01-22", "450000.25"),
    _account(3, "Pedro", "Sánchez", "pedro.sanchez@outlook.com",
             "1972-02-29", Sex.MALE, "2015-08-30", "700000.30"),
    _account(4, "Mateusz", "Morawiecki", "mateusz.morawiecki@hotmail.com",
             "1968-06-20", Sex.MALE, "2014-07-15", "330000.85"),
    _account(5, "Giuseppe", "Conte", "giuseppe.conte@gmail.com",
             "1964-08-08", Sex.MALE, "2019-03-05", "580000.90"),
    _account(6, "Sebastian", "Kurz", "sebastian.kurz@hotmail.com",
             "1986-08-27", Sex.MALE, "2021-06-22", "-640000.15"),
    _account(7, "Ursula", "von der Leyen", "ursula.von@gmail.com",
             "1958-10-08", Sex.FEMALE, "2012-02-19", "-70000.50"),
    _account(8, "Sanna", "Marin", "sanna.marin@icloud.com",
             "1985-11-16", Sex.FEMALE, "2020-11-03", "-495000.75"),
    _account(9, "Angel", "Johnson", "angel@gmail.com",
             "1977-06-18", Sex.FEMALE, "2016-04-28", "0"),
]

CONFLICTING_ACCOUNT = _account(
    3, "Pedro", "Ránchez", "pedro.ranchez@outlook.com",
    "1972-02-29", Sex.MALE, "2015-08-29", "700000.30",
)


@pytest.fixture
def accounts() -> list[Account]:
    return list(SAMPLE_ACCOUNTS)


@pytest.fixture
def richest_account() -> Account:
    return SAMPLE_ACCOUNTS[3]


@pytest.fixture
def zero_balance_account() -> Account:
    return SAMPLE_ACCOUNTS[9]


@pytest.fixture
def negative_balance_accounts() -> list[Account]:
    return SAMPLE_ACCOUNTS[6:9]


@pytest.fixture
def conflicting_account() -> Account:
    return CONFLICTING_ACCOUNT


@pytest.fixture
def accounts_with_balance_collision() -> list[Account]:
    return SAMPLE_ACCOUNTS + [CONFLICTING_ACCOUNT]


@pytest.fixture
def accounts_sorted_by_name() -> list[Account]:
    return [SAMPLE_ACCOUNTS[i] for i in (5, 9, 2, 6, 0, 8, 1, 4, 3, 7)]


@pytest.fixture
def accounts_partitioned_by_sex() -> dict[bool, list[Account]]:
    return {
        True: [SAMPLE_ACCOUNTS[i] for i in (0, 2, 3, 4, 5, 6)],
        False: [SAMPLE_ACCOUNTS[i] for i in (1, 7, 8, 9)],
    }


@pytest.fixture
def accounts_grouped_by_email_domain() -> dict[str, list[Account]]:
    return {
        "gmail.com": [SAMPLE_ACCOUNTS[i] for i in (0, 5, 7, 9)],
        "icloud.com": [SAMPLE_ACCOUNTS[i] for i in (1, 8)],
        "yahoo.com": [SAMPLE_ACCOUNTS[2]],
        "outlook.com": [SAMPLE_ACCOUNTS[3]],
        "hotmail.com": [SAMPLE_ACCOUNTS[i] for i in (4, 6)],
    }
