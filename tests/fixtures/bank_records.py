#!/usr/bin/env python3
"""
Synthetic Bank Record Builders

Builds small, fully synthetic record sets for unit and integration tests.
No real names, SSNs or addresses appear here.
"""

from datetime import date
from decimal import Decimal

from seedbank.core.dates import FinancialDate
from seedbank.core.money import Money
from seedbank.records.models import BankRecords, CheckingAccount, Owner, RegisterEntry, SavingsAccount


def make_owner(
    id: int = 1,
    name: str = "Jane Doe",
    ssn: str = "123-45-6789",
    address2: str | None = "Apt 4",
    city: str = "Springfield",
) -> Owner:
    """Build an owner with plausible PII."""
    return Owner(
        id=id,
        name=name,
        date_of_birth=FinancialDate(date=date(1980, 5, 17)),
        ssn=ssn,
        address1="742 Evergreen Terrace",
        address2=address2,
        city=city,
        state="IL",
        zip="62704",
    )


def make_savings(
    id: int = 100,
    owner_id: int = 1,
    balance: str = "500.00",
    interest_rate: str = "0.02",
    name: str = "Jane's Savings",
) -> SavingsAccount:
    """Build a savings account."""
    return SavingsAccount(
        id=id,
        name=name,
        owner_id=owner_id,
        balance=Money.from_dollars(balance),
        minimum_balance=Money.from_dollars("100.00"),
        below_minimum_fee=Money.from_dollars("5.00"),
        interest_rate=Decimal(interest_rate),
    )


def make_checking(
    id: int = 101,
    owner_id: int = 1,
    balance: str = "20.00",
    next_check_number: int = 42,
    name: str = "Jane's Checking",
) -> CheckingAccount:
    """Build a checking account."""
    return CheckingAccount(
        id=id,
        name=name,
        owner_id=owner_id,
        balance=Money.from_dollars(balance),
        minimum_balance=Money.from_dollars("0.00"),
        below_minimum_fee=Money.from_dollars("0.00"),
        next_check_number=next_check_number,
    )


def make_entry(
    id: int = 9,
    account_id: int = 100,
    amount: str = "50.00",
    entry_name: str = "Deposit from Jane Doe",
) -> RegisterEntry:
    """Build a register entry."""
    return RegisterEntry(
        id=id,
        account_id=account_id,
        entry_name=entry_name,
        amount=Money.from_dollars(amount),
        date=FinancialDate(date=date(2024, 3, 1)),
    )


def sample_bank_records() -> BankRecords:
    """
    Two owners, three accounts, four register entries.

    Owner 1 holds savings 100 and checking 101; owner 2 holds savings 200.
    """
    return BankRecords(
        owners=[
            make_owner(id=1),
            make_owner(id=2, name="John Roe", ssn="987-65-4321", address2=None, city="Shelbyville"),
        ],
        accounts=[
            make_savings(id=100, owner_id=1),
            make_checking(id=101, owner_id=1),
            make_savings(id=200, owner_id=2, balance="1234.56", interest_rate="0.035", name="Rainy Day"),
        ],
        register_entries=[
            make_entry(id=9, account_id=100),
            make_entry(id=10, account_id=101, amount="-12.34", entry_name="Check #41 to J. Smith"),
            make_entry(id=11, account_id=200, amount="1000.00", entry_name="Payroll"),
            make_entry(id=12, account_id=100, amount="-0.05", entry_name="Service fee"),
        ],
    )
