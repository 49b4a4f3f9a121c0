#!/usr/bin/env python3
"""
Bank Record Domain Models

Immutable value records for the three linked collections of a bank snapshot:
owners, accounts (savings or checking) and register entries.

Relationships:
- Owner 1..* → Account, by Account.owner_id
- Account 1..* → RegisterEntry, by RegisterEntry.account_id

Each record converts to and from the string-valued rows of the persisted CSV
files (pandas reads every column as str).
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ..core.currency import parse_rate
from ..core.dates import FinancialDate
from ..core.money import Money
from .check_text import format_checking_details, parse_check_number

OWNER_COLUMNS = ["id", "name", "date_of_birth", "ssn", "address1", "address2", "city", "state", "zip"]
ACCOUNT_COLUMNS = ["id", "name", "owner_id", "balance", "minimum_balance", "below_minimum_fee"]
SAVINGS_COLUMNS = [*ACCOUNT_COLUMNS, "interest_rate"]
CHECKING_COLUMNS = [*ACCOUNT_COLUMNS, "next_check_number"]
REGISTER_COLUMNS = ["id", "account_id", "entry_name", "amount", "date"]


@dataclass(frozen=True)
class Owner:
    """
    Account holder identity record.

    The id is the join key used by accounts and is never regenerated.
    """

    id: int
    name: str
    date_of_birth: FinancialDate
    ssn: str  # ###-##-####
    address1: str
    address2: str | None
    city: str
    state: str
    zip: str

    @classmethod
    def from_csv_row(cls, row: dict[str, str]) -> "Owner":
        """Create Owner from a CSV row dict."""
        return cls(
            id=int(row["id"]),
            name=row["name"],
            date_of_birth=FinancialDate.from_string(row["date_of_birth"]),
            ssn=row["ssn"],
            address1=row["address1"],
            address2=row.get("address2") or None,
            city=row["city"],
            state=row["state"],
            zip=row["zip"],
        )

    def to_csv_row(self) -> dict[str, str]:
        """Convert to CSV row dict."""
        return {
            "id": str(self.id),
            "name": self.name,
            "date_of_birth": self.date_of_birth.to_iso_string(),
            "ssn": self.ssn,
            "address1": self.address1,
            "address2": self.address2 or "",
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
        }


@dataclass(frozen=True)
class Account:
    """
    Fields common to every account variant.

    Only SavingsAccount and CheckingAccount are real accounts; anything else
    reaching the obfuscation engine is rejected.
    """

    id: int
    name: str
    owner_id: int
    balance: Money
    minimum_balance: Money
    below_minimum_fee: Money

    @staticmethod
    def _common_fields(row: dict[str, str]) -> dict:
        return {
            "id": int(row["id"]),
            "name": row["name"],
            "owner_id": int(row["owner_id"]),
            "balance": Money.from_dollars(row["balance"]),
            "minimum_balance": Money.from_dollars(row["minimum_balance"]),
            "below_minimum_fee": Money.from_dollars(row["below_minimum_fee"]),
        }

    def _common_row(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "name": self.name,
            "owner_id": str(self.owner_id),
            "balance": self.balance.to_dollars(),
            "minimum_balance": self.minimum_balance.to_dollars(),
            "below_minimum_fee": self.below_minimum_fee.to_dollars(),
        }


@dataclass(frozen=True)
class SavingsAccount(Account):
    """Savings account earning interest."""

    interest_rate: Decimal

    @classmethod
    def from_csv_row(cls, row: dict[str, str]) -> "SavingsAccount":
        """Create SavingsAccount from a CSV row dict."""
        return cls(**cls._common_fields(row), interest_rate=parse_rate(row["interest_rate"]))

    def to_csv_row(self) -> dict[str, str]:
        """Convert to CSV row dict."""
        return {**self._common_row(), "interest_rate": str(self.interest_rate)}


@dataclass(frozen=True)
class CheckingAccount(Account):
    """Checking account tracking the next check number to be written."""

    next_check_number: int

    @property
    def details(self) -> str:
        """Human-readable description in the legacy export format."""
        return format_checking_details(self)

    @classmethod
    def from_csv_row(cls, row: dict[str, str]) -> "CheckingAccount":
        """
        Create CheckingAccount from a CSV row dict.

        Legacy exports have a "details" column instead of "next_check_number";
        the check number is then parsed out of the details text.

        Raises:
            CheckNumberFormatError: If legacy details text has no check number
            KeyError: If neither column is present
        """
        if row.get("next_check_number"):
            check_number = int(row["next_check_number"])
        else:
            check_number = parse_check_number(row["details"])
        return cls(**cls._common_fields(row), next_check_number=check_number)

    def to_csv_row(self) -> dict[str, str]:
        """Convert to CSV row dict."""
        return {**self._common_row(), "next_check_number": str(self.next_check_number)}


# Closed set of account variants the obfuscation engine handles
AnyAccount = SavingsAccount | CheckingAccount

ACCOUNT_TYPE_NAMES: dict[type[Account], str] = {
    SavingsAccount: "savings",
    CheckingAccount: "checking",
}


@dataclass(frozen=True)
class RegisterEntry:
    """Single ledger line belonging to an account."""

    id: int
    account_id: int
    entry_name: str
    amount: Money
    date: FinancialDate

    @classmethod
    def from_csv_row(cls, row: dict[str, str]) -> "RegisterEntry":
        """Create RegisterEntry from a CSV row dict."""
        return cls(
            id=int(row["id"]),
            account_id=int(row["account_id"]),
            entry_name=row["entry_name"],
            amount=Money.from_dollars(row["amount"]),
            date=FinancialDate.from_string(row["date"]),
        )

    def to_csv_row(self) -> dict[str, str]:
        """Convert to CSV row dict."""
        return {
            "id": str(self.id),
            "account_id": str(self.account_id),
            "entry_name": self.entry_name,
            "amount": self.amount.to_dollars(),
            "date": self.date.to_iso_string(),
        }


@dataclass(frozen=True)
class RecordCounts:
    """Cardinality of each collection in a BankRecords set."""

    owners: int
    accounts: int
    register_entries: int

    def __str__(self) -> str:
        return f"{self.owners} owners, {self.accounts} accounts, {self.register_entries} registers"


@dataclass(frozen=True)
class BankRecords:
    """
    Complete snapshot of owners, accounts and register entries.

    Collections are frozen into tuples on construction, so a BankRecords value
    can be handed to the obfuscation engine without a defensive copy.
    """

    owners: tuple[Owner, ...]
    accounts: tuple[AnyAccount, ...]
    register_entries: tuple[RegisterEntry, ...]

    def __init__(
        self,
        owners: Iterable[Owner] = (),
        accounts: Iterable[AnyAccount] = (),
        register_entries: Iterable[RegisterEntry] = (),
    ):
        object.__setattr__(self, "owners", tuple(owners))
        object.__setattr__(self, "accounts", tuple(accounts))
        object.__setattr__(self, "register_entries", tuple(register_entries))

    def counts(self) -> RecordCounts:
        """Get the size of each collection."""
        return RecordCounts(
            owners=len(self.owners),
            accounts=len(self.accounts),
            register_entries=len(self.register_entries),
        )

    def accounts_by_type(self) -> dict[str, list[AnyAccount]]:
        """
        Split accounts by variant for separate storage.

        Returns:
            {"savings": [...], "checking": [...]}, each in original relative order.
            Accounts of any other type are grouped under their class name.
        """
        grouped: dict[str, list[AnyAccount]] = {name: [] for name in ACCOUNT_TYPE_NAMES.values()}
        for account in self.accounts:
            type_name = ACCOUNT_TYPE_NAMES.get(type(account), type(account).__name__)
            grouped.setdefault(type_name, []).append(account)
        return grouped
