"""
Bank Records Package

Data model and persistence for the three linked record collections of a bank
snapshot: owners, accounts and register entries.

Key Components:
- models: immutable Owner / SavingsAccount / CheckingAccount / RegisterEntry records
- check_text: legacy checking-account details text parsing
- loader: CSV snapshot loading with pandas
- datastore: CSV snapshot persistence split by account variant
- properties: integration test properties rewrite
"""

from .check_text import CHECK_NUMBER_MARKER, format_checking_details, parse_check_number
from .datastore import BankRecordsDataStore
from .loader import RecordLoadError, load_records
from .models import (
    Account,
    AnyAccount,
    BankRecords,
    CheckingAccount,
    Owner,
    RecordCounts,
    RegisterEntry,
    SavingsAccount,
)
from .properties import PropertiesFileError, read_properties, update_integ_properties

__all__ = [
    # Domain models
    "Account",
    "AnyAccount",
    "BankRecords",
    "CheckingAccount",
    "Owner",
    "RecordCounts",
    "RegisterEntry",
    "SavingsAccount",
    # Legacy text
    "CHECK_NUMBER_MARKER",
    "format_checking_details",
    "parse_check_number",
    # Persistence
    "BankRecordsDataStore",
    "RecordLoadError",
    "load_records",
    "PropertiesFileError",
    "read_properties",
    "update_integ_properties",
]
