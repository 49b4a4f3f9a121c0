"""
Seed Bank - Production Record Obfuscation

Turns a snapshot of production bank records (account owners, accounts and
register entries) into integration test fixtures by replacing personal
information with synthetic values while keeping account and ledger references
consistent.

Domain Packages:
- core: Money / FinancialDate primitives, currency helpers, configuration
- records: record models and CSV persistence
- obfuscation: the obfuscation engine
- cli: command-line interface

Example Usage:
    from seedbank.records import load_records
    from seedbank.obfuscation import obfuscate

    obfuscated = obfuscate(load_records("data/prod"))
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .errors import ObfuscationError
from .obfuscation import obfuscate, verify_record_counts
from .records.models import BankRecords, CheckingAccount, Owner, RegisterEntry, SavingsAccount

__all__ = [
    "obfuscate",
    "verify_record_counts",
    "ObfuscationError",
    # Records
    "BankRecords",
    "CheckingAccount",
    "Owner",
    "RegisterEntry",
    "SavingsAccount",
    # Configuration
    "Environment",
    "get_config",
]
