"""
Obfuscation Engine Package

Turns a production bank snapshot into integration-test fixtures.

Key Components:
- obfuscator: three-pass PII replacement and id renumbering
- id_mapping: per-run original-id → synthetic-id table
- verification: record-count check between raw and obfuscated sets

Guarantees:
- Same cardinality and order per collection
- Register entries still resolve to their (renumbered) accounts
- Any inconsistency in the input aborts the whole run
"""

from .id_mapping import IdRemapper
from .obfuscator import (
    ACCOUNT_NAME_PREFIX,
    OWNER_NAME_PREFIX,
    PLACEHOLDER_ADDRESS,
    PLACEHOLDER_CITY,
    PLACEHOLDER_STATE,
    PLACEHOLDER_ZIP,
    SSN_MASK_PREFIX,
    mask_ssn,
    obfuscate,
    obfuscate_account,
    obfuscate_owner,
)
from .verification import verify_record_counts

__all__ = [
    "IdRemapper",
    "obfuscate",
    "obfuscate_account",
    "obfuscate_owner",
    "mask_ssn",
    "verify_record_counts",
    # Placeholder values
    "ACCOUNT_NAME_PREFIX",
    "OWNER_NAME_PREFIX",
    "PLACEHOLDER_ADDRESS",
    "PLACEHOLDER_CITY",
    "PLACEHOLDER_STATE",
    "PLACEHOLDER_ZIP",
    "SSN_MASK_PREFIX",
]
