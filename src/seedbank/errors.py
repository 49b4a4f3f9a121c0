#!/usr/bin/env python3
"""
Obfuscation Error Taxonomy

Every error here is unrecoverable at the point of detection: obfuscation is
all-or-nothing per run, so callers either get a complete, consistent record set
or one of these exceptions.

Categories:
- UnknownAccountTypeError: account variant the engine has no branch for
- CheckNumberFormatError: legacy checking-account text without a usable check number
- ReferentialIntegrityError: dangling owner or account reference
- InvalidSsnError: SSN too short or without a 4-digit suffix
- DuplicateRecordIdError: two owners or two accounts sharing an id
- RecordCountMismatchError: output cardinality differs from input
"""


class ObfuscationError(Exception):
    """Base class for all obfuscation failures."""

    pass


class UnknownAccountTypeError(ObfuscationError):
    """Raised when an account is neither a savings nor a checking account."""

    pass


class CheckNumberFormatError(ObfuscationError):
    """Raised when checking-account details text has no parseable check number."""

    pass


class ReferentialIntegrityError(ObfuscationError):
    """Raised when a record references an owner or account that is not in the record set."""

    def __init__(self, message: str, record_kind: str, record_id: int, missing_id: int):
        super().__init__(message)
        self.record_kind = record_kind
        self.record_id = record_id
        self.missing_id = missing_id


class InvalidSsnError(ObfuscationError):
    """Raised when an owner's SSN cannot be masked."""

    def __init__(self, message: str, owner_id: int):
        super().__init__(message)
        self.owner_id = owner_id


class DuplicateRecordIdError(ObfuscationError):
    """Raised when two records of the same kind share an id."""

    pass


class RecordCountMismatchError(ObfuscationError):
    """Raised when obfuscated record counts differ from the originals."""

    def __init__(self, mismatches: list[str]):
        super().__init__("; ".join(mismatches))
        self.mismatches = mismatches
