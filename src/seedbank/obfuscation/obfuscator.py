#!/usr/bin/env python3
"""
Bank Record Obfuscator

Replaces personally identifiable information in a bank snapshot with synthetic
values while keeping the Account ↔ RegisterEntry joins intact, so production
records can seed an integration test environment.

Runs three passes in fixed order, owners → accounts → register entries. The
account pass fills the id remapping table that the register pass reads.

Known gaps, kept on purpose:
- Owner.date_of_birth is copied unchanged.
- Owner ids are not remapped, while Account.owner_id is. Owner ↔ Account joins
  therefore do not survive obfuscation.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Never, NoReturn

from ..errors import (
    DuplicateRecordIdError,
    InvalidSsnError,
    ReferentialIntegrityError,
    UnknownAccountTypeError,
)
from ..records.models import (
    AnyAccount,
    BankRecords,
    CheckingAccount,
    Owner,
    RegisterEntry,
    SavingsAccount,
)
from .id_mapping import IdRemapper

logger = logging.getLogger(__name__)

OWNER_NAME_PREFIX = "User"
ACCOUNT_NAME_PREFIX = "Account-"

SSN_MASK_PREFIX = "***-**-"
SSN_LENGTH = 11  # ###-##-####
SSN_SUFFIX_LENGTH = 4

PLACEHOLDER_ADDRESS = "123 Placeholder St"
PLACEHOLDER_CITY = "ObfusCity"
PLACEHOLDER_STATE = "XX"
PLACEHOLDER_ZIP = "00000"


def obfuscate(records: BankRecords, salt: str | None = None) -> BankRecords:
    """
    Obfuscate a complete bank snapshot.

    The input is not modified; every record in the result is a new instance.
    Each collection keeps its cardinality and relative order.

    Args:
        records: Raw owners, accounts and register entries
        salt: Salt for synthetic ids. Random per call when omitted, so ids
            are only stable within one call.

    Returns:
        Obfuscated BankRecords

    Raises:
        InvalidSsnError: An owner's SSN cannot be masked
        DuplicateRecordIdError: Two owners or two accounts share an id
        ReferentialIntegrityError: An account references an unknown owner, or
            a register entry references an unknown account
        UnknownAccountTypeError: An account is neither savings nor checking
    """
    id_map = IdRemapper(salt)

    owners = obfuscate_owners(records.owners)
    owner_ids = {owner.id for owner in records.owners}
    accounts = obfuscate_accounts(records.accounts, id_map, owner_ids)
    account_ids = {account.id for account in records.accounts}
    register_entries = obfuscate_register_entries(records.register_entries, id_map, account_ids)

    result = BankRecords(owners=owners, accounts=accounts, register_entries=register_entries)
    logger.info("Obfuscated %s (%d ids remapped)", result.counts(), len(id_map))
    return result


def obfuscate_owners(owners: Iterable[Owner]) -> list[Owner]:
    """Owners pass: replace name, SSN and address fields; keep the id."""
    seen: set[int] = set()
    result = []
    for owner in owners:
        if owner.id in seen:
            raise DuplicateRecordIdError(f"Duplicate owner id: {owner.id}")
        seen.add(owner.id)
        result.append(obfuscate_owner(owner))
    return result


def obfuscate_owner(owner: Owner) -> Owner:
    """Copy of owner with PII replaced. address2 and date_of_birth pass through."""
    return replace(
        owner,
        name=f"{OWNER_NAME_PREFIX}{owner.id}",
        ssn=mask_ssn(owner.ssn, owner.id),
        address1=PLACEHOLDER_ADDRESS,
        city=PLACEHOLDER_CITY,
        state=PLACEHOLDER_STATE,
        zip=PLACEHOLDER_ZIP,
    )


def mask_ssn(ssn: str, owner_id: int) -> str:
    """
    Mask all but the last four digits of an SSN.

    Example:
        mask_ssn("123-45-6789", 1) -> "***-**-6789"

    Raises:
        InvalidSsnError: If the SSN is shorter than ###-##-#### or does not end
            in four ASCII digits
    """
    suffix = ssn[-SSN_SUFFIX_LENGTH:]
    if len(ssn) < SSN_LENGTH or not (suffix.isascii() and suffix.isdigit()):
        raise InvalidSsnError(f"Owner {owner_id} has a malformed SSN", owner_id=owner_id)
    return SSN_MASK_PREFIX + suffix


def obfuscate_accounts(
    accounts: Iterable[AnyAccount], id_map: IdRemapper, owner_ids: set[int]
) -> list[AnyAccount]:
    """Accounts pass: renumber account and owner ids, synthesize names."""
    seen: set[int] = set()
    result = []
    for account in accounts:
        if account.id in seen:
            raise DuplicateRecordIdError(f"Duplicate account id: {account.id}")
        seen.add(account.id)

        if account.owner_id not in owner_ids:
            raise ReferentialIntegrityError(
                f"Account {account.id} references unknown owner {account.owner_id}",
                record_kind="account",
                record_id=account.id,
                missing_id=account.owner_id,
            )

        result.append(obfuscate_account(account, id_map))
    return result


def obfuscate_account(account: AnyAccount, id_map: IdRemapper) -> AnyAccount:
    """
    Copy of account with remapped ids and a synthetic name.

    Balances, fees, interest rate and check number are carried over verbatim.

    Raises:
        UnknownAccountTypeError: If account is not a SavingsAccount or CheckingAccount
    """
    new_id = id_map.remap(account.id)
    new_owner_id = id_map.remap(account.owner_id)
    new_name = f"{ACCOUNT_NAME_PREFIX}{new_id}"

    if isinstance(account, SavingsAccount):
        return SavingsAccount(
            id=new_id,
            name=new_name,
            owner_id=new_owner_id,
            balance=account.balance,
            minimum_balance=account.minimum_balance,
            below_minimum_fee=account.below_minimum_fee,
            interest_rate=account.interest_rate,
        )
    elif isinstance(account, CheckingAccount):
        return CheckingAccount(
            id=new_id,
            name=new_name,
            owner_id=new_owner_id,
            balance=account.balance,
            minimum_balance=account.minimum_balance,
            below_minimum_fee=account.below_minimum_fee,
            next_check_number=account.next_check_number,
        )
    else:
        _reject_unknown_account(account)


def _reject_unknown_account(account: Never) -> NoReturn:
    # Typed Never so a type checker flags any AnyAccount variant without a branch above
    raise UnknownAccountTypeError(f"Unknown account type: {type(account).__name__}")


def obfuscate_register_entries(
    entries: Iterable[RegisterEntry], id_map: IdRemapper, account_ids: set[int]
) -> list[RegisterEntry]:
    """
    Register pass: point each entry at its account's synthetic id.

    Must run after the accounts pass has filled id_map.

    Raises:
        ReferentialIntegrityError: If an entry's account is not in the record set
    """
    result = []
    for entry in entries:
        if entry.account_id not in account_ids:
            raise ReferentialIntegrityError(
                f"Register entry {entry.id} references unknown account {entry.account_id}",
                record_kind="register_entry",
                record_id=entry.id,
                missing_id=entry.account_id,
            )
        result.append(replace(entry, account_id=id_map.lookup(entry.account_id)))
    return result
