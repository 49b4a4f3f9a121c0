#!/usr/bin/env python3
"""
Legacy Checking-Account Details Text

Older checking-account exports carry no structured check number; the current
check number only appears at the end of the account's human-readable details,
e.g. ``"Checking #101 'Bills' owner 7: balance $20.00, Current Check #42"``.
Reading it back is a deserialization step with its own error kind.
"""

import re
from typing import TYPE_CHECKING

from ..errors import CheckNumberFormatError

if TYPE_CHECKING:
    from .models import CheckingAccount

CHECK_NUMBER_MARKER = "Current Check #"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_checking_details(account: "CheckingAccount") -> str:
    """Render the legacy details text for a checking account."""
    return (
        f"Checking #{account.id} '{account.name}' owner {account.owner_id}: "
        f"balance {account.balance}, minimum {account.minimum_balance}, "
        f"fee {account.below_minimum_fee}, "
        f"{CHECK_NUMBER_MARKER}{account.next_check_number}"
    )


def parse_check_number(details: str) -> int:
    """
    Extract the current check number from checking-account details text.

    Everything after the last marker occurrence, trimmed, must be an integer.
    Account names rendered earlier in the text may contain the marker too.

    Args:
        details: Details text ending in "Current Check #<n>"

    Returns:
        The check number

    Raises:
        CheckNumberFormatError: If the marker is missing or not followed by an integer
    """
    index = details.rfind(CHECK_NUMBER_MARKER)
    if index == -1:
        raise CheckNumberFormatError(f"Check number not found in account details: {details!r}")

    tail = details[index + len(CHECK_NUMBER_MARKER) :].strip()
    if not _INTEGER_PATTERN.fullmatch(tail):
        raise CheckNumberFormatError(f"Check number is not an integer: {tail!r}")

    return int(tail)
