#!/usr/bin/env python3
"""
Post-run Record Verification

Final check that an obfuscation run neither dropped nor invented records.
"""

import logging

from ..errors import RecordCountMismatchError
from ..records.models import BankRecords, RecordCounts

logger = logging.getLogger(__name__)


def verify_record_counts(original: BankRecords, obfuscated: BankRecords) -> RecordCounts:
    """
    Compare collection sizes of the raw and obfuscated record sets.

    Args:
        original: Records passed to obfuscate()
        obfuscated: Records returned by obfuscate()

    Returns:
        The (matching) record counts

    Raises:
        RecordCountMismatchError: Naming every collection whose size differs
    """
    before = original.counts()
    after = obfuscated.counts()

    logger.info("Original   record counts: %s", before)
    logger.info("Obfuscated record counts: %s", after)

    mismatches = []
    if before.owners != after.owners:
        mismatches.append("Owners count mismatch")
    if before.accounts != after.accounts:
        mismatches.append("Account count mismatch")
    if before.register_entries != after.register_entries:
        mismatches.append("RegisterEntries count mismatch")

    if mismatches:
        raise RecordCountMismatchError(mismatches)

    return after
