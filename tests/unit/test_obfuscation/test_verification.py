#!/usr/bin/env python3
"""Tests for post-run record count verification."""

import pytest

from seedbank.errors import RecordCountMismatchError
from seedbank.obfuscation import obfuscate, verify_record_counts
from seedbank.records.models import BankRecords, RecordCounts


@pytest.mark.obfuscation
class TestVerifyRecordCounts:
    """Test verify_record_counts()."""

    def test_matching_counts(self, bank_records):
        """Test a real run verifies and reports its counts."""
        counts = verify_record_counts(bank_records, obfuscate(bank_records))

        assert counts == RecordCounts(owners=2, accounts=3, register_entries=4)
        assert str(counts) == "2 owners, 3 accounts, 4 registers"

    def test_single_mismatch(self, bank_records):
        """Test a dropped register entry is reported."""
        truncated = BankRecords(
            owners=bank_records.owners,
            accounts=bank_records.accounts,
            register_entries=bank_records.register_entries[:-1],
        )

        with pytest.raises(RecordCountMismatchError, match="RegisterEntries count mismatch") as exc_info:
            verify_record_counts(bank_records, truncated)

        assert exc_info.value.mismatches == ["RegisterEntries count mismatch"]

    def test_every_mismatch_reported(self, bank_records):
        """Test all differing collections are named, not just the first."""
        with pytest.raises(RecordCountMismatchError) as exc_info:
            verify_record_counts(bank_records, BankRecords())

        assert exc_info.value.mismatches == [
            "Owners count mismatch",
            "Account count mismatch",
            "RegisterEntries count mismatch",
        ]

    def test_counts_logged(self, bank_records, caplog):
        """Test both original and obfuscated counts are logged."""
        with caplog.at_level("INFO", logger="seedbank.obfuscation.verification"):
            verify_record_counts(bank_records, bank_records)

        assert "Original   record counts: 2 owners" in caplog.text
        assert "Obfuscated record counts: 2 owners" in caplog.text
