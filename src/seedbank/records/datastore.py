#!/usr/bin/env python3
"""
Bank Records DataStore

Persists a BankRecords snapshot as one CSV file per collection, with accounts
split into savings and checking files.
"""

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from ..errors import UnknownAccountTypeError
from .loader import RECORD_FILE_NAMES, load_records, record_file_path
from .models import CHECKING_COLUMNS, OWNER_COLUMNS, REGISTER_COLUMNS, SAVINGS_COLUMNS, BankRecords

logger = logging.getLogger(__name__)

_ACCOUNT_FILE_COLUMNS = {
    "savings": SAVINGS_COLUMNS,
    "checking": CHECKING_COLUMNS,
}


class BankRecordsDataStore:
    """
    DataStore for a CSV bank snapshot.

    Files live directly in data_dir and are named {collection}{suffix}.csv.
    """

    def __init__(self, data_dir: Path, suffix: str = ""):
        """
        Initialize bank records data store.

        Args:
            data_dir: Directory holding the record files
            suffix: File name suffix, e.g. "_prod"
        """
        self.data_dir = Path(data_dir)
        self.suffix = suffix

    def file_paths(self) -> dict[str, Path]:
        """Paths of the four record files, keyed by collection name."""
        return {name: record_file_path(self.data_dir, name, self.suffix) for name in RECORD_FILE_NAMES}

    def exists(self) -> bool:
        """Check if every record file exists."""
        return all(path.exists() for path in self.file_paths().values())

    def load(self) -> BankRecords:
        """
        Load the snapshot.

        Raises:
            FileNotFoundError: If any record file is missing
            RecordLoadError: If any row is invalid
        """
        return load_records(self.data_dir, self.suffix)

    def save(self, data: BankRecords) -> None:
        """
        Write the snapshot, replacing existing files.

        A variant without accounts still gets a header-only file.

        Raises:
            UnknownAccountTypeError: If an account is neither savings nor checking
        """
        paths = self.file_paths()
        accounts_by_type = data.accounts_by_type()

        unknown = set(accounts_by_type) - set(_ACCOUNT_FILE_COLUMNS)
        if unknown:
            raise UnknownAccountTypeError(f"Unknown account type: {', '.join(sorted(unknown))}")

        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._write_csv(paths["owners"], [o.to_csv_row() for o in data.owners], OWNER_COLUMNS)
        for type_name, columns in _ACCOUNT_FILE_COLUMNS.items():
            rows = [a.to_csv_row() for a in accounts_by_type[type_name]]
            self._write_csv(paths[type_name], rows, columns)
        self._write_csv(paths["register"], [e.to_csv_row() for e in data.register_entries], REGISTER_COLUMNS)

        logger.info("Saved %s to %s", data.counts(), self.data_dir)

    @staticmethod
    def _write_csv(path: Path, rows: list[dict[str, str]], columns: list[str]) -> None:
        pd.DataFrame(rows, columns=columns).to_csv(path, index=False)

    def last_modified(self) -> datetime | None:
        """Get timestamp of the most recently modified record file."""
        existing = [path for path in self.file_paths().values() if path.exists()]
        if not existing:
            return None
        return datetime.fromtimestamp(max(path.stat().st_mtime for path in existing))

    def item_count(self) -> int | None:
        """Get total number of records across all collections."""
        if not self.exists():
            return None
        counts = self.load().counts()
        return counts.owners + counts.accounts + counts.register_entries

    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        if not self.exists():
            return f"No bank records in {self.data_dir}"
        return f"Bank records: {self.load().counts()}"
