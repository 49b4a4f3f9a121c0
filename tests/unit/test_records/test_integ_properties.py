#!/usr/bin/env python3
"""Tests for the integration test properties rewrite."""

import os

import pytest

from seedbank.records.properties import PropertiesFileError, read_properties, update_integ_properties


@pytest.mark.records
class TestReadProperties:
    """Test properties parsing."""

    def test_separators_and_comments(self, temp_dir):
        """Test '=', ':' and whitespace separators; comments skipped."""
        path = temp_dir / "persister.properties"
        path.write_text(
            "# comment\n"
            "! another comment\n"
            "\n"
            "persisted.dir=target/records\n"
            "persisted.suffix = _integ\n"
            "persisted.format: csv\n"
            "persisted.flag true\n"
        )

        assert read_properties(path) == {
            "persisted.dir": "target/records",
            "persisted.suffix": "_integ",
            "persisted.format": "csv",
            "persisted.flag": "true",
        }


@pytest.mark.records
class TestUpdateIntegProperties:
    """Test update_integ_properties()."""

    def test_sets_suffix_and_keeps_other_keys(self, temp_dir):
        """Test the suffix is replaced and unrelated properties survive."""
        path = temp_dir / "persister_integ.properties"
        path.write_text("# original comment\npersisted.dir=target/records\npersisted.suffix=_integ\n")

        result = update_integ_properties(path, "_prod")

        assert result == {"persisted.dir": "target/records", "persisted.suffix": "_prod"}
        assert read_properties(path) == result

        text = path.read_text()
        assert "Don't check in changes to this file" in text
        assert f"git checkout -- {path}" in text
        assert "original comment" not in text

    def test_adds_missing_suffix(self, temp_dir):
        """Test the suffix is added when the file doesn't define one."""
        path = temp_dir / "persister_integ.properties"
        path.write_text("persisted.dir=target/records\n")

        assert update_integ_properties(path)["persisted.suffix"] == "_prod"

    def test_line_continuation_left_untouched(self, temp_dir):
        """Test a continued value aborts the rewrite and leaves the file as it was."""
        path = temp_dir / "persister_integ.properties"
        original = "persisted.dir=target/\\\n    records\npersisted.suffix=_integ\n"
        path.write_text(original)

        with pytest.raises(PropertiesFileError, match="continuations"):
            update_integ_properties(path)

        assert path.read_text() == original

    def test_escaped_trailing_backslash_allowed(self, temp_dir):
        """Test an escaped backslash at line end is an ordinary value."""
        path = temp_dir / "persister_integ.properties"
        path.write_text("persisted.dir=C:\\\\\n")

        assert read_properties(path) == {"persisted.dir": "C:\\\\"}

    def test_missing_file(self, temp_dir):
        """Test a missing file raises PropertiesFileError."""
        with pytest.raises(PropertiesFileError, match="must exist and be writable"):
            update_integ_properties(temp_dir / "missing.properties")

    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores file permissions")
    def test_read_only_file(self, temp_dir):
        """Test a read-only file raises PropertiesFileError."""
        path = temp_dir / "persister_integ.properties"
        path.write_text("persisted.suffix=_integ\n")
        path.chmod(0o444)

        with pytest.raises(PropertiesFileError):
            update_integ_properties(path)
