#!/usr/bin/env python3
"""
Integration Test Properties

Points the integration test suite at the obfuscated production records by
setting ``persisted.suffix`` in its Java-style properties file.

The rewritten file is a local, temporary change. Reset it with
``git checkout -- <properties file>``.
"""

import logging
import os
import re
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

SUFFIX_PROPERTY = "persisted.suffix"

# Key ends at the first "=", ":" or whitespace; one separator may follow
_PROPERTY_LINE = re.compile(r"(?P<key>[^=:\s]+)\s*[=:]?\s*(?P<value>.*)")


class PropertiesFileError(Exception):
    """Raised when the properties file is missing or cannot be rewritten."""

    pass


def read_properties(path: str | Path) -> dict[str, str]:
    """
    Read key/value pairs from a properties file.

    Supports "key=value", "key: value" and "key value" lines. Blank lines and
    lines starting with "#" or "!" are skipped.

    Returns:
        Properties in file order

    Raises:
        PropertiesFileError: If a line ends in a continuation backslash
    """
    properties: dict[str, str] = {}
    with open(path, encoding="utf-8") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = raw_line.strip()
            if not line or line[0] in "#!":
                continue

            # An odd run of trailing backslashes continues the value on the next line
            trailing = len(line) - len(line.rstrip("\\"))
            if trailing % 2 == 1:
                raise PropertiesFileError(f"Line continuations are not supported: {path}:{line_number}")

            match = _PROPERTY_LINE.match(line)
            if match:
                properties[match.group("key")] = match.group("value")
    return properties


def update_integ_properties(path: str | Path, suffix: str = "_prod") -> dict[str, str]:
    """
    Set persisted.suffix in the integration test properties file.

    Comments in the original file are replaced by a warning header, the way
    java.util.Properties.store rewrites a file.

    Args:
        path: Integration test properties file
        suffix: Suffix of the obfuscated record files

    Returns:
        The properties as written

    Raises:
        PropertiesFileError: If the file doesn't exist, isn't writable or uses line
            continuations
    """
    path = Path(path)
    if not path.is_file() or not os.access(path, os.W_OK):
        raise PropertiesFileError(f"Properties file must exist and be writable: {path}")

    properties = read_properties(path)
    properties[SUFFIX_PROPERTY] = suffix

    logger.info("Updating properties file '%s'", path)
    header = [
        "#Note: Don't check in changes to this file!!",
        "#Modified by seedbank",
        f"#to reset run 'git checkout -- {path}'",
        f"#{datetime.now().strftime('%a %b %d %H:%M:%S %Y')}",
    ]
    body = [f"{key}={value}" for key, value in properties.items()]

    try:
        path.write_text("\n".join(header + body) + "\n", encoding="utf-8")
    except OSError as e:
        raise PropertiesFileError(f"Failed to write properties file {path}: {e}") from e

    return properties
