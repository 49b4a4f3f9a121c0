#!/usr/bin/env python3
"""
Identifier Remapping Table

Maps original numeric record ids to synthetic ids for one obfuscation run.
Owner ids and account ids share a single table: both are positive integers and
go through the same salted hash, so an id seen first as an owner reference and
later as an account id gets the same synthetic value.

Synthetic ids are stable within a run. They are stable across runs only when
the same salt is supplied.
"""

import hashlib
import logging
import secrets

logger = logging.getLogger(__name__)

# Synthetic ids fall in 1 .. 2**31 - 1 so they stay positive 32-bit integers
MAX_SYNTHETIC_ID = 2**31 - 1


class IdRemapper:
    """
    Lazily built original-id → synthetic-id table.

    The table is injective: when the hash of an id lands on a synthetic value
    already handed out to a different id, the hash is retried with an attempt
    counter until a free value is found.

    Example:
        >>> remapper = IdRemapper(salt="fixture")
        >>> remapper.remap(100) == remapper.remap(100)
        True
        >>> remapper.lookup(100) == remapper.remap(100)
        True
    """

    def __init__(self, salt: str | None = None):
        """
        Args:
            salt: Hash salt. A random salt is drawn when omitted.
        """
        self.salt = salt if salt is not None else secrets.token_hex(16)
        self._forward: dict[int, int] = {}
        self._assigned: set[int] = set()

    def remap(self, original_id: int) -> int:
        """Get the synthetic id for original_id, assigning one on first sight."""
        synthetic_id = self._forward.get(original_id)
        if synthetic_id is not None:
            return synthetic_id

        attempt = 0
        synthetic_id = self._derive(original_id, attempt)
        while synthetic_id in self._assigned:
            attempt += 1
            logger.debug("Synthetic id collision for %d, retrying (attempt %d)", original_id, attempt)
            synthetic_id = self._derive(original_id, attempt)

        self._forward[original_id] = synthetic_id
        self._assigned.add(synthetic_id)
        return synthetic_id

    def lookup(self, original_id: int) -> int:
        """
        Get an already assigned synthetic id.

        Raises:
            KeyError: If original_id has not been remapped in this run
        """
        return self._forward[original_id]

    def _derive(self, original_id: int, attempt: int) -> int:
        digest = hashlib.sha256(f"{self.salt}:{original_id}:{attempt}".encode()).hexdigest()
        return int(digest[:16], 16) % MAX_SYNTHETIC_ID + 1

    def as_dict(self) -> dict[int, int]:
        """Copy of the table built so far."""
        return dict(self._forward)

    def __contains__(self, original_id: object) -> bool:
        return original_id in self._forward

    def __len__(self) -> int:
        return len(self._forward)
