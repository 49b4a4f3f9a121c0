#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Balances, fees and ledger amounts are carried through obfuscation unchanged,
so Money only needs exact construction, equality and serialization.
"""

from dataclasses import dataclass

from .currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> balance = Money.from_dollars("500.00")
        >>> balance.to_cents()
        50000
        >>> str(balance)
        '$500.00'
        >>> balance.to_dollars()
        '500.00'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> str:
        """Get plain dollar string without a currency prefix, as persisted in CSV files."""
        return cents_to_dollars_str(self.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
