#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Currency handling for record obfuscation and CSV persistence.
All amounts are held as integer cents to avoid floating-point errors.

Currency Systems:
- Internal values use cents: 100 cents = $1.00
- Persisted CSV values use plain dollar strings: "12.34"
- Display uses dollar strings with a prefix: "$12.34"
"""

from decimal import Decimal, InvalidOperation


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents using integer arithmetic only.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a dollar amount

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents("-0.5") -> -50
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        raise ValueError("Empty dollar amount")

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:]

    whole, _, fraction = clean.partition(".")
    if not (whole or fraction) or not (whole + fraction).isdigit():
        raise ValueError(f"Invalid dollar amount: {dollars_str!r}")

    if len(fraction) > 2:
        raise ValueError(f"Dollar amount has fractional cents: {dollars_str!r}")

    cents_str = fraction.ljust(2, "0")
    total = int(whole or "0") * 100 + int(cents_str)

    return -total if is_negative else total


def parse_rate(rate_str: str) -> Decimal:
    """
    Parse an interest rate string such as "0.02" into a Decimal.

    Raises:
        ValueError: If the string is not a decimal number
    """
    try:
        return Decimal(rate_str.strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid rate: {rate_str!r}") from e


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"
