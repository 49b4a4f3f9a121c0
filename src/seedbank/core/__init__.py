"""
Core Utilities Package

Shared primitives and plumbing used by the record and obfuscation packages.

This package provides:
- Currency handling with integer arithmetic for precision
- Money and FinancialDate value types
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    ObfuscationConfig,
    PersisterConfig,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    format_cents,
    parse_dollars_to_cents,
    parse_rate,
)
from .dates import FinancialDate
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "ObfuscationConfig",
    "PersisterConfig",
    "get_config",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "parse_dollars_to_cents",
    "parse_rate",
    # Value types
    "FinancialDate",
    "Money",
]
