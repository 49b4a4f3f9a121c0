#!/usr/bin/env python3
"""
Configuration Management for Seed Bank

Handles environment-based configuration for the record obfuscation pipeline.
Supports multiple environments (development, test, production) with directory
defaults appropriate for each.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class PersisterConfig:
    """Where raw records are read from and obfuscated records are written to."""

    source_dir: Path
    output_dir: Path
    source_suffix: str = ""
    persisted_suffix: str = "_prod"
    # Integration test properties file pointed at the obfuscated records
    integ_properties: Path | None = None


@dataclass
class ObfuscationConfig:
    """Obfuscation engine settings."""

    # Fixed salt makes synthetic ids reproducible across runs
    remap_salt: str | None = None


@dataclass
class Config:
    """
    Main configuration class for the seedbank application.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    data_dir: Path

    persister: PersisterConfig
    obfuscation: ObfuscationConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("SEEDBANK_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_seedbank"
            data_dir = Path(os.getenv("SEEDBANK_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("SEEDBANK_DATA_DIR", "./data")).expanduser().resolve()

        source_dir = Path(os.getenv("SEEDBANK_SOURCE_DIR", str(data_dir / "prod")))
        output_dir = Path(os.getenv("SEEDBANK_OUTPUT_DIR", str(data_dir / "integ")))

        # Ensure directories exist
        for directory in [data_dir, source_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        integ_properties = os.getenv("SEEDBANK_INTEG_PROPERTIES")

        persister = PersisterConfig(
            source_dir=source_dir,
            output_dir=output_dir,
            source_suffix=os.getenv("SEEDBANK_SOURCE_SUFFIX", ""),
            persisted_suffix=os.getenv("SEEDBANK_PERSISTED_SUFFIX", "_prod"),
            integ_properties=Path(integ_properties) if integ_properties else None,
        )

        obfuscation = ObfuscationConfig(
            remap_salt=os.getenv("SEEDBANK_REMAP_SALT") or None,
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            persister=persister,
            obfuscation=obfuscation,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("persister.source_dir", self.persister.source_dir),
            ("persister.output_dir", self.persister.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        # An empty suffix would write obfuscated records over the source fixtures
        if not self.persister.persisted_suffix:
            errors.append("SEEDBANK_PERSISTED_SUFFIX must not be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return [
            "obfuscation.remap_salt",
        ]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***" if nested_value else None
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

