#!/usr/bin/env python3
"""
Configuration Management for AutoTrackr

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
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


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ReportConfig:
    """Report and export settings."""

    export_dir: Path
    app_name: str = "AutoTrackr"
    default_entry_title: str = "Expense"
    tax_year: int | None = None  # None means the generation year


@dataclass
class Config:
    """
    Main configuration class for the AutoTrackr ledger.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    reports: ReportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("AUTOTRACKR_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_autotrackr"
            base_dir = Path(os.getenv("AUTOTRACKR_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("AUTOTRACKR_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "exports"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        tax_year_str = os.getenv("AUTOTRACKR_TAX_YEAR")
        reports = ReportConfig(
            export_dir=output_dir,
            app_name=os.getenv("AUTOTRACKR_APP_NAME", "AutoTrackr"),
            default_entry_title=os.getenv("AUTOTRACKR_DEFAULT_TITLE", "Expense"),
            tax_year=int(tax_year_str) if tax_year_str else None,
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            reports=reports,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if not self.reports.app_name.strip():
            errors.append("AUTOTRACKR_APP_NAME cannot be blank")
        if not self.reports.default_entry_title.strip():
            errors.append("AUTOTRACKR_DEFAULT_TITLE cannot be blank")
        if self.reports.tax_year is not None and not 1900 <= self.reports.tax_year <= 9999:
            errors.append(f"AUTOTRACKR_TAX_YEAR out of range: {self.reports.tax_year}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    if isinstance(nested_value, Path):
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


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST
