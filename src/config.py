"""
Application configuration management.
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


def _default_data_dir() -> Path:
    env_dir = os.getenv("DATA_DIR")
    if env_dir:
        return Path(env_dir)
    return Path("./data")


@dataclass
class AppConfig:
    """Application configuration with environment overrides."""

    # Paths
    data_dir: Path = field(default_factory=_default_data_dir)
    source_file: str = field(default_factory=lambda: os.getenv("SOURCE_FILE", "source-data.json"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Cache settings
    cache_ttl_seconds: int = field(default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "3600")))

    @property
    def source_path(self) -> Path:
        return self.data_dir / self.source_file


# Global config instance
config = AppConfig()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging once, using LOG_LEVEL unless overridden."""
    level_name = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    return logging.getLogger("src")


# Status value that marks a person as active
ACTIVE_STATUS = "active"

# Sub-record keys on a source entry, in lookup order
PERSON_KEYS = {
    "employee": "employees",
    "external": "externals",
}

# Monthly financial series keys, in lookup order
EARNINGS_SERIES_KEYS = ["potentialEarningsByMonth", "costsByMonth"]

# lastThreeMonthsIndividually is newest-first: index 0 -> august
UTILISATION_SLOT_FIELDS = {
    0: "august",
    1: "july",
    2: "june",
}

# (field key, display label) pairs in render order
COLUMN_SPEC = [
    ("person", "Person"),
    ("past12Months", "Past 12 Months"),
    ("y2d", "Y2D"),
    ("june", "June"),
    ("july", "July"),
    ("august", "August"),
    ("netEarningsPrevMonth", "Net Earnings Prev Month"),
]

# Placeholders
PLACEHOLDER_MISSING = "N/A"
PLACEHOLDER_INVALID = "-"

# Formatting constants
CURRENCY_SUFFIX = "EUR"
FORMAT_EUR = "{:.2f} " + CURRENCY_SUFFIX
FORMAT_PERCENT = "{:d}%"
MONTH_FORMAT = "%Y-%m"
