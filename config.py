"""
Configuration module for the Recipe Book
========================================

This module centralizes all configuration for the recipe book:
- Paths (project root, data directory, log directory)
- User settings loaded from data/config.yaml (optional)
- Logging configuration consumed by tools/logging_utils.py
- CSV ingestion and display settings (BOOK_CONFIG)

CONFIGURATION:
- data/config.yaml: Optional user settings. Only the `recipe_book:` section is read.

Usage:
    from config import BOOK_CONFIG, DATA_DIR

    delimiter = BOOK_CONFIG["csv_delimiter"]

Example data/config.yaml:
    recipe_book:
      csv_delimiter: ","
      csv_encoding: "utf-8"
      skip_header: true
      mastered_true_value: "1"
      strict_csv: false
      auto_balance_on_load: false
"""

import codecs
import os
from pathlib import Path
from typing import Dict, Any

import yaml


# =============================================================================
# PATHS
# =============================================================================

# Project root directory (where this file lives)
PROJECT_ROOT = Path(__file__).parent

# Data directory - THE canonical location for all runtime data
DATA_DIR = Path(os.environ.get("RECIPE_BOOK_DATA_DIR", str(PROJECT_ROOT / "data")))

# Config path - ONE location, no fallbacks
CONFIG_PATH = DATA_DIR / "config.yaml"

LOG_DIR = DATA_DIR / "logs"


# =============================================================================
# USER CONFIGURATION LOADING
# =============================================================================

def _load_user_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load user configuration from data/config.yaml.

    A missing file is not an error: the recipe book runs on defaults.
    A file that exists but cannot be parsed IS an error.

    Returns:
        Dict containing user configuration (empty if no file)

    Raises:
        ValueError: If YAML is invalid or the top level is not a mapping
    """
    config_path = config_path or CONFIG_PATH

    if not config_path.exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(
            f"\n{'='*60}\n"
            f"ERROR: config.yaml has invalid YAML syntax\n"
            f"{'='*60}\n"
            f"File: {config_path}\n"
            f"Error: {e}\n"
            f"{'='*60}"
        ) from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ValueError(
            f"\n{'='*60}\n"
            f"ERROR: config.yaml must contain a mapping at the top level\n"
            f"{'='*60}\n"
            f"File: {config_path}\n"
            f"{'='*60}"
        )

    return config


USER_CONFIG = _load_user_config()


# =============================================================================
# RECIPE BOOK CONFIGURATION
# =============================================================================

DEFAULT_BOOK_CONFIG = {
    "csv_delimiter": ",",            # Field separator for recipe CSV files
    "csv_encoding": "utf-8",         # Undecodable bytes are replaced, never fatal
    "skip_header": True,             # First line of every CSV is a header
    "mastered_true_value": "1",      # Only this flag value means "mastered"
    "strict_csv": False,             # Raise on malformed rows instead of skipping
    "auto_balance_on_load": False,   # Rebalance after loading a CSV from the CLI
}


def build_book_config(user_config: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Merge the `recipe_book:` section of the user config over the defaults.

    Unknown keys are ignored so a typo cannot silently change behaviour.

    Raises:
        ValueError: If csv_delimiter is not a single character or csv_encoding is unknown
    """
    section = (user_config or {}).get("recipe_book") or {}
    if not isinstance(section, dict):
        raise ValueError(
            f"\n{'='*60}\n"
            f"ERROR: config.yaml recipe_book must be a mapping\n"
            f"{'='*60}"
        )

    merged = dict(DEFAULT_BOOK_CONFIG)
    for key in DEFAULT_BOOK_CONFIG:
        if key in section:
            merged[key] = section[key]

    if not isinstance(merged["csv_delimiter"], str) or len(merged["csv_delimiter"]) != 1:
        raise ValueError(
            f"\n{'='*60}\n"
            f"ERROR: config.yaml recipe_book.csv_delimiter must be a single character\n"
            f"{'='*60}\n"
            f"Got: {merged['csv_delimiter']!r}\n"
            f"{'='*60}"
        )

    try:
        codecs.lookup(str(merged["csv_encoding"]))
    except LookupError:
        raise ValueError(
            f"\n{'='*60}\n"
            f"ERROR: config.yaml recipe_book.csv_encoding is not a known encoding\n"
            f"{'='*60}\n"
            f"Got: {merged['csv_encoding']!r}\n"
            f"{'='*60}"
        ) from None

    merged["mastered_true_value"] = str(merged["mastered_true_value"]).strip()
    return merged


BOOK_CONFIG = build_book_config(USER_CONFIG)


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

CONSOLE_LOG_LEVEL = os.environ.get("RECIPE_BOOK_LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        },
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": CONSOLE_LOG_LEVEL,
            "formatter": "standard",
            "stream": "ext://sys.stderr"
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": str(LOG_DIR / "recipe_book.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5
        }
    },
    "root": {
        "level": "DEBUG",
        "handlers": ["console", "file"]
    }
}
