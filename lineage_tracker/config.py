"""Configuration management for the lineage tracker.

Loads environment variables (optionally from a .env file) and provides
centralized config access. CLI options take precedence over these values.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .analyzer.lineage import REPORT_ORDERS
from .analyzer.parser import LanguageParser

__version__ = "0.3.0"

SUPPORTED_LANGUAGES = tuple(sorted(set(LanguageParser.SUPPORTED_LANGUAGES.values())))


class Config:
    """Configuration loader with environment variable support."""

    def __init__(self, env_path: Optional[Path] = None):
        """Initialize config by loading a .env file.

        Args:
            env_path: .env file to load; defaults to ./.env in the working directory

        Raises:
            ValueError: If a configured value is invalid
        """
        load_dotenv(env_path or Path.cwd() / ".env")
        self._validate()

    def _validate(self):
        """Validate environment values that have a fixed set of choices.

        Raises:
            ValueError: If LINEAGE_REPORT_ORDER or LINEAGE_LANGUAGE is unknown
        """
        if self.report_order not in REPORT_ORDERS:
            raise ValueError(
                f"LINEAGE_REPORT_ORDER must be one of {', '.join(REPORT_ORDERS)}, "
                f"got '{self.report_order}'"
            )
        if self.language and self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"LINEAGE_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}, "
                f"got '{self.language}'"
            )

    @property
    def language(self) -> Optional[str]:
        """Grammar override; None means detect from the file extension."""
        return os.getenv("LINEAGE_LANGUAGE") or None

    @property
    def report_order(self) -> str:
        """Order of variables in the report: 'declaration' or 'name'."""
        return os.getenv("LINEAGE_REPORT_ORDER", "declaration").strip().lower()

    @property
    def scope_cache_enabled(self) -> bool:
        """Whether scope paths are memoized per parent node during a walk."""
        return os.getenv("LINEAGE_SCOPE_CACHE", "1").strip().lower() not in ("0", "false", "no")


# Singleton instance
_config = None


def get_config() -> Config:
    """Get or create singleton Config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    """Drop the cached Config so the next get_config() re-reads the environment."""
    global _config
    _config = None
