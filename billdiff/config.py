"""
Centralized configuration management for billdiff.
Loads and validates environment variables with typed configuration classes.

The diff functions never read this module on their own: they take a
``DiffConfig`` argument and fall back to ``DiffConfig()`` defaults. Only
long-lived callers such as ``VersionComparer`` pull from ``get_config()``.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from billdiff.load_env import load_env
from billdiff.utils.content import DISPLAY_MAX_LENGTH, SECTION_MAX_LENGTH

logger = logging.getLogger(__name__)

VALID_GRANULARITIES = ("word", "char", "line")

# Sum of both bounded section lengths above which no diff is attempted
TOO_LARGE_THRESHOLD = 40000

DEFAULT_CACHE_TTL_SECONDS = 3600.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default


@dataclass
class DiffConfig:
    """Size guards and defaults for section comparison."""
    section_max_length: int = SECTION_MAX_LENGTH
    display_max_length: int = DISPLAY_MAX_LENGTH
    too_large_threshold: int = TOO_LARGE_THRESHOLD
    default_granularity: str = "word"
    time_budget_seconds: Optional[float] = None
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS

    @classmethod
    def from_env(cls) -> 'DiffConfig':
        """Create diff config from environment variables."""
        return cls(
            section_max_length=_int_env('DIFF_SECTION_MAX_LENGTH', SECTION_MAX_LENGTH),
            display_max_length=_int_env('DIFF_DISPLAY_MAX_LENGTH', DISPLAY_MAX_LENGTH),
            too_large_threshold=_int_env('DIFF_TOO_LARGE_THRESHOLD', TOO_LARGE_THRESHOLD),
            default_granularity=os.getenv('DIFF_GRANULARITY', 'word').strip().lower(),
            time_budget_seconds=_float_env('DIFF_TIME_BUDGET_SECONDS', None),
            cache_ttl_seconds=_float_env('DIFF_CACHE_TTL_SECONDS', DEFAULT_CACHE_TTL_SECONDS),
        )

    def validate(self) -> bool:
        """Validate that limits are usable."""
        valid = True
        for name in ('section_max_length', 'display_max_length', 'too_large_threshold'):
            if getattr(self, name) <= 0:
                logger.warning("%s must be positive, got %s", name, getattr(self, name))
                valid = False
        if self.default_granularity not in VALID_GRANULARITIES:
            logger.warning("Unknown diff granularity %r", self.default_granularity)
            valid = False
        if self.time_budget_seconds is not None and self.time_budget_seconds <= 0:
            logger.warning("DIFF_TIME_BUDGET_SECONDS must be positive, got %s", self.time_budget_seconds)
            valid = False
        if self.cache_ttl_seconds <= 0:
            logger.warning("DIFF_CACHE_TTL_SECONDS must be positive, got %s", self.cache_ttl_seconds)
            valid = False
        return valid


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = 'INFO'
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    file_path: Optional[str] = None
    
    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Create logging config from environment variables."""
        return cls(
            level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            format=os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            file_path=os.getenv('LOG_FILE')
        )


def configure_logging(logging_config: LoggingConfig) -> None:
    """Apply a LoggingConfig to the root logger."""
    handlers = [logging.StreamHandler()]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))
    level = getattr(logging, logging_config.level, logging.INFO)
    logging.basicConfig(level=level, format=logging_config.format, handlers=handlers)


class Config:
    """Main configuration class that aggregates all configuration sections."""
    
    def __init__(self):
        """Initialize configuration by loading environment variables."""
        # Load environment variables first
        load_env()
        
        self.diff = DiffConfig.from_env()
        self.logging = LoggingConfig.from_env()
        configure_logging(self.logging)
        
        self._log_config_status()
    
    def _log_config_status(self):
        """Log the status of configuration."""
        logger.info("Configuration loaded:")
        logger.info("  Section limit: %d chars, display limit: %d chars",
                    self.diff.section_max_length, self.diff.display_max_length)
        logger.info("  Too-large threshold: %d chars", self.diff.too_large_threshold)
        logger.info("  Granularity: %s", self.diff.default_granularity)
        logger.info("  Time budget: %s",
                    f"{self.diff.time_budget_seconds:g}s" if self.diff.time_budget_seconds else "none")
    
    def validate_all(self) -> bool:
        """
        Validate all configuration sections.
        Returns True if all required configuration is present.
        """
        validations = [
            ("Diff", self.diff.validate()),
            ("Logging", hasattr(logging, self.logging.level)),
        ]
        
        all_valid = all(valid for _, valid in validations)
        
        if not all_valid:
            logger.warning("Some configuration sections are invalid:")
            for name, valid in validations:
                if not valid:
                    logger.warning("  - %s: invalid or missing", name)
        
        return all_valid


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.
    Creates it if it doesn't exist yet.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    """Reset the global configuration instance (useful for testing)."""
    global _config
    _config = None
