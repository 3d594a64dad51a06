"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, reload_config, Config, HighlightingConfig
from .logger import get_logger, setup_logging
from .exceptions import (
    HighlightingError,
    ConfigurationError,
    QueryParseError,
    SanitizationError
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "HighlightingConfig",
    "get_logger",
    "setup_logging",
    "HighlightingError",
    "ConfigurationError",
    "QueryParseError",
    "SanitizationError"
]
