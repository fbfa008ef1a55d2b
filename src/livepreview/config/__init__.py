"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .preview import (
    DEFAULT_LOCALE,
    PreviewConfig,
    get_preview_config,
    parse_log_level,
)

__all__ = [
    "DEFAULT_LOCALE",
    "ConfigurationError",
    "PreviewConfig",
    "configure_logging",
    "get_preview_config",
    "optional_env_var",
    "parse_log_level",
]
