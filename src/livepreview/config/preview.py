"""Live preview configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_LOCALE = "en-US"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class PreviewConfig:
    """Holds settings shared by the CLI and preview sessions."""

    locale: str = DEFAULT_LOCALE
    log_level: int = logging.INFO


def parse_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def get_preview_config() -> PreviewConfig:
    return PreviewConfig(
        locale=optional_env_var("LIVEPREVIEW_LOCALE", DEFAULT_LOCALE),
        log_level=parse_log_level(optional_env_var("LIVEPREVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
