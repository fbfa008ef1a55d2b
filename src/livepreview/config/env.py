"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def optional_env_var(name: str, default: str) -> str:
    """Return an environment variable, falling back to ``default`` when missing/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
