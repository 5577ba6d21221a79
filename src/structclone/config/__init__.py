"""Configuration module using Pydantic Settings.

Usage:
    from structclone.config import CloneSettings

    settings = CloneSettings(pattern_flags="im")
"""

from structclone.config.settings import (
    PATTERN_FLAG_CODES,
    CloneSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "CloneSettings",
    "PATTERN_FLAG_CODES",
    "get_settings",
    "reset_settings",
]
