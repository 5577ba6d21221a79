"""Configuration settings using Pydantic Settings.

Provides typed configuration for the clone engine with environment variable support.

Usage:
    from structclone.config import CloneSettings

    # Load from environment variables (STRUCTCLONE_*)
    settings = CloneSettings()

    # Or override with explicit values
    settings = CloneSettings(pattern_flags="im", clone_nodes=False)
"""

from __future__ import annotations

import re

try:
    from pydantic import field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for structclone. "
        "Install with: pip install structclone"
    ) from e

PATTERN_FLAG_CODES: dict[str, re.RegexFlag] = {
    "a": re.ASCII,
    "i": re.IGNORECASE,
    "L": re.LOCALE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
"""Single-letter codes for compiled pattern flags, as used in inline `(?...)` groups."""


class CloneSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the structured clone engine.

    Attributes:
        pattern_flags: Ordered flag letters preserved when recompiling patterns.
            Flags outside this set are dropped from the copy.
        clone_nodes: Enable the platform node path (native shallow clone).
        node_type_pattern: Regex matched against a class name to detect node types.
        warn_dropped_pattern_flags: Emit PatternFlagsDroppedWarning when a
            pattern copy loses flags.

    Environment Variables:
        STRUCTCLONE_PATTERN_FLAGS
        STRUCTCLONE_CLONE_NODES
        STRUCTCLONE_NODE_TYPE_PATTERN
        STRUCTCLONE_WARN_DROPPED_PATTERN_FLAGS
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    pattern_flags: str = "ims"
    clone_nodes: bool = True
    node_type_pattern: str = r"^\w*Element$"
    warn_dropped_pattern_flags: bool = False

    @field_validator("pattern_flags")
    @classmethod
    def check_pattern_flags(cls, value: str) -> str:
        unknown = sorted(set(value) - PATTERN_FLAG_CODES.keys())
        if unknown:
            raise ValueError(f"unknown pattern flag codes: {''.join(unknown)}")
        if len(set(value)) != len(value):
            raise ValueError(f"duplicate pattern flag codes in {value!r}")
        return value

    @field_validator("node_type_pattern")
    @classmethod
    def check_node_type_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid node type pattern {value!r}: {e}") from e
        return value


_settings: CloneSettings | None = None


def get_settings() -> CloneSettings:
    """Settings used by the module-level `clone`, loaded on first access."""
    global _settings
    if _settings is None:
        _settings = CloneSettings()
    return _settings


def reset_settings() -> None:
    """Forget loaded settings so the next access re-reads the environment."""
    global _settings
    _settings = None
