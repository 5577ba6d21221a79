"""Tests for clone settings."""

import pytest
from pydantic import ValidationError

from structclone import CloneSettings, StructuredCloner
from structclone.config import get_settings, reset_settings


def test_defaults():
    settings = CloneSettings()

    assert settings.pattern_flags == "ims"
    assert settings.clone_nodes is True
    assert settings.node_type_pattern == r"^\w*Element$"
    assert settings.warn_dropped_pattern_flags is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STRUCTCLONE_PATTERN_FLAGS", "im")
    monkeypatch.setenv("STRUCTCLONE_CLONE_NODES", "false")

    settings = CloneSettings()

    assert settings.pattern_flags == "im"
    assert settings.clone_nodes is False


@pytest.mark.parametrize("flags", ["iq", "ii", "g"])
def test_invalid_pattern_flags_rejected(flags):
    with pytest.raises(ValidationError):
        CloneSettings(pattern_flags=flags)


def test_empty_pattern_flags_allowed():
    assert CloneSettings(pattern_flags="").pattern_flags == ""


def test_invalid_node_pattern_rejected():
    with pytest.raises(ValidationError, match="invalid node type pattern"):
        CloneSettings(node_type_pattern="(unclosed")


def test_settings_are_frozen():
    settings = CloneSettings()

    with pytest.raises(ValidationError):
        settings.clone_nodes = False


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("STRUCTCLONE_PATTERN_FLAGS", "i")
    assert get_settings().pattern_flags == "ims"

    reset_settings()
    assert get_settings().pattern_flags == "i"


def test_cloner_uses_process_settings_by_default(monkeypatch):
    monkeypatch.setenv("STRUCTCLONE_CLONE_NODES", "false")
    reset_settings()

    cloner = StructuredCloner()

    assert cloner.settings.clone_nodes is False
