"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from structclone import ProcedureRegistry, clear_clone_procedures
from structclone.config import reset_settings


@pytest.fixture(autouse=True)
def clean_global_state():
    """Every test starts with an empty global registry and fresh settings."""
    clear_clone_procedures()
    reset_settings()
    yield
    clear_clone_procedures()
    reset_settings()


@pytest.fixture
def registry():
    """Private ProcedureRegistry for testing."""
    return ProcedureRegistry()

