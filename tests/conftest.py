"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entitykit import EntitySettings, MetadataStore


@pytest.fixture
def store():
    """Fresh MetadataStore instance."""
    return MetadataStore()


@pytest.fixture
def quiet_settings():
    """Settings with every optional check turned off."""
    return EntitySettings(warn_on_redeclare=False, validate_on_declare=False)

