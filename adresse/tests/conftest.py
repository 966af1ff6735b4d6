"""
Test fixtures and configuration.
"""

import pytest

from adresse.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Each test starts without a cached Settings instance."""
    reset_settings()
    yield
    reset_settings()
