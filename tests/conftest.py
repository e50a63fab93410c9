"""Shared pytest fixtures for all tests."""

import pytest

from typesniff.analysis.typing.classifier import default_classifier
from typesniff.analysis.typing.patterns import default_pattern_config
from typesniff.core.config import get_settings
from typesniff.core.logging import configure_default_logging


@pytest.fixture(autouse=True)
def default_logging():
    """Reset logging, which CLI verbosity flags reconfigure globally."""
    configure_default_logging()


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings and configuration around a test.

    Use together with monkeypatch.setenv("TYPESNIFF_...") to override settings.
    """
    get_settings.cache_clear()
    default_pattern_config.cache_clear()
    default_classifier.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
    default_pattern_config.cache_clear()
    default_classifier.cache_clear()


@pytest.fixture
def customer_rows():
    """Small customer dataset with one column per common format."""
    return [
        {
            "id": "1",
            "name": "Alice",
            "email": "alice@example.com",
            "balance": "$1,200.50",
            "discount": "10%",
            "active": "true",
            "signup": "2021-03-04",
        },
        {
            "id": "2",
            "name": "Bob",
            "email": "bob@example.com",
            "balance": "$80",
            "discount": "7.5%",
            "active": "FALSE",
            "signup": "2021-03-05",
        },
        {
            "id": "3",
            "name": "Alice",
            "email": "alice2@example.org",
            "balance": "$2,345.50",
            "discount": "",
            "active": "true",
            "signup": "2021-04-01",
        },
    ]
