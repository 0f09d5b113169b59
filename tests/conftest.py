"""
Test configuration and fixtures.

This module sets up test environment and provides shared fixtures for all tests.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Run without a model unless a test injects one.
# Must be set BEFORE any import of shared.config
os.environ["GROQ_API_KEY"] = ""
os.environ["LLM_MODEL"] = "llama-3.1-8b-instant"

from shared.config import Settings, get_settings  # noqa: E402

TEST_MODEL = "llama-3.1-8b-instant"


@pytest.fixture
def settings() -> Settings:
    """Fresh settings instance (bypasses the lru_cache)."""
    get_settings.cache_clear()
    return Settings()


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """
    LLM client double.

    Configure replies per test with `mock_llm_client.complete.side_effect = [...]`
    or `mock_llm_client.complete.return_value = "..."`.
    """
    client = MagicMock()
    client.model = TEST_MODEL
    client.complete = AsyncMock(return_value="")
    return client


@pytest.fixture
def barbershop_catalog() -> dict:
    """Catalog payload as sent by the booking front-end."""
    return {
        "services": [
            {"id": 1, "name": "Corte", "synonyms": ["corte de pelo", "pelado"]},
            {"id": 2, "name": "Barba", "synonyms": ["arreglo de barba"]},
            {"id": 3, "name": "Cejas"},
        ],
        "barbers": [
            {"id": 1, "name": "Alex"},
            {"id": 2, "name": "José"},
        ],
    }
