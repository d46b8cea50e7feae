"""Test fixtures for teaser tests."""

import pytest


@pytest.fixture
def identity_stem():
    """Stemmer that leaves every word unchanged."""
    return lambda word: word


@pytest.fixture
def plural_stem():
    """Stemmer that only drops a trailing 's'."""

    def stem(word):
        return word[:-1] if word.endswith("s") else word

    return stem


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables for testing."""
    env_vars = [
        "TEASER_WORD_COUNT",
        "TEASER_EMPHASIS_OPEN",
        "TEASER_EMPHASIS_CLOSE",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield
