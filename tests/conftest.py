"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import MagicMock, PropertyMock

import pytest
import requests

from vocab_sentence.config import API_KEY_ENV


def _make_response(status_code=200, payload=None, content=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if content is None:
        content = json.dumps(payload if payload is not None else {}).encode("utf-8")
    type(response).content = PropertyMock(return_value=content)
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def make_response():
    """Factory for mock ``requests.Response`` objects usable as context managers."""
    return _make_response


@pytest.fixture
def api_key(monkeypatch):
    """Set a test API key in the environment."""
    monkeypatch.setenv(API_KEY_ENV, "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    """Ensure the API key is absent from the environment."""
    monkeypatch.delenv(API_KEY_ENV, raising=False)


@pytest.fixture
def mock_session():
    """Create a mock HTTP session."""
    return MagicMock(spec=requests.Session)
