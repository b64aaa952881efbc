"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

# Ensure 'apps/api/src' is on sys.path for absolute 'api.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from api.main import app  # noqa: E402


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a FastAPI test client.

    Entering the client runs the lifespan, so every test starts with an
    empty user store.
    """
    with TestClient(app) as test_client:
        yield test_client
