# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``payment_engine.main`` is a module singleton and so is the
session registry. ``_clean_sessions`` empties the registry after every test
so sessions opened in one test never leak into the next.
"""

import pytest
from fastapi.testclient import TestClient

from payment_engine.main import app
from payment_engine.services.sessions import get_session_registry


@pytest.fixture(autouse=True)
def _clean_sessions():
    """Drop all calculator sessions after each test."""
    yield
    get_session_registry().clear()


@pytest.fixture
def client():
    return TestClient(app)
