"""
Shared test fixtures — FastAPI test client.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Pin configuration before importing app modules
os.environ["DEFAULT_CURRENCY"] = "USD"

from freelance_pricing.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
