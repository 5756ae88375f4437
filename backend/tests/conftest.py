import pytest
from fastapi.testclient import TestClient
from valg.main import app


@pytest.fixture(scope="module")
def client():
    """Create test client for FastAPI app."""
    with TestClient(app) as client:
        yield client
