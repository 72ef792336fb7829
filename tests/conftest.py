# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import create_app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    Shared TestClient fixture for all tests.

    Uses the application factory so configuration stays test-friendly.
    """
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def partners_env(monkeypatch):
    """
    Configure the partners API settings and reset the settings cache so the
    values are picked up, then reset again afterwards.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("API_HOSTNAME", "partners.example.com")
    monkeypatch.setenv("DATASET_ENDPOINT", "/api/dataset")
    monkeypatch.setenv("RESULT_ENDPOINT", "/api/result")
    monkeypatch.setenv("USERKEY", "user-key-123")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
