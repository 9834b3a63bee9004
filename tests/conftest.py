import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import ProductStore
from app.main import create_app

API_KEY = "12345"


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, log_level="INFO")


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)
