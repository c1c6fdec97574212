import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

ACCESS_KEY = "s3cret-admin-key"


@pytest.fixture
def settings():
    return Settings(admin_access_key=ACCESS_KEY)


@pytest.fixture
def production_settings():
    return Settings(admin_access_key=ACCESS_KEY, production=True)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
