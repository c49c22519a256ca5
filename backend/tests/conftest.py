import pytest
from fastapi.testclient import TestClient

from labmath.config.settings import Settings
from labmath.main import create_app


@pytest.fixture()
def settings():
    return Settings(log_level="DEBUG", batch_max_rows=100, batch_preview_rows=2)


@pytest.fixture()
def client(settings):
    app = create_app(settings=settings)
    return TestClient(app)
