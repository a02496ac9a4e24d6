from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from userhub.core.app_factory import create_application
from userhub.core.config import Settings

TEST_SECRET = "test-secret-key-with-enough-entropy-0123456789"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("JWT_EXPIRES_IN", "24h")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    monkeypatch.delenv("DEFAULT_USER_PASSWORD", raising=False)
    return Settings()


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def container(app):
    return app.state.container


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client) -> Callable[..., Dict]:
    def _register(name: str = "Ann", email: str = "a@x.com", password: str = "secret1") -> Dict:
        res = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _register
