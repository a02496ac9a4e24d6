import pytest

from userhub.client.config import ClientSettings
from userhub.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "APP_ENV",
        "PORT",
        "JWT_SECRET",
        "JWT_EXPIRES_IN",
        "BCRYPT_ROUNDS",
        "DEFAULT_USER_PASSWORD",
        "CORS_ALLOW_ORIGINS",
        "API_BASE_URL",
        "API_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    # keep a stray .env in the working directory from leaking into the checks
    monkeypatch.setattr("userhub.core.config.load_dotenv", lambda: None)
    monkeypatch.setattr("userhub.client.config.load_dotenv", lambda: None)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()
    assert settings.environment == "development"
    assert settings.is_development and not settings.is_production
    assert settings.port == 3000
    assert settings.jwt_expires_in_seconds == 24 * 60 * 60
    assert settings.bcrypt_rounds == 10
    assert settings.default_user_password == "defaultPassword123"
    assert settings.cors_allow_origins == ["http://localhost:5173"]


@pytest.mark.parametrize(
    "raw, seconds",
    [("3600", 3600), ("45s", 45), ("15m", 900), ("24h", 86400), ("2d", 172800), (" 7 d ", 604800)],
)
def test_token_lifetime_durations(clean_env, raw, seconds):
    clean_env.setenv("JWT_EXPIRES_IN", raw)
    assert Settings().jwt_expires_in_seconds == seconds


@pytest.mark.parametrize("raw", ["soon", "1w", "-5m", "0", "1.5h"])
def test_invalid_token_lifetime(clean_env, raw):
    clean_env.setenv("JWT_EXPIRES_IN", raw)
    with pytest.raises(RuntimeError, match="JWT_EXPIRES_IN"):
        Settings()


def test_invalid_port(clean_env):
    clean_env.setenv("PORT", "http")
    with pytest.raises(RuntimeError, match="PORT"):
        Settings()


def test_cors_origins_are_split_and_trimmed(clean_env):
    clean_env.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test ,")
    assert Settings().cors_allow_origins == ["http://a.test", "http://b.test"]


def test_environment_is_case_insensitive(clean_env):
    clean_env.setenv("APP_ENV", " Production ")
    assert Settings().is_production


def test_client_settings(clean_env, tmp_path):
    clean_env.setenv("API_BASE_URL", "http://api.test/api/")
    clean_env.setenv("API_TIMEOUT_SECONDS", "2.5")
    clean_env.setenv("TOKEN_STORAGE_PATH", str(tmp_path / "session.json"))

    settings = ClientSettings()
    assert settings.api_base_url == "http://api.test/api"
    assert settings.timeout_seconds == 2.5
    assert settings.token_storage_path == tmp_path / "session.json"


def test_client_timeout_must_be_numeric(clean_env):
    clean_env.setenv("API_TIMEOUT_SECONDS", "fast")
    with pytest.raises(RuntimeError, match="API_TIMEOUT_SECONDS"):
        ClientSettings()
