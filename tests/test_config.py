from src.core.config import Settings
from src.shared.enums import UserType


def test_settings_read_frontend_env_names(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_API_URL", "https://api.example.com")
    monkeypatch.setenv("NEXT_PUBLIC_API_TIMEOUT", "5000")
    monkeypatch.setenv("API_USER_TYPE", "agent")
    monkeypatch.setenv("MAX_LIMIT", "50")

    settings = Settings(_env_file=None)

    assert settings.api_url == "https://api.example.com"
    assert settings.api_timeout_ms == 5000
    assert settings.api_timeout_seconds == 5.0
    assert settings.api_user_type is UserType.AGENT
    assert settings.max_limit == 50


def test_settings_defaults(monkeypatch):
    for name in ("NEXT_PUBLIC_API_URL", "NEXT_PUBLIC_API_TIMEOUT", "API_TOKEN", "API_USER_TYPE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_url == "http://localhost:3005"
    assert settings.api_timeout_seconds == 30.0
    assert settings.api_token is None
    assert settings.default_page == 1
    assert settings.default_limit == 10


def test_settings_only_carry_client_options():
    assert "app_name" not in Settings.model_fields
    assert "debug" not in Settings.model_fields
