from backend.app.core.settings import Settings, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Customs Office Invoicing"
    assert isinstance(settings.secret_key, str) and settings.secret_key
    assert isinstance(settings.database_url, str) and settings.database_url
    assert settings.SECRET_KEY == settings.secret_key


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://office.example.com/")
    monkeypatch.setenv("APP_ENV", "production")
    settings = Settings()
    assert settings.access_token_expire_minutes == 15
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.public_base_url == "https://office.example.com"
    assert settings.environment == "production"
