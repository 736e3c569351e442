import pytest

from app.core.config import Settings, validate_settings


def test_defaults_validate():
    assert validate_settings(Settings()) is True


def test_production_requires_smtp_credentials():
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="production")


def test_production_with_credentials():
    config = Settings(ENVIRONMENT="production", SMTP_USER="store@vastrafusion.com", SMTP_PASS="secret")
    assert config.is_production
    assert validate_settings(config) is True


def test_missing_mongo_uri_fails():
    with pytest.raises(ValueError, match="MONGO_URI"):
        validate_settings(Settings(MONGO_URI=""))


def test_cors_origin_trailing_slash_removed():
    assert Settings(CORS_ORIGIN="https://vastrafusion.com/").CORS_ORIGIN == "https://vastrafusion.com"
