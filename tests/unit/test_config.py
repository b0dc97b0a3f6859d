import pytest
from pydantic import ValidationError

from shop_agent.config import Settings
from shop_agent.errors import ConfigurationError


def test_settings_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SHOPIFY_STORE", "demo.myshopify.com")
    monkeypatch.setenv("SHOPIFY_TOKEN", "shpat_env")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)
    commerce = settings.commerce_config()

    assert settings.port == 8080
    assert settings.require_openai_key() == "sk-env"
    assert commerce.store_domain == "demo.myshopify.com"
    assert commerce.access_token == "shpat_env"
    assert commerce.api_version == "2025-07"


def test_missing_store_credentials_fail_fast(monkeypatch) -> None:
    monkeypatch.delenv("SHOPIFY_STORE", raising=False)
    monkeypatch.delenv("SHOPIFY_TOKEN", raising=False)

    settings = Settings(_env_file=None)

    with pytest.raises(ConfigurationError, match="SHOPIFY_STORE, SHOPIFY_TOKEN"):
        settings.commerce_config()


def test_missing_openai_key(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        Settings(_env_file=None).require_openai_key()


def test_settings_are_immutable() -> None:
    settings = Settings(_env_file=None, shopify_store="demo")

    with pytest.raises(Exception):
        settings.shopify_store = "other"


def test_token_not_in_repr() -> None:
    settings = Settings(
        _env_file=None,
        shopify_store="demo",
        shopify_token="shpat_secret",
        openai_api_key="sk-secret",
    )

    assert "shpat_secret" not in repr(settings)
    assert "sk-secret" not in repr(settings)
    assert "shpat_secret" not in repr(settings.commerce_config())


def test_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
