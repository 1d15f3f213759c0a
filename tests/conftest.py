# Shared fixtures for the Scan & Go tests.
# Created: 2026-10-19

import pytest

from scango.config import Settings

SECRET = "s3cret"


def make_settings(**overrides) -> Settings:
    """Fully configured settings, isolated from the environment's .env file."""
    values = {
        "shopify_shop": "a.example.com",
        "shopify_api_key": "X",
        "shopify_api_secret": SECRET,
        "shopify_scopes": "read_products,write_orders",
        "app_url": "https://app.example",
        "shopify_admin_token": "shpat_test",
        "allowed_origins": ["https://dev.shopify.com"],
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture(autouse=True)
def _reset_singletons():
    from scango.config import reset_settings
    from scango.oauth.callback import reset_authorizer
    from scango.store import reset_basket_store

    reset_settings()
    reset_authorizer()
    reset_basket_store()
    yield
    reset_settings()
    reset_authorizer()
    reset_basket_store()


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def use_settings(monkeypatch):
    """Install a Settings instance as the process-wide configuration."""
    import scango.config as config_mod

    def _install(s: Settings) -> Settings:
        monkeypatch.setattr(config_mod, "_settings", s)
        return s

    return _install
