# Tests for config.py
# Created: 2026-10-19

from scango.config import ALL_KEYS, Settings, get_settings, reset_settings


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SHOPIFY_SHOP", "env.example.com")
        monkeypatch.setenv("SHOPIFY_API_SECRET", "from-env")
        monkeypatch.setenv("EXPOSE_ACCESS_TOKEN", "true")
        monkeypatch.setenv("ALLOWED_ORIGINS", '["https://till.example"]')
        s = Settings(_env_file=None)
        assert s.shopify_shop == "env.example.com"
        assert s.api_secret() == "from-env"
        assert s.expose_access_token is True
        assert s.allowed_origins == ["https://till.example"]

    def test_secret_not_in_repr(self, settings):
        assert "s3cret" not in repr(settings)
        assert "shpat_test" not in repr(settings)

    def test_missing_reports_env_names(self, settings_factory):
        s = settings_factory(shopify_shop="  ", shopify_api_secret="", app_url=None)
        assert s.missing(*ALL_KEYS) == ["SHOPIFY_SHOP", "SHOPIFY_API_SECRET", "APP_URL"]

    def test_nothing_missing(self, settings):
        assert settings.missing(*ALL_KEYS) == []

    def test_scope_list(self, settings_factory):
        s = settings_factory(shopify_scopes=" read_products, ,write_orders ")
        assert s.scope_list == ["read_products", "write_orders"]
        assert settings_factory(shopify_scopes=None).scope_list == []

    def test_callback_url(self, settings_factory):
        s = settings_factory(app_url="https://app.example/")
        assert s.callback_url == "https://app.example/api/v1/auth/callback"

    def test_cors_origins_include_app_url(self, settings):
        assert settings.cors_origins == ["https://dev.shopify.com", "https://app.example"]

    def test_defaults(self, settings):
        assert settings.shopify_api_version == "2024-10"
        assert settings.http_timeout == 10.0
        assert settings.basket_ttl_seconds == 3600
        assert settings.expose_access_token is False
        assert settings.state_cookie_secure is True


class TestGetSettings:
    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_reset(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first
