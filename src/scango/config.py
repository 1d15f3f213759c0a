# Configuration: environment-backed settings for the Scan & Go backend.
# Created: 2026-10-19
#
# Keys are read from the process environment (or a local .env file) by their
# upper-case names: SHOPIFY_SHOP, SHOPIFY_API_KEY, SHOPIFY_API_SECRET, ...
# Required keys have no defaults; callers ask `missing()` before using them.

from __future__ import annotations

import logging

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Keys each operation needs before it may run.
INSTALL_KEYS = ("shopify_shop", "shopify_api_key", "shopify_scopes", "app_url")
CALLBACK_KEYS = ("shopify_api_key", "shopify_api_secret")
ADMIN_KEYS = ("shopify_shop", "shopify_admin_token")
ALL_KEYS = (
    "shopify_shop",
    "shopify_api_key",
    "shopify_api_secret",
    "shopify_scopes",
    "app_url",
    "shopify_admin_token",
)


class Settings(BaseSettings):
    """Scan & Go settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # OAuth app
    shopify_shop: str | None = None
    shopify_api_key: str | None = None
    shopify_api_secret: SecretStr | None = None
    shopify_scopes: str | None = None
    app_url: str | None = None
    shopify_per_user_grant: bool = False
    expose_access_token: bool = False
    state_cookie_secure: bool = True

    # Admin API
    shopify_admin_token: SecretStr | None = None
    shopify_api_version: str = "2024-10"
    http_timeout: float = 10.0

    # Baskets / orders
    basket_ttl_seconds: int = 3600
    allowed_origins: list[str] = ["https://dev.shopify.com"]

    @classmethod
    def load(cls) -> Settings:
        """Read a fresh Settings instance from the environment."""
        return cls()

    def missing(self, *fields: str) -> list[str]:
        """Return the environment names of *fields* that are unset or empty."""
        absent = []
        for name in fields:
            value = getattr(self, name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if value is None or (isinstance(value, str) and not value.strip()):
                absent.append(name.upper())
        return absent

    @property
    def scope_list(self) -> list[str]:
        if not self.shopify_scopes:
            return []
        return [s.strip() for s in self.shopify_scopes.split(",") if s.strip()]

    @property
    def callback_url(self) -> str:
        return f"{(self.app_url or '').rstrip('/')}/api/v1/auth/callback"

    @property
    def cors_origins(self) -> list[str]:
        origins = list(self.allowed_origins)
        if self.app_url:
            origin = self.app_url.rstrip("/")
            if origin not in origins:
                origins.append(origin)
        return origins

    def api_secret(self) -> str:
        return self.shopify_api_secret.get_secret_value() if self.shopify_api_secret else ""

    def admin_token(self) -> str:
        return self.shopify_admin_token.get_secret_value() if self.shopify_admin_token else ""


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
        absent = _settings.missing(*ALL_KEYS)
        if absent:
            logger.warning("Configuration incomplete, missing: %s", ", ".join(absent))
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
