# OAuth handshake data models.
# Created: 2026-10-19

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

# DNS-like host: labels of letters (any case), digits and hyphens, at least one dot.
_LABEL = r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
_SHOP_HOST_RE = re.compile(rf"^{_LABEL}(?:\.{_LABEL})+$", re.IGNORECASE)


def is_shop_host(value: str) -> bool:
    return bool(_SHOP_HOST_RE.fullmatch(value))


@dataclass(frozen=True)
class AuthorizationRequest:
    """One install attempt. Lives only as long as the state cookie."""

    shop: str
    client_id: str
    scopes: list[str]
    redirect_uri: str
    state: str
    per_user: bool = False

    @property
    def url(self) -> str:
        from scango.oauth.install import build_install_url

        return build_install_url(
            self.shop,
            self.client_id,
            self.scopes,
            self.redirect_uri,
            self.state,
            per_user=self.per_user,
        )


@dataclass(frozen=True)
class CallbackQuery:
    """The query Shopify appends to the redirect URI."""

    items: list[tuple[str, str]]
    shop: str | None = None
    code: str | None = None
    state: str | None = None
    hmac: str | None = None

    @classmethod
    def from_items(cls, items: Iterable[tuple[str, str]]) -> CallbackQuery:
        pairs = list(items)
        first: dict[str, str] = {}
        for key, value in pairs:
            first.setdefault(key, value)
        return cls(
            items=pairs,
            shop=first.get("shop") or None,
            code=first.get("code") or None,
            state=first.get("state") or None,
            hmac=first.get("hmac") or None,
        )


@dataclass
class AccessToken:
    """Token granted by the shop. Never persisted."""

    access_token: str = field(repr=False)
    scopes: list[str] = field(default_factory=list)

    @property
    def scope(self) -> str:
        return ",".join(self.scopes)


@dataclass(frozen=True)
class CallbackResult:
    shop: str
    scope: str
    access_token: str | None = field(default=None, repr=False)


class TokenExchangeResponse(BaseModel):
    """Body of POST /admin/oauth/access_token."""

    model_config = ConfigDict(extra="ignore")

    access_token: str
    scope: str = ""

    def to_token(self) -> AccessToken:
        scopes = [s.strip() for s in self.scope.split(",") if s.strip()]
        return AccessToken(access_token=self.access_token, scopes=scopes)
