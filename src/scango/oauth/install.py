# Install redirect builder: the outbound leg of the OAuth handshake.
# Created: 2026-10-19

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from scango.config import INSTALL_KEYS
from scango.oauth.errors import OAuthError
from scango.oauth.models import AuthorizationRequest
from scango.oauth.nonce import generate_nonce

if TYPE_CHECKING:
    from scango.config import Settings

logger = logging.getLogger(__name__)

STATE_COOKIE = "oauth_state"
STATE_COOKIE_MAX_AGE = 300


def build_install_url(
    shop_host: str,
    client_id: str,
    scopes: list[str],
    redirect_uri: str,
    state: str,
    per_user: bool = False,
) -> str:
    """Build ``https://{shop_host}/admin/oauth/authorize?...``.

    Args:
        shop_host: Shop host, e.g. ``acme.myshopify.com``.
        client_id: App client id (API key).
        scopes: Requested access scopes, sent comma-joined.
        redirect_uri: Absolute callback URL registered with the app.
        state: Nonce echoed back on the callback.
        per_user: Request an online (per-user) token instead of an offline one.

    Returns:
        The authorization URL, each parameter percent-encoded on its own.
    """
    params: list[tuple[str, str]] = [
        ("client_id", client_id),
        ("scope", ",".join(scopes)),
        ("redirect_uri", redirect_uri),
        ("state", state),
    ]
    if per_user:
        params.append(("grant_options[]", "per-user"))
    return f"https://{shop_host}/admin/oauth/authorize?{urlencode(params)}"


def authorization_request(
    settings: Settings,
) -> tuple[AuthorizationRequest | None, OAuthError | None]:
    """Start an install attempt from configuration.

    Returns (request, error). Any absent key is a configuration error; no
    partial URL is ever built.
    """
    missing = settings.missing(*INSTALL_KEYS)
    if not missing and not settings.scope_list:
        missing = ["SHOPIFY_SCOPES"]
    if missing:
        logger.error("Install refused, missing configuration: %s", ", ".join(missing))
        return None, OAuthError.missing_configuration(missing)

    request = AuthorizationRequest(
        shop=settings.shopify_shop.strip(),
        client_id=settings.shopify_api_key.strip(),
        scopes=settings.scope_list,
        redirect_uri=settings.callback_url,
        state=generate_nonce(),
        per_user=settings.shopify_per_user_grant,
    )
    return request, None


def state_cookie_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for ``Response.set_cookie`` carrying the nonce."""
    return {
        "key": STATE_COOKIE,
        "httponly": True,
        "samesite": "lax",
        "secure": settings.state_cookie_secure,
        "max_age": STATE_COOKIE_MAX_AGE,
        "path": "/",
    }
