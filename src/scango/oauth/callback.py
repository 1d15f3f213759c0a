# Callback handler: verifies Shopify's redirect and exchanges the code.
# Created: 2026-10-19
#
# One handle() call per callback request, in strict order:
#   Received -> (params, config) -> Validated (HMAC, state) -> Exchanged -> Reported
# Any failed step ends in Rejected; nothing is retried.

from __future__ import annotations

import hmac
import logging
from enum import StrEnum

import httpx
from pydantic import ValidationError

from scango.config import CALLBACK_KEYS, Settings
from scango.oauth import signature
from scango.oauth.errors import ErrorKind, OAuthError
from scango.oauth.models import (
    AccessToken,
    CallbackQuery,
    CallbackResult,
    TokenExchangeResponse,
    is_shop_host,
)

logger = logging.getLogger(__name__)

TOKEN_PATH = "/admin/oauth/access_token"


class CallbackState(StrEnum):
    RECEIVED = "received"
    VALIDATED = "validated"
    EXCHANGED = "exchanged"
    REPORTED = "reported"
    REJECTED = "rejected"


class ShopAuthorizer:
    """Inbound leg of the install handshake.

    Args:
        settings: Configuration holding the client id and secret.
        transport: Optional httpx transport for the token exchange call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if settings is None:
            from scango.config import get_settings

            settings = get_settings()
        self.settings = settings
        self._transport = transport

    async def handle(
        self,
        query: CallbackQuery,
        state_cookie: str | None,
    ) -> tuple[CallbackResult | None, OAuthError | None]:
        """Run the callback state machine.

        Returns (result, error). ``result.access_token`` is only set when
        the settings allow exposing the token.
        """
        state = CallbackState.RECEIVED

        if not query.shop or not query.code:
            return self._reject(state, ErrorKind.MISSING_PARAMETER, "Missing shop or code")
        if not is_shop_host(query.shop):
            return self._reject(state, ErrorKind.INVALID_PARAMETER, "Invalid shop host")

        missing = self.settings.missing(*CALLBACK_KEYS)
        if missing:
            logger.error("Callback refused, missing configuration: %s", ", ".join(missing))
            return None, OAuthError.missing_configuration(missing)

        secret = self.settings.api_secret()
        if not signature.verify_query(query.items, secret):
            logger.warning("HMAC verification failed for shop %s", query.shop)
            return self._reject(state, ErrorKind.SIGNATURE_MISMATCH, "HMAC verification failed")

        if not _state_matches(query.state, state_cookie):
            logger.warning("OAuth state mismatch for shop %s", query.shop)
            return self._reject(state, ErrorKind.STATE_MISMATCH, "OAuth state mismatch")
        state = CallbackState.VALIDATED

        token, error = await self.exchange_code(query.shop, query.code)
        if error:
            return self._reject(state, error.kind, error.detail)
        state = CallbackState.EXCHANGED

        result = CallbackResult(
            shop=query.shop,
            scope=token.scope,
            access_token=token.access_token if self.settings.expose_access_token else None,
        )
        logger.info("Shop %s authorised with scope %s", query.shop, token.scope or "-")
        logger.debug("Callback %s -> %s", state, CallbackState.REPORTED)
        return result, None

    async def exchange_code(
        self, shop: str, code: str
    ) -> tuple[AccessToken | None, OAuthError | None]:
        """POST the one-time code to the shop's token endpoint.

        Returns (token, error). A non-2xx status carries the upstream body.
        """
        secret = self.settings.api_secret()
        payload = {
            "client_id": self.settings.shopify_api_key,
            "client_secret": secret,
            "code": code,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout, transport=self._transport
            ) as client:
                resp = await client.post(f"https://{shop}{TOKEN_PATH}", json=payload)
        except httpx.TimeoutException:
            logger.warning("Token exchange timed out for %s", shop)
            return None, OAuthError(ErrorKind.UPSTREAM_HTTP, "Token exchange timed out")
        except httpx.HTTPError as e:
            logger.warning("Token exchange request failed for %s: %s", shop, e)
            return None, OAuthError(ErrorKind.UPSTREAM_HTTP, f"Token exchange failed: {e}")

        if not resp.is_success:
            body = _redact(resp.text, secret)
            logger.warning("Token exchange for %s returned HTTP %d", shop, resp.status_code)
            return None, OAuthError(ErrorKind.UPSTREAM_HTTP, f"Token exchange failed: {body}")

        try:
            data = TokenExchangeResponse.model_validate_json(resp.content)
        except ValidationError:
            logger.warning("Token exchange for %s returned an unreadable body", shop)
            return None, OAuthError(
                ErrorKind.UPSTREAM_PARSE, "Token exchange returned an invalid response"
            )
        return data.to_token(), None

    @staticmethod
    def _reject(
        state: CallbackState, kind: ErrorKind, detail: str
    ) -> tuple[None, OAuthError]:
        logger.debug("Callback %s -> %s (%s)", state, CallbackState.REJECTED, kind)
        return None, OAuthError(kind, detail)


def _state_matches(state: str | None, cookie: str | None) -> bool:
    if not state or not cookie:
        return False
    return hmac.compare_digest(state.encode(), cookie.encode())


def _redact(text: str, secret: str) -> str:
    if secret and secret in text:
        text = text.replace(secret, "[redacted]")
    return text


# Singleton
_authorizer: ShopAuthorizer | None = None


def get_authorizer() -> ShopAuthorizer:
    global _authorizer
    if _authorizer is None:
        _authorizer = ShopAuthorizer()
    return _authorizer


def reset_authorizer() -> None:
    global _authorizer
    _authorizer = None
