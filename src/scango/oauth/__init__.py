# Shopify OAuth install handshake: install redirect (outbound leg) and
# signed callback + token exchange (inbound leg).

from scango.oauth.callback import ShopAuthorizer, get_authorizer, reset_authorizer
from scango.oauth.errors import ErrorKind, OAuthError
from scango.oauth.install import STATE_COOKIE, build_install_url
from scango.oauth.nonce import generate_nonce
from scango.oauth.signature import canonicalize, sign, verify

__all__ = [
    "STATE_COOKIE",
    "ErrorKind",
    "OAuthError",
    "ShopAuthorizer",
    "build_install_url",
    "canonicalize",
    "generate_nonce",
    "get_authorizer",
    "reset_authorizer",
    "sign",
    "verify",
]
