"""HMAC-SHA256 verification of Shopify OAuth redirects.

Shopify signs every query parameter of the callback except ``hmac`` (and the
legacy ``signature``). The signed message is the remaining parameters sorted
by key and re-encoded as a query string; the signature is the lowercase hex
HMAC-SHA256 of that message keyed with the app's client secret.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import re
from collections.abc import Iterable, Mapping
from enum import StrEnum
from urllib.parse import urlencode

__all__ = ["SignatureCheck", "canonicalize", "check", "sign", "verify", "verify_query"]

logger = logging.getLogger(__name__)

UNSIGNED_KEYS = frozenset({"hmac", "signature"})

_DIGEST_HEX_LEN = hashlib.sha256().digest_size * 2
_HEX_RE = re.compile(r"[0-9a-f]+")

Params = Mapping[str, str] | Iterable[tuple[str, str]]


class SignatureCheck(StrEnum):
    """Outcome of a signature check. Only VALID authenticates the request."""

    VALID = "valid"
    MISSING = "missing"
    MALFORMED = "malformed"
    MISMATCH = "mismatch"


def _pairs(params: Params) -> list[tuple[str, str]]:
    if isinstance(params, Mapping):
        return list(params.items())
    return list(params)


def canonicalize(params: Params) -> str:
    """Build the signed message for *params*.

    ``hmac`` and ``signature`` are dropped, the rest is stably sorted by key
    (ordinal comparison, so duplicate keys keep their relative order) and
    encoded as ``k=v&k=v`` with query-string percent-encoding.
    """
    signed = [(k, v) for k, v in _pairs(params) if k not in UNSIGNED_KEYS]
    signed.sort(key=lambda kv: kv[0])
    return urlencode(signed)


def sign(params: Params, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``canonicalize(params)``."""
    message = canonicalize(params)
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()


def check(params: Params, signature: str | None, secret: str) -> SignatureCheck:
    """Classify *signature* against *params* without raising."""
    if not signature:
        return SignatureCheck.MISSING
    if not isinstance(signature, str) or not signature.isascii():
        return SignatureCheck.MALFORMED
    if len(signature) != _DIGEST_HEX_LEN or not _HEX_RE.fullmatch(signature):
        return SignatureCheck.MALFORMED

    expected = sign(params, secret)
    if hmac.compare_digest(expected.encode(), signature.encode()):
        return SignatureCheck.VALID
    return SignatureCheck.MISMATCH


def verify(params: Params, signature: str | None, secret: str) -> bool:
    """True if *signature* is the HMAC of *params* under *secret*.

    Malformed, missing or wrong-length signatures are a plain ``False``.
    """
    result = check(params, signature, secret)
    if result is not SignatureCheck.VALID:
        logger.debug("Signature check failed: %s", result)
    return result is SignatureCheck.VALID


def verify_query(params: Params, secret: str) -> bool:
    """Verify a full callback query whose ``hmac`` parameter carries the signature."""
    pairs = _pairs(params)
    provided = next((v for k, v in pairs if k == "hmac"), None)
    return verify(pairs, provided, secret)
