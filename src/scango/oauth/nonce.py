# Nonce generator: opaque state tokens for the install redirect.
# Created: 2026-10-19

from __future__ import annotations

import secrets

NONCE_BYTES = 16


def generate_nonce() -> str:
    """Return 16 CSPRNG bytes as a 32-character lowercase hex string."""
    return secrets.token_hex(NONCE_BYTES)
