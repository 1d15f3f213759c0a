# Auth schemas.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel


class CallbackResponse(BaseModel):
    """Result of a completed install callback.

    ``access_token`` is only present when the server is configured to hand
    the token to the operator once.
    """

    ok: bool = True
    shop: str
    scope: str
    message: str
    access_token: str | None = None
