# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import HTTPException, Request


async def require_allowed_origin(request: Request) -> None:
    """Reject browser requests from origins outside ALLOWED_ORIGINS / APP_URL.

    Requests without an ``Origin`` header (devices, server-to-server) pass.
    """
    from scango.config import get_settings

    origin = request.headers.get("origin")
    if origin and origin.rstrip("/") not in get_settings().cors_origins:
        raise HTTPException(status_code=403, detail="CORS blocked")
