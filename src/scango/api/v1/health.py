# Health router.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import APIRouter

from scango import __version__
from scango.api.v1.schemas.health import HealthSummary

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthSummary)
async def get_health_status():
    """Report which configuration keys are unset (names only)."""
    from scango.config import ALL_KEYS, get_settings

    missing = get_settings().missing(*ALL_KEYS)
    return HealthSummary(
        status="degraded" if missing else "ok",
        version=__version__,
        missing=missing,
    )
