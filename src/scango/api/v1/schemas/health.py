# Health schemas.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel


class HealthSummary(BaseModel):
    """Service status; ``missing`` lists unset configuration keys by name."""

    status: str = "ok"
    version: str
    missing: list[str] = []
