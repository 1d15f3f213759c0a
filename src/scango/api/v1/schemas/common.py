# Common API response schemas.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIResponse(BaseModel):
    """Base response wrapper. Fields serialise in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OkResponse(APIResponse):
    """Simple success flag."""

    ok: bool = True


class ErrorResponse(APIResponse):
    """Failure envelope used by the shopper-facing endpoints."""

    ok: bool = False
    error: str | None = None
