# Baskets router: hand a scanned basket from the shopper's device to the till.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from scango.api.v1.schemas.baskets import (
    BasketResponse,
    CreateBasketRequest,
    CreateBasketResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Baskets"])


@router.post("/baskets", response_model=CreateBasketResponse)
@router.post("/baskets/create", response_model=CreateBasketResponse)
async def create_basket(request: Request):
    """Store a basket for BASKET_TTL_SECONDS and return its pickup code."""
    from scango.store import get_basket_store

    try:
        body = CreateBasketRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse(status_code=400, content={"ok": False})

    items = [item.model_dump(exclude_none=True) for item in body.items]
    basket = get_basket_store().create(items)
    return CreateBasketResponse(code=basket.code)


@router.get("/baskets/{code}", response_model=BasketResponse)
async def get_basket(code: str):
    """Return the items of a live basket."""
    from scango.store import get_basket_store

    basket = get_basket_store().get(code)
    if basket is None:
        return JSONResponse(status_code=404, content={"ok": False})
    body = BasketResponse(items=basket.items)
    return JSONResponse(content=body.model_dump(by_alias=True, exclude_none=True))
