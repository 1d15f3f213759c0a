# Basket schemas.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scango.api.v1.schemas.common import OkResponse


class BasketItem(BaseModel):
    """One scanned line in a shopper's basket.

    Extra keys the scan page attaches (``variantId``, ``stock``, ``inStock``,
    ``variantTitle``, ...) are kept as sent and handed back to the till.
    """

    model_config = ConfigDict(extra="allow")

    barcode: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)
    title: str | None = None
    price: float | str | None = None


class CreateBasketRequest(BaseModel):
    items: list[BasketItem] = Field(..., min_length=1)


class CreateBasketResponse(OkResponse):
    code: str


class BasketResponse(OkResponse):
    items: list[BasketItem]
