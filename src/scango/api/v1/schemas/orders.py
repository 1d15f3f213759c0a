# Unpaid order schemas.
# Created: 2026-10-19

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from scango.api.v1.schemas.common import OkResponse

DEFAULT_DEVICE_ID = "unknown-device"
DEFAULT_SOURCE = "scan-and-go"


class OrderItem(BaseModel):
    barcode: str
    quantity: int


def normalize_items(raw: object) -> tuple[list[OrderItem] | None, str | None]:
    """Validate ``[{barcode, quantity}, ...]`` from an untyped JSON body.

    Returns (items, error). Barcodes are trimmed, quantities floored.
    """
    if not isinstance(raw, list) or not raw:
        return None, "Body must include items: [{ barcode, quantity }]"

    items: list[OrderItem] = []
    for entry in raw:
        entry = entry if isinstance(entry, dict) else {}
        barcode = entry.get("barcode")
        barcode = barcode.strip() if isinstance(barcode, str) else ""
        if not barcode:
            return None, "Each item must include a barcode string"

        quantity = _as_number(entry.get("quantity"))
        if quantity is None or quantity < 1:
            return None, "Each item must include a positive quantity"
        items.append(OrderItem(barcode=barcode, quantity=math.floor(quantity)))
    return items, None


def _as_number(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class CreateOrderRequest(BaseModel):
    """Order request after item validation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[OrderItem]
    device_id: str = DEFAULT_DEVICE_ID
    source: str = DEFAULT_SOURCE

    @field_validator("device_id", "source", mode="before")
    @classmethod
    def _default_non_strings(cls, value: object, info: ValidationInfo) -> object:
        if isinstance(value, str):
            return value
        return DEFAULT_DEVICE_ID if info.field_name == "device_id" else DEFAULT_SOURCE


class CreateOrderResponse(OkResponse):
    message: str = "Unpaid order created"
    order_id: int
    order_name: str | None = None
    admin_url: str
    device_id: str
    source: str
