# Orders router: create an unpaid order for staff to take payment at the till.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from scango.api.deps import require_allowed_origin
from scango.api.v1.schemas.common import ErrorResponse
from scango.api.v1.schemas.orders import (
    CreateOrderRequest,
    CreateOrderResponse,
    normalize_items,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/orders/create-unpaid",
    response_model=CreateOrderResponse,
    dependencies=[Depends(require_allowed_origin)],
)
async def create_unpaid_order(request: Request):
    """Resolve scanned barcodes to variants and create a pending order."""
    from scango.shopify.client import (
        ShopifyAPIError,
        admin_order_url,
        get_admin_client,
        numeric_variant_id,
    )

    try:
        client = get_admin_client()
    except LookupError as e:
        return _error(500, str(e))

    try:
        body = await request.json()
    except ValueError:
        return _error(400, "Invalid JSON body")
    if not isinstance(body, dict):
        return _error(400, "Invalid JSON body")

    items, problem = normalize_items(body.get("items"))
    if problem:
        return _error(400, problem)

    order_request = CreateOrderRequest.model_validate(
        {
            "items": items,
            "deviceId": body.get("deviceId"),
            "source": body.get("source"),
        }
    )

    line_items = []
    for item in order_request.items:
        try:
            variant = await client.find_variant_by_barcode(item.barcode)
        except ShopifyAPIError as e:
            return _error(400, f"Barcode lookup failed ({item.barcode}): {e}")
        if variant is None:
            return _error(400, f"No product found for barcode: {item.barcode}")

        variant_id = numeric_variant_id(variant.variant_id)
        if variant_id is None:
            return _error(400, f"Could not parse numeric variant id from: {variant.variant_id}")
        line_items.append({"variant_id": variant_id, "quantity": item.quantity})

    device_id = order_request.device_id
    source = order_request.source
    try:
        order = await client.create_order(
            line_items,
            tags=f"scan-and-go,unpaid,device:{device_id}",
            note=f"Created by Scan & Go ({source}) | deviceId={device_id}",
        )
    except ShopifyAPIError as e:
        logger.warning("Unpaid order creation failed for device %s: %s", device_id, e)
        if e.status_code is not None and e.body:
            return _error(502, f"Shopify order create failed: {e.body}")
        return _error(502, str(e))

    return CreateOrderResponse(
        order_id=order["id"],
        order_name=order.get("name"),
        admin_url=admin_order_url(client.shop, order["id"]),
        device_id=device_id,
        source=source,
    )
