# Products router: barcode lookup proxied to the Shopify Admin GraphQL API.
# Created: 2026-10-19

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from scango.api.v1.schemas.products import ProductLookupResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])


@router.get("/products/by-barcode", response_model=ProductLookupResponse)
async def product_by_barcode(barcode: str = Query("")):
    """Look up the first product variant carrying *barcode*."""
    from scango.shopify.client import ShopifyAPIError, get_admin_client

    barcode = barcode.strip()
    if not barcode:
        raise HTTPException(status_code=400, detail="Missing barcode")

    try:
        client = get_admin_client()
    except LookupError as e:
        raise HTTPException(status_code=500, detail=str(e))

    try:
        variant = await client.find_variant_by_barcode(barcode)
    except ShopifyAPIError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if variant is None:
        return ProductLookupResponse(found=False)
    return ProductLookupResponse(found=True, product=variant)
