# Product lookup schemas.
# Created: 2026-10-19

from __future__ import annotations

from scango.api.v1.schemas.common import APIResponse
from scango.shopify.client import ProductVariant


class ProductLookupResponse(APIResponse):
    found: bool
    product: ProductVariant | None = None
