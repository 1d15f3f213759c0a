# Shopify Admin client: GraphQL product lookup + REST order creation.
# Created: 2026-10-19

from __future__ import annotations

import logging
import re
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from scango.config import ADMIN_KEYS, Settings

logger = logging.getLogger(__name__)

_VARIANT_GID_RE = re.compile(r"ProductVariant/(\d+)")

PRODUCT_BY_BARCODE_QUERY = """
query ProductByBarcode($barcode: String!) {
  productVariants(first: 1, query: $barcode) {
    edges {
      node {
        id
        barcode
        price
        inventoryQuantity
        product {
          id
          title
        }
        title
      }
    }
  }
}
"""


class ShopifyAPIError(Exception):
    """Non-2xx response, transport failure or unreadable payload from Shopify."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProductVariant(BaseModel):
    """A scanned product, flattened for the till."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    title: str
    variant_id: str
    variant_title: str | None = None
    barcode: str | None = None
    price: str | None = None
    stock: int | None = None
    in_stock: bool = False

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> ProductVariant:
        product = node.get("product") or {}
        stock = node.get("inventoryQuantity")
        return cls(
            product_id=product["id"],
            title=product["title"],
            variant_id=node["id"],
            variant_title=node.get("title"),
            barcode=node.get("barcode"),
            price=node.get("price"),
            stock=stock,
            in_stock=stock is not None and stock > 0,
        )


def numeric_variant_id(gid: str) -> int | None:
    """``gid://shopify/ProductVariant/123`` -> 123."""
    match = _VARIANT_GID_RE.search(str(gid))
    return int(match.group(1)) if match else None


def admin_order_url(shop: str, order_id: int | str) -> str:
    handle = shop.removesuffix(".myshopify.com")
    return f"https://admin.shopify.com/store/{handle}/orders/{order_id}"


class ShopifyAdminClient:
    """HTTP client for one shop's Admin API.

    Uses the long-lived admin token configured for the shop.
    """

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: str = "2024-10",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.shop = shop
        self.api_version = api_version
        self.timeout = timeout
        self._access_token = access_token
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self._access_token,
        }

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    f"{self.base_url}/{path}", json=payload, headers=self._headers()
                )
        except httpx.HTTPError as e:
            raise ShopifyAPIError(f"Shopify request error: {e}") from e

        if not resp.is_success:
            logger.warning("Shopify %s returned HTTP %d", path, resp.status_code)
            raise ShopifyAPIError(
                f"Shopify error: {resp.text}", status_code=resp.status_code, body=resp.text
            )
        try:
            return resp.json()
        except ValueError as e:
            raise ShopifyAPIError("Shopify returned invalid JSON", resp.status_code) from e

    async def find_variant_by_barcode(self, barcode: str) -> ProductVariant | None:
        """Return the first variant matching *barcode*, or None."""
        data = await self._post(
            "graphql.json",
            {"query": PRODUCT_BY_BARCODE_QUERY, "variables": {"barcode": barcode}},
        )
        try:
            edges = data["data"]["productVariants"]["edges"]
            if not edges:
                return None
            return ProductVariant.from_node(edges[0]["node"])
        except (KeyError, TypeError, ValueError) as e:
            errors = data.get("errors") if isinstance(data, dict) else None
            raise ShopifyAPIError(f"Unexpected product lookup response: {errors or e}") from e

    async def create_order(
        self,
        line_items: list[dict[str, Any]],
        tags: str = "",
        note: str = "",
    ) -> dict[str, Any]:
        """Create an unpaid (pending) order and return Shopify's order object."""
        payload = {
            "order": {
                "line_items": line_items,
                "financial_status": "pending",
                "tags": tags,
                "note": note,
            }
        }
        data = await self._post("orders.json", payload)
        order = data.get("order") if isinstance(data, dict) else None
        if not order or not order.get("id"):
            raise ShopifyAPIError("Shopify returned no order id")
        logger.info("Created order %s on %s", order.get("name") or order["id"], self.shop)
        return order


def get_admin_client(settings: Settings | None = None) -> ShopifyAdminClient:
    """Build a client from configuration.

    Raises:
        LookupError: If the shop host or admin token is not configured.
    """
    if settings is None:
        from scango.config import get_settings

        settings = get_settings()
    missing = settings.missing(*ADMIN_KEYS)
    if missing:
        raise LookupError(f"Missing configuration: {', '.join(missing)}")
    return ShopifyAdminClient(
        shop=settings.shopify_shop.strip(),
        access_token=settings.admin_token(),
        api_version=settings.shopify_api_version,
        timeout=settings.http_timeout,
    )
