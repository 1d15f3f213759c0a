# Shopify Admin API access (product lookup, order creation).

from scango.shopify.client import (
    ProductVariant,
    ShopifyAdminClient,
    ShopifyAPIError,
    admin_order_url,
    get_admin_client,
    numeric_variant_id,
)

__all__ = [
    "ProductVariant",
    "ShopifyAPIError",
    "ShopifyAdminClient",
    "admin_order_url",
    "get_admin_client",
    "numeric_variant_id",
]
