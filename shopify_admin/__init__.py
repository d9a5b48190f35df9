"""
Shopify Admin API Client Library
Async client for the Shopify REST Admin API: typed resource clients,
retries on 429/503, rate-limit bookkeeping, cursor pagination, and
webhook verification.
"""

from .client import (
    VERSION as __version__,
    ShopifyAdminClient,
    ShopifyAPIError,
    ShopifyAuthError,
    ShopifyNotFoundError,
    ShopifyRateLimitError,
    ShopifyResponseDecodingError,
    parse_link_header,
)
from .config import ShopifySettings, create_client, create_webhook_handler
from .models import (
    CountOptions,
    CustomerSearchOptions,
    DraftOrderListOptions,
    InventoryLevelAdjustOptions,
    InventoryLevelListOptions,
    ListOptions,
    OrderCancelOptions,
    OrderListOptions,
    Pagination,
    PayoutsListOptions,
    ProductListOptions,
    RateLimitInfo,
    ScriptTagListOptions,
    ShopifyModel,
    ThemeListOptions,
    WebhookListOptions,
    WebhookTopic,
)
from .utils import (
    fulfillment_path_prefix,
    metafield_path_prefix,
    shop_base_url,
    shop_full_name,
    shop_short_name,
)
from .webhooks import (
    ShopifyWebhookHandler,
    WebhookContext,
    WebhookVerificationError,
    verify_shopify_hmac,
)

__all__ = [
    "__version__",
    # Client
    "ShopifyAdminClient",
    "ShopifyAPIError",
    "ShopifyAuthError",
    "ShopifyNotFoundError",
    "ShopifyRateLimitError",
    "ShopifyResponseDecodingError",
    "parse_link_header",
    # Config
    "ShopifySettings",
    "create_client",
    "create_webhook_handler",
    # Options & bookkeeping
    "ShopifyModel",
    "ListOptions",
    "CountOptions",
    "ProductListOptions",
    "OrderListOptions",
    "OrderCancelOptions",
    "DraftOrderListOptions",
    "CustomerSearchOptions",
    "InventoryLevelListOptions",
    "InventoryLevelAdjustOptions",
    "PayoutsListOptions",
    "ThemeListOptions",
    "WebhookListOptions",
    "ScriptTagListOptions",
    "Pagination",
    "RateLimitInfo",
    "WebhookTopic",
    # Utils
    "shop_full_name",
    "shop_short_name",
    "shop_base_url",
    "metafield_path_prefix",
    "fulfillment_path_prefix",
    # Webhooks
    "ShopifyWebhookHandler",
    "WebhookContext",
    "WebhookVerificationError",
    "verify_shopify_hmac",
]
