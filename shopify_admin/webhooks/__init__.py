"""
Shopify Webhooks Package
Verification and dispatch of incoming Shopify webhook events.
"""

from .handlers import (
    ShopifyWebhookHandler,
    WebhookContext,
    WebhookVerificationError,
    verify_shopify_hmac,
)

__all__ = [
    "ShopifyWebhookHandler",
    "WebhookContext",
    "WebhookVerificationError",
    "verify_shopify_hmac",
]
