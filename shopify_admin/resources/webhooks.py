"""
Webhook Subscription Resource
"""

from ..models import Webhook
from .base import CRUDResource


class WebhookResource(CRUDResource):
    """
    Webhook subscriptions.

    Usage:
        await client.webhooks.create(Webhook(
            topic=WebhookTopic.ORDERS_CREATE,
            address="https://example.com/webhooks/shopify",
            format="json",
        ))
    """
    path = "webhooks"
    singular = "webhook"
    plural = "webhooks"
    model = Webhook
