"""
Webhook receiving for Shopify apps.

A delivery is trusted only after its X-Shopify-Hmac-SHA256 signature
checks out against the app secret. Verified deliveries are routed to the
coroutine registered for their topic.
"""

import base64
import hashlib
import hmac
import json
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from ..models import ShopifyModel, WebhookTopic

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=ShopifyModel)
Handler = Callable[["WebhookContext"], Awaitable[Any]]

HMAC_HEADER = "X-Shopify-Hmac-SHA256"
TOPIC_HEADER = "X-Shopify-Topic"
SHOP_DOMAIN_HEADER = "X-Shopify-Shop-Domain"
API_VERSION_HEADER = "X-Shopify-API-Version"
WEBHOOK_ID_HEADER = "X-Shopify-Webhook-Id"


class WebhookVerificationError(Exception):
    """Delivery rejected: bad signature or unreadable payload"""
    pass


def _sign(data: bytes, secret: str) -> bytes:
    """Base64 HMAC-SHA256 of the body, as Shopify computes it"""
    digest = hmac.new(secret.encode("utf-8"), data, hashlib.sha256).digest()
    return base64.b64encode(digest)


def verify_shopify_hmac(data: bytes, hmac_header: str, secret: str) -> bool:
    """
    Check a delivery's signature against the app secret.

    Args:
        data: Request body exactly as received
        hmac_header: X-Shopify-Hmac-SHA256 value sent with the delivery
        secret: App API secret

    Returns:
        True when the signature matches

    Raises:
        WebhookVerificationError: On a missing header or secret, or a
            signature that does not match
    """
    if not hmac_header:
        raise WebhookVerificationError("Missing HMAC header")
    if not secret:
        raise WebhookVerificationError("Missing API secret")

    # compare_digest only accepts ASCII str, so compare bytes
    if not hmac.compare_digest(_sign(data, secret), hmac_header.encode("utf-8")):
        logger.warning("Webhook HMAC verification failed")
        raise WebhookVerificationError("Invalid HMAC signature")
    return True


class WebhookContext(BaseModel):
    """A verified delivery"""
    topic: str
    shop_domain: str
    api_version: Optional[str] = None
    payload: Dict[str, Any]
    webhook_id: Optional[str] = None
    received_at: Optional[datetime] = None

    def payload_as(self, model: Type[ModelT]) -> ModelT:
        """Validate the payload as a resource model, e.g. ctx.payload_as(Order)"""
        return model.model_validate(self.payload)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                return candidate
    return value


def _load_payload(body: bytes) -> Dict[str, Any]:
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise WebhookVerificationError(f"Invalid JSON payload: {e}") from e
    if not isinstance(payload, dict):
        raise WebhookVerificationError("Webhook payload is not a JSON object")
    return payload


class ShopifyWebhookHandler:
    """
    Topic router for webhook deliveries.

        webhooks = ShopifyWebhookHandler(api_secret="shpss_xxxx")

        @webhooks.on(WebhookTopic.ORDERS_CREATE)
        async def order_created(ctx: WebhookContext):
            order = ctx.payload_as(Order)

        # inside a web route
        await webhooks.process_webhook(await request.body(), request.headers)

    Topics without a registered coroutine go to the default handler,
    if one is set, and are otherwise logged and dropped.
    """

    def __init__(self, api_secret: str):
        self.api_secret = api_secret
        self._handlers: Dict[str, Handler] = {}
        self._default_handler: Optional[Handler] = None

        logger.info("ShopifyWebhookHandler initialized")

    @property
    def topics(self) -> list:
        """Topics with a registered handler"""
        return sorted(self._handlers)

    def on(self, topic: Union[WebhookTopic, str]):
        """Decorator registering a coroutine for a topic (enum member or raw string)"""
        key = topic.value if isinstance(topic, WebhookTopic) else topic

        def register(func: Handler):
            self._handlers[key] = func
            logger.debug(f"Registered handler for {key}")
            return func
        return register

    def set_default_handler(self, func: Handler):
        self._default_handler = func

    def verify_and_parse(
        self,
        body: bytes,
        hmac_header: str,
        topic: str,
        shop_domain: str,
        api_version: str = None,
        webhook_id: str = None,
    ) -> WebhookContext:
        """
        Verify a delivery and build its context.

        The remaining arguments are the values of the matching
        X-Shopify-* headers.

        Raises:
            WebhookVerificationError: On a bad signature, or a body that
                is not a JSON object
        """
        verify_shopify_hmac(body, hmac_header, self.api_secret)

        return WebhookContext(
            topic=topic,
            shop_domain=shop_domain,
            api_version=api_version,
            payload=_load_payload(body),
            webhook_id=webhook_id,
            received_at=datetime.now(timezone.utc),
        )

    async def dispatch(self, ctx: WebhookContext) -> Any:
        """Run the coroutine for ctx.topic and return its result (None if unrouted)"""
        func = self._handlers.get(ctx.topic)
        if func is None and self._default_handler is not None:
            logger.info(f"No handler for {ctx.topic}, using default handler")
            func = self._default_handler
        if func is None:
            logger.warning(f"No handler registered for topic: {ctx.topic}")
            return None

        logger.info(f"Dispatching {ctx.topic} webhook from {ctx.shop_domain}")
        return await func(ctx)

    async def process_webhook(self, body: bytes, headers: Mapping[str, str]) -> Any:
        """
        Verify, parse and dispatch one delivery.

        Header names are matched case-insensitively, so a plain dict or a
        framework's header mapping both work.
        """
        ctx = self.verify_and_parse(
            body=body,
            hmac_header=_header(headers, HMAC_HEADER),
            topic=_header(headers, TOPIC_HEADER) or "",
            shop_domain=_header(headers, SHOP_DOMAIN_HEADER) or "",
            api_version=_header(headers, API_VERSION_HEADER),
            webhook_id=_header(headers, WEBHOOK_ID_HEADER),
        )
        return await self.dispatch(ctx)
