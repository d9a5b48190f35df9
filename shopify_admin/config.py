"""
Shopify Settings
Credentials and client options read from the environment (and a .env file).
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .client import ShopifyAdminClient
from .webhooks import ShopifyWebhookHandler

logger = logging.getLogger(__name__)


class ShopifySettings(BaseModel):
    """Settings for building a ShopifyAdminClient"""
    shop_domain: str = ""
    access_token: Optional[str] = None
    api_key: Optional[str] = None
    password: Optional[str] = None
    api_secret: Optional[str] = None
    api_version: Optional[str] = None
    max_retries: Optional[int] = None
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, dotenv_path: str = None) -> "ShopifySettings":
        """
        Load settings from SHOPIFY_* environment variables.

        Variables already set in the environment win over the .env file.
        """
        load_dotenv(dotenv_path)

        max_retries = os.getenv("SHOPIFY_MAX_RETRIES")
        timeout = os.getenv("SHOPIFY_TIMEOUT")

        return cls(
            shop_domain=os.getenv("SHOPIFY_SHOP_DOMAIN", ""),
            access_token=os.getenv("SHOPIFY_ACCESS_TOKEN") or None,
            api_key=os.getenv("SHOPIFY_API_KEY") or None,
            password=os.getenv("SHOPIFY_PASSWORD") or None,
            api_secret=os.getenv("SHOPIFY_API_SECRET") or None,
            api_version=os.getenv("SHOPIFY_API_VERSION") or None,
            max_retries=int(max_retries) if max_retries else None,
            timeout=float(timeout) if timeout else None,
        )


def create_client(settings: ShopifySettings = None, **kwargs) -> ShopifyAdminClient:
    """
    Create a ShopifyAdminClient from settings (default: the environment).

    Extra keyword arguments are passed to the client, e.g. transport.

    Raises:
        ValueError: If the shop domain or credentials are missing
    """
    settings = settings or ShopifySettings.from_env()
    if not settings.shop_domain:
        raise ValueError("Missing Shopify shop domain. Set SHOPIFY_SHOP_DOMAIN.")

    logger.debug(f"Creating client for {settings.shop_domain} from settings")
    return ShopifyAdminClient(
        shop_domain=settings.shop_domain,
        access_token=settings.access_token,
        api_version=settings.api_version,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
        api_key=settings.api_key,
        password=settings.password,
        **kwargs,
    )


def create_webhook_handler(settings: ShopifySettings = None) -> ShopifyWebhookHandler:
    """Create a webhook handler verifying with SHOPIFY_API_SECRET"""
    settings = settings or ShopifySettings.from_env()
    if not settings.api_secret:
        raise ValueError("Missing Shopify API secret. Set SHOPIFY_API_SECRET.")
    return ShopifyWebhookHandler(settings.api_secret)
