"""
Shopify Admin API Client
Shared HTTP client with retry logic, rate-limit bookkeeping, API version
negotiation and Link-header pagination. Resource clients are attached as
attributes (client.products, client.orders, ...).

Retries: HTTP 429 (sleeps Retry-After) and HTTP 503 (exponential backoff)
"""

import asyncio
import logging
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qs, urlparse

import httpx
from pydantic import BaseModel

from .models import ListOptions, Pagination, RateLimitInfo
from .resources import (
    AbandonedCheckoutResource,
    AccessScopeResource,
    ApplicationChargeResource,
    BlogResource,
    CarrierServiceResource,
    CollectResource,
    CollectionResource,
    CustomCollectionResource,
    CustomerResource,
    DraftOrderResource,
    FulfillmentServiceResource,
    GiftCardResource,
    InventoryItemResource,
    InventoryLevelResource,
    LocationResource,
    MetafieldResource,
    OrderResource,
    PageResource,
    PayoutResource,
    PriceRuleResource,
    ProductListingResource,
    ProductResource,
    RecurringApplicationChargeResource,
    RedirectResource,
    ScriptTagResource,
    ShippingZoneResource,
    ShopResource,
    SmartCollectionResource,
    StorefrontAccessTokenResource,
    ThemeResource,
    VariantResource,
    WebhookResource,
)
from .utils import shop_base_url, shop_full_name

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

QueryParams = Union[Mapping[str, Any], BaseModel, None]

LINK_REGEX = re.compile(r'^ *<([^>]+)>; rel="(previous|next)" *$')
API_VERSION_REGEX = re.compile(r"^\d{4}-\d{2}$")


class ShopifyAPIError(Exception):
    """Base exception for Shopify API errors"""
    def __init__(
        self,
        message: str,
        status_code: int = None,
        response_body: dict = None,
        errors: list = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body or {}
        self.errors = errors or []


class ShopifyRateLimitError(ShopifyAPIError):
    """Rate limit exceeded"""
    def __init__(
        self,
        message: str = None,
        retry_after: float = 2.0,
        response_body: dict = None,
        errors: list = None,
    ):
        super().__init__(
            message or f"Rate limit exceeded. Retry after {retry_after}s",
            status_code=429,
            response_body=response_body,
            errors=errors,
        )
        self.retry_after = retry_after


class ShopifyAuthError(ShopifyAPIError):
    """Authentication/authorization error"""
    pass


class ShopifyNotFoundError(ShopifyAPIError):
    """Resource not found"""
    pass


class ShopifyResponseDecodingError(ShopifyAPIError):
    """Response body or headers could not be decoded"""
    def __init__(self, message: str, body: str = "", status_code: int = None):
        super().__init__(message, status_code=status_code)
        self.body = body


def parse_link_header(link_header: Optional[str]) -> Pagination:
    """
    Parse a Link header into next/previous page options.

    Format: <url>; rel="previous", <url>; rel="next"

    An absent or empty header gives an empty Pagination.

    Raises:
        ShopifyResponseDecodingError: On a malformed link or URL, a link
            without page_info, or a non-numeric limit
    """
    pagination = Pagination()
    if not link_header:
        return pagination

    for link in link_header.split(","):
        match = LINK_REGEX.match(link)
        if not match:
            raise ShopifyResponseDecodingError(
                "could not extract pagination link header", body=link_header
            )
        url, rel = match.groups()

        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ShopifyResponseDecodingError(
                "pagination does not contain a valid URL", body=link_header
            )

        query = parse_qs(parsed.query)
        page_info = query.get("page_info", [""])[0]
        if not page_info:
            raise ShopifyResponseDecodingError("page_info is missing", body=link_header)

        options = ListOptions(page_info=page_info)

        limit = query.get("limit", [""])[0]
        if limit:
            try:
                options.limit = int(limit)
            except ValueError as e:
                raise ShopifyResponseDecodingError(
                    "limit is not a number", body=link_header
                ) from e

        fields = query.get("fields", [""])[0]
        if fields:
            options.fields = fields

        if rel == "next":
            pagination.next_page_options = options
        else:
            pagination.previous_page_options = options

    return pagination


def encode_params(params: QueryParams) -> Optional[Dict[str, Any]]:
    """
    Encode query parameters the way the Admin API expects them.

    Lists are comma-joined, except under "name[]" keys which repeat the key.
    """
    if params is None:
        return None
    if isinstance(params, BaseModel):
        params = params.model_dump(exclude_none=True)

    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if key.endswith("[]") and isinstance(value, (list, tuple)):
            encoded[key] = [str(v.value if isinstance(v, Enum) else v) for v in value]
        elif isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            encoded[key] = str(value.value)
        elif isinstance(value, (datetime, date)):
            encoded[key] = value.isoformat()
        elif isinstance(value, (list, tuple, set)):
            encoded[key] = ",".join(str(v.value if isinstance(v, Enum) else v) for v in value)
        else:
            encoded[key] = str(value)
    return encoded


def _render_errors(errors: Any) -> list:
    """Flatten an "errors" value into a list of messages"""
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, list):
        return [str(e) for e in errors]
    if isinstance(errors, dict):
        rendered = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                rendered.extend(f"{field}: {m}" for m in messages)
            else:
                rendered.append(f"{field}: {messages}")
        return sorted(rendered)
    return []


class ShopifyAdminClient:
    """
    Shopify Admin API Client with retry logic and rate-limit bookkeeping.

    Usage:
        async with ShopifyAdminClient(
            shop_domain="my-store",
            access_token="shpat_xxxxx",
        ) as client:
            shop = await client.shop.get()
            products = await client.products.list(ProductListOptions(limit=50))
    """

    DEFAULT_API_VERSION = "stable"
    UNSTABLE_API_VERSION = "unstable"

    # Retry configuration (MAX_RETRIES counts total attempts)
    MAX_RETRIES = 3
    RETRY_BACKOFF_BASE = 1.0
    RETRY_BACKOFF_MAX = 30.0
    DEFAULT_RETRY_AFTER = 2.0

    # Timeout configuration
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        shop_domain: str,
        access_token: str = None,
        api_version: str = None,
        timeout: float = None,
        max_retries: int = None,
        api_key: str = None,
        password: str = None,
        transport: httpx.AsyncBaseTransport = None,
    ):
        """
        Initialize Shopify Admin API client.

        Args:
            shop_domain: Store name or domain (e.g., "my-store" or
                "my-store.myshopify.com")
            access_token: Shopify Admin API access token
            api_version: "YYYY-MM" or "unstable" (default: stable)
            timeout: Request timeout in seconds
            max_retries: Total attempts for 429/503 responses
            api_key: Private app API key, used when no access token is given
            password: Private app password, used with api_key
            transport: Custom httpx transport

        Raises:
            ValueError: On an empty domain, missing credentials or a
                malformed api_version
        """
        self.shop_domain = shop_full_name(shop_domain or "")
        if not self.shop_domain:
            raise ValueError("shop_domain is required")

        if not access_token and not (api_key and password):
            raise ValueError("Either access_token or api_key and password are required")
        self.access_token = access_token
        self.api_key = api_key
        self.password = password

        if api_version and api_version != self.DEFAULT_API_VERSION:
            if api_version != self.UNSTABLE_API_VERSION and not API_VERSION_REGEX.match(api_version):
                raise ValueError(
                    f"api_version must be YYYY-MM or '{self.UNSTABLE_API_VERSION}', got {api_version!r}"
                )
            self.api_version = api_version
            self.path_prefix = f"admin/api/{api_version}"
        else:
            self.api_version = self.DEFAULT_API_VERSION
            self.path_prefix = "admin"
        self._negotiate_version = self.api_version == self.DEFAULT_API_VERSION

        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.max_retries = self.MAX_RETRIES if max_retries is None else max_retries
        self.base_url = shop_base_url(self.shop_domain)
        self.rate_limits = RateLimitInfo()

        # HTTP client (lazy initialization)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        # Resource clients
        self.shop = ShopResource(self)
        self.access_scopes = AccessScopeResource(self)
        self.products = ProductResource(self)
        self.variants = VariantResource(self)
        self.product_listings = ProductListingResource(self)
        self.collections = CollectionResource(self)
        self.custom_collections = CustomCollectionResource(self)
        self.smart_collections = SmartCollectionResource(self)
        self.collects = CollectResource(self)
        self.customers = CustomerResource(self)
        self.orders = OrderResource(self)
        self.draft_orders = DraftOrderResource(self)
        self.abandoned_checkouts = AbandonedCheckoutResource(self)
        self.metafields = MetafieldResource(self)
        self.pages = PageResource(self)
        self.blogs = BlogResource(self)
        self.redirects = RedirectResource(self)
        self.script_tags = ScriptTagResource(self)
        self.themes = ThemeResource(self)
        self.webhooks = WebhookResource(self)
        self.locations = LocationResource(self)
        self.inventory_items = InventoryItemResource(self)
        self.inventory_levels = InventoryLevelResource(self)
        self.price_rules = PriceRuleResource(self)
        self.gift_cards = GiftCardResource(self)
        self.application_charges = ApplicationChargeResource(self)
        self.recurring_application_charges = RecurringApplicationChargeResource(self)
        self.carrier_services = CarrierServiceResource(self)
        self.fulfillment_services = FulfillmentServiceResource(self)
        self.shipping_zones = ShippingZoneResource(self)
        self.storefront_access_tokens = StorefrontAccessTokenResource(self)
        self.payouts = PayoutResource(self)

        logger.info(f"Initialized ShopifyAdminClient for {self.shop_domain} (API {self.api_version})")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None or self._client.is_closed:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": f"shopify-admin-client/{VERSION}",
            }
            auth = None
            if self.access_token:
                headers["X-Shopify-Access-Token"] = self.access_token
            else:
                auth = httpx.BasicAuth(self.api_key, self.password)

            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=headers,
                auth=auth,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close HTTP client"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =========================================================================
    # Response Bookkeeping
    # =========================================================================

    def _update_rate_limits(self, response: httpx.Response):
        """Record rate limit headers of a successful response"""
        # Shopify returns: X-Shopify-Shop-Api-Call-Limit: "32/40"
        limit_header = response.headers.get("X-Shopify-Shop-Api-Call-Limit", "")
        parts = limit_header.split("/")
        if len(parts) == 2:
            try:
                used, bucket = int(parts[0]), int(parts[1])
            except ValueError:
                logger.debug(f"Ignoring malformed call limit header: {limit_header}")
            else:
                self.rate_limits.request_count = used
                self.rate_limits.bucket_size = bucket

        try:
            self.rate_limits.retry_after_seconds = float(response.headers.get("Retry-After", 0))
        except ValueError:
            self.rate_limits.retry_after_seconds = 0.0

    def _update_api_version(self, response: httpx.Response):
        """Adopt the version the server answered with when running on stable"""
        if not self._negotiate_version:
            return
        version = response.headers.get("X-Shopify-API-Version")
        if version and version != self.api_version:
            logger.debug(f"Shopify API version resolved to {version}")
            self.api_version = version

    def _retry_after(self, response: httpx.Response) -> float:
        try:
            return float(response.headers.get("Retry-After", self.DEFAULT_RETRY_AFTER))
        except ValueError:
            return self.DEFAULT_RETRY_AFTER

    def _build_error(self, response: httpx.Response) -> ShopifyAPIError:
        """Classify a non-2xx response into a typed error"""
        status = response.status_code
        body: Any = {}
        if response.content:
            try:
                body = response.json()
            except ValueError:
                return ShopifyResponseDecodingError(
                    f"Could not decode error response (HTTP {status})",
                    body=response.text,
                    status_code=status,
                )
        if not isinstance(body, dict):
            body = {}

        errors = _render_errors(body.get("errors"))
        if errors:
            message = ", ".join(errors)
        elif isinstance(body.get("error"), str) and body["error"]:
            message = body["error"]
        else:
            message = response.reason_phrase or f"HTTP {status}"

        if status == 429:
            return ShopifyRateLimitError(
                message,
                retry_after=self._retry_after(response),
                response_body=body,
                errors=errors,
            )
        if status in (401, 403):
            error_class = ShopifyAuthError
        elif status == 404:
            error_class = ShopifyNotFoundError
        else:
            error_class = ShopifyAPIError
        return error_class(message, status_code=status, response_body=body, errors=errors)

    def _decode(self, response: httpx.Response) -> Dict[str, Any]:
        """Decode a successful response body, empty bodies decode to {}"""
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ShopifyResponseDecodingError(
                f"Could not decode response body: {e}",
                body=response.text,
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise ShopifyResponseDecodingError(
                "Response body is not a JSON object",
                body=response.text,
                status_code=response.status_code,
            )
        return data

    # =========================================================================
    # HTTP Methods with Retry
    # =========================================================================

    def _build_url(self, path: str) -> str:
        if path.startswith("/admin/"):
            return f"{self.base_url}{path}"
        return f"{self.base_url}/{self.path_prefix}/{path.lstrip('/')}"

    async def _backoff(self, seconds: float):
        """Sleep between attempts"""
        await asyncio.sleep(seconds)

    async def _send(
        self,
        method: str,
        path: str,
        params: QueryParams = None,
        json_data: Any = None,
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., "products.json")
            params: Query parameters (dict or options model)
            json_data: JSON body data

        Returns:
            The successful httpx response

        Raises:
            ShopifyAPIError: On API or transport errors
            ShopifyRateLimitError: On rate limit (after retries)
            ShopifyAuthError: On authentication errors
            ShopifyNotFoundError: On 404
        """
        url = self._build_url(path)
        query = encode_params(params)
        client = await self._get_client()
        attempts = max(self.max_retries, 1)

        for attempt in range(attempts):
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    params=query,
                    json=json_data,
                )
            except httpx.RequestError as e:
                raise ShopifyAPIError(f"Request error: {e}") from e

            self._update_api_version(response)

            if response.is_success:
                self._update_rate_limits(response)
                logger.debug(
                    f"API call: {method} {path} - "
                    f"Rate: {self.rate_limits.request_count}/{self.rate_limits.bucket_size}"
                )
                return response

            error = self._build_error(response)
            if response.status_code not in (429, 503) or attempt == attempts - 1:
                raise error

            if response.status_code == 429:
                wait = self._retry_after(response)
                logger.warning(f"Rate limited. Retry after {wait}s (attempt {attempt + 1})")
            else:
                wait = min(self.RETRY_BACKOFF_BASE * (2 ** attempt), self.RETRY_BACKOFF_MAX)
                logger.warning(f"Service unavailable. Retrying in {wait}s (attempt {attempt + 1})")
            await self._backoff(wait)

        # attempts is always at least 1, so the loop returns or raises
        raise ShopifyAPIError("Request failed after all retries")

    async def get(self, path: str, params: QueryParams = None) -> Dict[str, Any]:
        """GET request"""
        return self._decode(await self._send("GET", path, params=params))

    async def get_with_pagination(
        self, path: str, params: QueryParams = None
    ) -> Tuple[Dict[str, Any], Pagination]:
        """GET request that also returns the Link-header pagination"""
        response = await self._send("GET", path, params=params)
        data = self._decode(response)
        return data, parse_link_header(response.headers.get("Link"))

    async def post(self, path: str, data: Any = None, params: QueryParams = None) -> Dict[str, Any]:
        """POST request"""
        return self._decode(await self._send("POST", path, params=params, json_data=data))

    async def put(self, path: str, data: Any = None, params: QueryParams = None) -> Dict[str, Any]:
        """PUT request"""
        return self._decode(await self._send("PUT", path, params=params, json_data=data))

    async def delete(self, path: str, params: QueryParams = None) -> None:
        """DELETE request"""
        await self._send("DELETE", path, params=params)

    async def count(self, path: str, params: QueryParams = None) -> int:
        """GET a count endpoint"""
        data = await self.get(path, params=params)
        return int(data.get("count", 0))
