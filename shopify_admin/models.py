"""
Shopify Admin API Models
Pydantic models for Shopify REST resources, query options, and the
client's pagination and rate-limit bookkeeping.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Alias for fields that are themselves named "date"
CalendarDate = date


class ShopifyModel(BaseModel):
    """
    Base for every resource model.

    Unknown fields returned by newer API versions are kept, so a model
    fetched and sent back in an update does not silently drop data.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict without unset (None) fields"""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Enums
# =============================================================================

class ProductStatus(str, Enum):
    """Shopify product status"""
    ACTIVE = "active"
    ARCHIVED = "archived"
    DRAFT = "draft"


class OrderStatus(str, Enum):
    """Order status filter for list/count"""
    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"
    ANY = "any"


class FinancialStatus(str, Enum):
    """Shopify order financial status"""
    PENDING = "pending"
    AUTHORIZED = "authorized"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    PARTIALLY_REFUNDED = "partially_refunded"
    REFUNDED = "refunded"
    VOIDED = "voided"
    ANY = "any"


class FulfillmentStatus(str, Enum):
    """Shopify order fulfillment status"""
    SHIPPED = "shipped"
    PARTIAL = "partial"
    UNSHIPPED = "unshipped"
    UNFULFILLED = "unfulfilled"
    ANY = "any"


class PayoutStatus(str, Enum):
    """Shopify Payments payout status"""
    SCHEDULED = "scheduled"
    IN_TRANSIT = "in_transit"
    PAID = "paid"
    FAILED = "failed"
    CANCELLED = "canceled"


class WebhookTopic(str, Enum):
    """Commonly used Shopify webhook topics"""
    ORDERS_CREATE = "orders/create"
    ORDERS_UPDATED = "orders/updated"
    ORDERS_FULFILLED = "orders/fulfilled"
    ORDERS_CANCELLED = "orders/cancelled"
    ORDERS_PAID = "orders/paid"
    PRODUCTS_CREATE = "products/create"
    PRODUCTS_UPDATE = "products/update"
    PRODUCTS_DELETE = "products/delete"
    CUSTOMERS_CREATE = "customers/create"
    CUSTOMERS_UPDATE = "customers/update"
    CUSTOMERS_DELETE = "customers/delete"
    INVENTORY_LEVELS_UPDATE = "inventory_levels/update"
    APP_UNINSTALLED = "app/uninstalled"


# =============================================================================
# Query Options
# =============================================================================

class ListOptions(BaseModel):
    """General list options usable by most list endpoints"""
    page_info: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    vendor: Optional[str] = None
    ids: Optional[List[int]] = None


class CountOptions(BaseModel):
    """General count options"""
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None


class ProductListOptions(ListOptions):
    """Product list options"""
    collection_id: Optional[int] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[ProductStatus] = None
    published_at_min: Optional[datetime] = None
    published_at_max: Optional[datetime] = None
    published_status: Optional[str] = None
    presentment_currencies: Optional[str] = None


class OrderListOptions(ListOptions):
    """Order list and count options"""
    status: Optional[OrderStatus] = None
    financial_status: Optional[FinancialStatus] = None
    fulfillment_status: Optional[FulfillmentStatus] = None
    processed_at_min: Optional[datetime] = None
    processed_at_max: Optional[datetime] = None


class OrderCancelOptions(BaseModel):
    """Body of an order cancel request"""
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    restock: Optional[bool] = None
    reason: Optional[str] = None
    email: Optional[bool] = None
    refund: Optional[Dict[str, Any]] = None


class DraftOrderListOptions(BaseModel):
    """Draft order list and count options"""
    fields: Optional[str] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    ids: Optional[List[int]] = None
    status: Optional[str] = None


class CustomerSearchOptions(BaseModel):
    """Customer search options"""
    query: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    fields: Optional[str] = None
    order: Optional[str] = None


class InventoryLevelListOptions(BaseModel):
    """Inventory level list options"""
    inventory_item_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    limit: Optional[int] = None
    updated_at_min: Optional[datetime] = None


class InventoryLevelAdjustOptions(BaseModel):
    """Body of an inventory level adjust request"""
    inventory_item_id: int
    location_id: int
    available_adjustment: int


class PayoutsListOptions(BaseModel):
    """Shopify Payments payout list options"""
    page_info: Optional[str] = None
    limit: Optional[int] = None
    fields: Optional[str] = None
    last_id: Optional[int] = None
    since_id: Optional[int] = None
    status: Optional[PayoutStatus] = None
    date_min: Optional[date] = None
    date_max: Optional[date] = None
    date: Optional[CalendarDate] = None


class ThemeListOptions(BaseModel):
    """Theme list options"""
    role: Optional[str] = None
    fields: Optional[str] = None


class WebhookListOptions(ListOptions):
    """Webhook list and count options"""
    address: Optional[str] = None
    topic: Optional[str] = None


class ScriptTagListOptions(ListOptions):
    """Script tag list options"""
    src: Optional[str] = None


# =============================================================================
# Client Bookkeeping
# =============================================================================

class Pagination(BaseModel):
    """Options for fetching the pages around a list response"""
    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None

    @property
    def has_next_page(self) -> bool:
        return self.next_page_options is not None


class RateLimitInfo(BaseModel):
    """Rate limit state reported by the most recent successful response"""
    request_count: int = 0
    bucket_size: int = 0
    retry_after_seconds: float = 0.0


# =============================================================================
# Shared Sub-objects
# =============================================================================

class Address(ShopifyModel):
    """Shipping/billing address embedded in orders and checkouts"""
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class TaxLine(ShopifyModel):
    title: Optional[str] = None
    price: Optional[Decimal] = None
    rate: Optional[Decimal] = None


class NoteAttribute(ShopifyModel):
    name: Optional[str] = None
    value: Any = None


class AmountSetEntry(ShopifyModel):
    amount: Optional[Decimal] = None
    currency_code: Optional[str] = None


class AmountSet(ShopifyModel):
    shop_money: Optional[AmountSetEntry] = None
    presentment_money: Optional[AmountSetEntry] = None


class AppliedDiscount(ShopifyModel):
    title: Optional[str] = None
    description: Optional[str] = None
    value: Optional[str] = None
    value_type: Optional[str] = None
    amount: Optional[str] = None


class DiscountAllocation(ShopifyModel):
    amount: Optional[Decimal] = None
    discount_application_index: Optional[int] = None
    amount_set: Optional[AmountSet] = None


class OrderDiscountCode(ShopifyModel):
    """Discount code applied to an order"""
    code: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None


class LineItem(ShopifyModel):
    """Order, draft order and checkout line item"""
    id: Optional[int] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None
    title: Optional[str] = None
    variant_title: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    vendor: Optional[str] = None
    gift_card: Optional[bool] = None
    taxable: Optional[bool] = None
    fulfillment_service: Optional[str] = None
    fulfillment_status: Optional[str] = None
    fulfillable_quantity: Optional[int] = None
    requires_shipping: Optional[bool] = None
    grams: Optional[int] = None
    pre_tax_price: Optional[Decimal] = None
    properties: Optional[List[NoteAttribute]] = None
    tax_lines: Optional[List[TaxLine]] = None
    applied_discount: Optional[AppliedDiscount] = None
    discount_allocations: Optional[List[DiscountAllocation]] = None


class ShippingLine(ShopifyModel):
    id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[Decimal] = None
    price_set: Optional[AmountSet] = None
    discounted_price: Optional[Decimal] = None
    code: Optional[str] = None
    source: Optional[str] = None
    phone: Optional[str] = None
    carrier_identifier: Optional[str] = None
    tax_lines: Optional[List[TaxLine]] = None


class ClientDetails(ShopifyModel):
    accept_language: Optional[str] = None
    browser_height: Optional[int] = None
    browser_ip: Optional[str] = None
    browser_width: Optional[int] = None
    session_hash: Optional[str] = None
    user_agent: Optional[str] = None


# =============================================================================
# Shop Models
# =============================================================================

class Shop(ShopifyModel):
    """Shopify shop information"""
    id: Optional[int] = None
    name: Optional[str] = None
    shop_owner: Optional[str] = None
    email: Optional[str] = None
    customer_email: Optional[str] = None
    domain: Optional[str] = None
    myshopify_domain: Optional[str] = None
    phone: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    zip: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    currency: Optional[str] = None
    enabled_presentment_currencies: Optional[List[str]] = None
    money_format: Optional[str] = None
    money_with_currency_format: Optional[str] = None
    weight_unit: Optional[str] = None
    timezone: Optional[str] = None
    iana_timezone: Optional[str] = None
    primary_locale: Optional[str] = None
    primary_location_id: Optional[int] = None
    plan_name: Optional[str] = None
    plan_display_name: Optional[str] = None
    password_enabled: Optional[bool] = None
    taxes_included: Optional[bool] = None
    tax_shipping: Optional[bool] = None
    has_storefront: Optional[bool] = None
    has_discounts: Optional[bool] = None
    has_gift_cards: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccessScope(ShopifyModel):
    """OAuth access scope granted to the current token"""
    handle: Optional[str] = None


# =============================================================================
# Metafield Models
# =============================================================================

class Metafield(ShopifyModel):
    """Shopify metafield, either shop-level or owned by another resource"""
    id: Optional[int] = None
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: Any = None
    type: Optional[str] = None
    value_type: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


# =============================================================================
# Product Models
# =============================================================================

class Variant(ShopifyModel):
    """Shopify product variant"""
    id: Optional[int] = None
    product_id: Optional[int] = None
    title: Optional[str] = None
    sku: Optional[str] = None
    position: Optional[int] = None
    grams: Optional[int] = None
    inventory_policy: Optional[str] = None
    price: Optional[Decimal] = None
    compare_at_price: Optional[Decimal] = None
    fulfillment_service: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    taxable: Optional[bool] = None
    tax_code: Optional[str] = None
    barcode: Optional[str] = None
    image_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    old_inventory_quantity: Optional[int] = None
    weight: Optional[Decimal] = None
    weight_unit: Optional[str] = None
    requires_shipping: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None
    metafields: Optional[List[Metafield]] = None


class Image(ShopifyModel):
    """Shopify product image"""
    id: Optional[int] = None
    product_id: Optional[int] = None
    position: Optional[int] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    attachment: Optional[str] = None
    filename: Optional[str] = None
    variant_ids: Optional[List[int]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductOption(ShopifyModel):
    """Shopify product option (e.g., Size, Color)"""
    id: Optional[int] = None
    product_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    values: Optional[List[str]] = None


class Product(ShopifyModel):
    """Shopify product"""
    id: Optional[int] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    published_scope: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    images: Optional[List[Image]] = None
    image: Optional[Image] = None
    metafields: Optional[List[Metafield]] = None
    admin_graphql_api_id: Optional[str] = None

    @property
    def tags_list(self) -> List[str]:
        """Convert comma-separated tags to list"""
        return [t.strip() for t in (self.tags or "").split(",") if t.strip()]


class ProductListing(ShopifyModel):
    """Product published to the calling sales channel app"""
    product_id: Optional[int] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    tags: Optional[str] = None
    available: Optional[bool] = None
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    images: Optional[List[Image]] = None


# =============================================================================
# Collection Models
# =============================================================================

class CollectionRule(ShopifyModel):
    """Smart collection membership rule"""
    column: Optional[str] = None
    relation: Optional[str] = None
    condition: Optional[str] = None


class Collection(ShopifyModel):
    """Read-only view of either collection type"""
    id: Optional[int] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    sort_order: Optional[str] = None
    template_suffix: Optional[str] = None
    image: Optional[Image] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    updated_at: Optional[datetime] = None


class CustomCollection(Collection):
    """Manually curated collection"""
    published: Optional[bool] = None
    metafields: Optional[List[Metafield]] = None


class SmartCollection(Collection):
    """Rule-based collection"""
    published: Optional[bool] = None
    rules: Optional[List[CollectionRule]] = None
    disjunctive: Optional[bool] = None
    metafields: Optional[List[Metafield]] = None


class Collect(ShopifyModel):
    """Link between a product and a custom collection"""
    id: Optional[int] = None
    collection_id: Optional[int] = None
    product_id: Optional[int] = None
    position: Optional[int] = None
    sort_value: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Customer Models
# =============================================================================

class CustomerAddress(ShopifyModel):
    """Address stored on a customer"""
    id: Optional[int] = None
    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    default: Optional[bool] = None


class Customer(ShopifyModel):
    """Shopify customer"""
    id: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    state: Optional[str] = None
    note: Optional[str] = None
    verified_email: Optional[bool] = None
    multipass_identifier: Optional[str] = None
    orders_count: Optional[int] = None
    total_spent: Optional[Decimal] = None
    tax_exempt: Optional[bool] = None
    tax_exemptions: Optional[List[str]] = None
    tags: Optional[str] = None
    currency: Optional[str] = None
    last_order_id: Optional[int] = None
    last_order_name: Optional[str] = None
    accepts_marketing: Optional[bool] = None
    email_marketing_consent: Optional[Dict[str, Any]] = None
    sms_marketing_consent: Optional[Dict[str, Any]] = None
    default_address: Optional[CustomerAddress] = None
    addresses: Optional[List[CustomerAddress]] = None
    password: Optional[str] = None
    password_confirmation: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        """Get customer full name"""
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p) or "Unknown"


# =============================================================================
# Order Models
# =============================================================================

class PaymentDetails(ShopifyModel):
    avs_result_code: Optional[str] = None
    credit_card_bin: Optional[str] = None
    cvv_result_code: Optional[str] = None
    credit_card_number: Optional[str] = None
    credit_card_company: Optional[str] = None


class Transaction(ShopifyModel):
    """Money movement on an order"""
    id: Optional[int] = None
    order_id: Optional[int] = None
    parent_id: Optional[int] = None
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    kind: Optional[str] = None
    gateway: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    test: Optional[bool] = None
    authorization: Optional[str] = None
    error_code: Optional[str] = None
    source_name: Optional[str] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    device_id: Optional[int] = None
    payment_details: Optional[PaymentDetails] = None
    created_at: Optional[datetime] = None


class RefundLineItem(ShopifyModel):
    id: Optional[int] = None
    quantity: Optional[int] = None
    line_item_id: Optional[int] = None
    line_item: Optional[LineItem] = None
    subtotal: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None


class Refund(ShopifyModel):
    id: Optional[int] = None
    order_id: Optional[int] = None
    note: Optional[str] = None
    restock: Optional[bool] = None
    user_id: Optional[int] = None
    refund_line_items: Optional[List[RefundLineItem]] = None
    transactions: Optional[List[Transaction]] = None
    created_at: Optional[datetime] = None


class Fulfillment(ShopifyModel):
    """Shipment of some or all of an order's line items"""
    id: Optional[int] = None
    order_id: Optional[int] = None
    location_id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None
    service: Optional[str] = None
    shipment_status: Optional[str] = None
    tracking_company: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_numbers: Optional[List[str]] = None
    tracking_url: Optional[str] = None
    tracking_urls: Optional[List[str]] = None
    notify_customer: Optional[bool] = None
    receipt: Optional[Dict[str, Any]] = None
    line_items: Optional[List[LineItem]] = None
    origin_address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Order(ShopifyModel):
    """Shopify order"""
    id: Optional[int] = None
    name: Optional[str] = None
    number: Optional[int] = None
    order_number: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    contact_email: Optional[str] = None
    token: Optional[str] = None
    cart_token: Optional[str] = None
    checkout_id: Optional[int] = None
    checkout_token: Optional[str] = None
    customer: Optional[Customer] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    currency: Optional[str] = None
    total_price: Optional[Decimal] = None
    current_total_price: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    total_discounts: Optional[Decimal] = None
    total_line_items_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_price_usd: Optional[Decimal] = None
    taxes_included: Optional[bool] = None
    tax_lines: Optional[List[TaxLine]] = None
    total_weight: Optional[int] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    fulfillments: Optional[List[Fulfillment]] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    discount_codes: Optional[List[OrderDiscountCode]] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    tags: Optional[str] = None
    test: Optional[bool] = None
    confirmed: Optional[bool] = None
    gateway: Optional[str] = None
    payment_gateway_names: Optional[List[str]] = None
    processing_method: Optional[str] = None
    browser_ip: Optional[str] = None
    buyer_accepts_marketing: Optional[bool] = None
    cancel_reason: Optional[str] = None
    customer_locale: Optional[str] = None
    landing_site: Optional[str] = None
    referring_site: Optional[str] = None
    source_name: Optional[str] = None
    client_details: Optional[ClientDetails] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    order_status_url: Optional[str] = None
    refunds: Optional[List[Refund]] = None
    transactions: Optional[List[Transaction]] = None
    metafields: Optional[List[Metafield]] = None
    send_receipt: Optional[bool] = None
    send_fulfillment_receipt: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None


class OrderRisk(ShopifyModel):
    """Fraud analysis attached to an order"""
    id: Optional[int] = None
    order_id: Optional[int] = None
    checkout_id: Optional[int] = None
    source: Optional[str] = None
    score: Optional[str] = None
    recommendation: Optional[str] = None
    display: Optional[bool] = None
    cause_cancel: Optional[bool] = None
    message: Optional[str] = None
    merchant_message: Optional[str] = None


class TrackingInfo(ShopifyModel):
    number: Optional[str] = None
    company: Optional[str] = None
    url: Optional[str] = None


class FulfillmentOrderLineItem(ShopifyModel):
    id: Optional[int] = None
    quantity: Optional[int] = None


class LineItemsByFulfillmentOrder(ShopifyModel):
    fulfillment_order_id: Optional[int] = None
    fulfillment_order_line_items: Optional[List[FulfillmentOrderLineItem]] = None


class FulfillmentRequest(ShopifyModel):
    """Body for creating a fulfillment from fulfillment orders"""
    message: Optional[str] = None
    notify_customer: Optional[bool] = None
    tracking_info: Optional[TrackingInfo] = None
    line_items_by_fulfillment_order: Optional[List[LineItemsByFulfillmentOrder]] = None


class FulfillmentOrder(ShopifyModel):
    """Group of line items to be fulfilled from one location"""
    id: Optional[int] = None
    shop_id: Optional[int] = None
    order_id: Optional[int] = None
    assigned_location_id: Optional[int] = None
    request_status: Optional[str] = None
    status: Optional[str] = None
    supported_actions: Optional[List[str]] = None
    destination: Optional[Dict[str, Any]] = None
    line_items: Optional[List[Dict[str, Any]]] = None
    fulfill_at: Optional[datetime] = None
    delivery_method: Optional[Dict[str, Any]] = None
    assigned_location: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DraftOrder(ShopifyModel):
    """Order created by a merchant on behalf of a customer"""
    id: Optional[int] = None
    order_id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None
    customer: Optional[Customer] = None
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    use_customer_default_address: Optional[bool] = None
    email: Optional[str] = None
    currency: Optional[str] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    invoice_url: Optional[str] = None
    invoice_sent_at: Optional[datetime] = None
    line_items: Optional[List[LineItem]] = None
    shipping_line: Optional[ShippingLine] = None
    applied_discount: Optional[AppliedDiscount] = None
    tags: Optional[str] = None
    tax_lines: Optional[List[TaxLine]] = None
    taxes_included: Optional[bool] = None
    tax_exempt: Optional[bool] = None
    tax_exemptions: Optional[List[str]] = None
    subtotal_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DraftOrderInvoice(ShopifyModel):
    """Invoice email sent for a draft order"""
    to: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    subject: Optional[str] = None
    custom_message: Optional[str] = None
    bcc: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class AbandonedCheckout(ShopifyModel):
    """Checkout that was started but not completed"""
    id: Optional[int] = None
    token: Optional[str] = None
    cart_token: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    gateway: Optional[str] = None
    currency: Optional[str] = None
    presentment_currency: Optional[str] = None
    abandoned_checkout_url: Optional[str] = None
    buyer_accepts_marketing: Optional[bool] = None
    customer: Optional[Customer] = None
    customer_locale: Optional[str] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    discount_codes: Optional[List[OrderDiscountCode]] = None
    tax_lines: Optional[List[TaxLine]] = None
    note: Optional[str] = None
    note_attributes: Optional[List[NoteAttribute]] = None
    landing_site: Optional[str] = None
    referring_site: Optional[str] = None
    source_name: Optional[str] = None
    taxes_included: Optional[bool] = None
    total_weight: Optional[int] = None
    total_discounts: Optional[Decimal] = None
    total_line_items_price: Optional[Decimal] = None
    subtotal_price: Optional[Decimal] = None
    total_tax: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    location_id: Optional[int] = None
    user_id: Optional[int] = None
    completed_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Online Store Models
# =============================================================================

class Page(ShopifyModel):
    """Online store page"""
    id: Optional[int] = None
    shop_id: Optional[int] = None
    title: Optional[str] = None
    handle: Optional[str] = None
    author: Optional[str] = None
    body_html: Optional[str] = None
    template_suffix: Optional[str] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class Blog(ShopifyModel):
    """Online store blog"""
    id: Optional[int] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    commentable: Optional[str] = None
    feedburner: Optional[str] = None
    feedburner_location: Optional[str] = None
    tags: Optional[str] = None
    template_suffix: Optional[str] = None
    metafields: Optional[List[Metafield]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class Redirect(ShopifyModel):
    """URL redirect"""
    id: Optional[int] = None
    path: Optional[str] = None
    target: Optional[str] = None


class ScriptTag(ShopifyModel):
    """Remote script loaded into the storefront"""
    id: Optional[int] = None
    src: Optional[str] = None
    event: Optional[str] = None
    display_scope: Optional[str] = None
    cache: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Theme(ShopifyModel):
    """Online store theme"""
    id: Optional[int] = None
    name: Optional[str] = None
    role: Optional[str] = None
    src: Optional[str] = None
    previewable: Optional[bool] = None
    processing: Optional[bool] = None
    theme_store_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class Asset(ShopifyModel):
    """File belonging to a theme, addressed by key"""
    key: Optional[str] = None
    theme_id: Optional[int] = None
    value: Optional[str] = None
    attachment: Optional[str] = None
    src: Optional[str] = None
    source_key: Optional[str] = None
    content_type: Optional[str] = None
    public_url: Optional[str] = None
    size: Optional[int] = None
    checksum: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Webhook Models
# =============================================================================

class Webhook(ShopifyModel):
    """Shopify webhook subscription"""
    id: Optional[int] = None
    address: Optional[str] = None
    topic: Optional[str] = None
    format: Optional[str] = None
    fields: Optional[List[str]] = None
    metafield_namespaces: Optional[List[str]] = None
    private_metafield_namespaces: Optional[List[str]] = None
    api_version: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Inventory Models
# =============================================================================

class Location(ShopifyModel):
    """Place where inventory is stocked"""
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    legacy: Optional[bool] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    province: Optional[str] = None
    province_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    localized_country_name: Optional[str] = None
    localized_province_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class InventoryItem(ShopifyModel):
    """Physical good behind a variant"""
    id: Optional[int] = None
    sku: Optional[str] = None
    cost: Optional[Decimal] = None
    tracked: Optional[bool] = None
    requires_shipping: Optional[bool] = None
    country_code_of_origin: Optional[str] = None
    province_code_of_origin: Optional[str] = None
    harmonized_system_code: Optional[str] = None
    country_harmonized_system_codes: Optional[List[Dict[str, Any]]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class InventoryLevel(ShopifyModel):
    """Quantity of an inventory item at a location"""
    inventory_item_id: Optional[int] = None
    location_id: Optional[int] = None
    available: Optional[int] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


# =============================================================================
# Discount Models
# =============================================================================

class PriceRule(ShopifyModel):
    """Discount definition that discount codes are attached to"""
    id: Optional[int] = None
    title: Optional[str] = None
    value_type: Optional[str] = None
    value: Optional[Decimal] = None
    customer_selection: Optional[str] = None
    target_type: Optional[str] = None
    target_selection: Optional[str] = None
    allocation_method: Optional[str] = None
    allocation_limit: Optional[int] = None
    once_per_customer: Optional[bool] = None
    usage_limit: Optional[int] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    entitled_product_ids: Optional[List[int]] = None
    entitled_variant_ids: Optional[List[int]] = None
    entitled_collection_ids: Optional[List[int]] = None
    entitled_country_ids: Optional[List[int]] = None
    prerequisite_product_ids: Optional[List[int]] = None
    prerequisite_variant_ids: Optional[List[int]] = None
    prerequisite_collection_ids: Optional[List[int]] = None
    prerequisite_saved_search_ids: Optional[List[int]] = None
    prerequisite_customer_ids: Optional[List[int]] = None
    prerequisite_subtotal_range: Optional[Dict[str, Any]] = None
    prerequisite_quantity_range: Optional[Dict[str, Any]] = None
    prerequisite_shipping_price_range: Optional[Dict[str, Any]] = None
    prerequisite_to_entitlement_quantity_ratio: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DiscountCode(ShopifyModel):
    """Code redeeming a price rule"""
    id: Optional[int] = None
    price_rule_id: Optional[int] = None
    code: Optional[str] = None
    usage_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GiftCard(ShopifyModel):
    """Shopify gift card"""
    id: Optional[int] = None
    code: Optional[str] = None
    last_characters: Optional[str] = None
    balance: Optional[Decimal] = None
    initial_value: Optional[Decimal] = None
    currency: Optional[str] = None
    customer_id: Optional[int] = None
    order_id: Optional[int] = None
    line_item_id: Optional[int] = None
    user_id: Optional[int] = None
    api_client_id: Optional[int] = None
    note: Optional[str] = None
    template_suffix: Optional[str] = None
    expires_on: Optional[date] = None
    disabled_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# Billing Models
# =============================================================================

class ApplicationCharge(ShopifyModel):
    """One-time charge billed to the merchant by an app"""
    id: Optional[int] = None
    name: Optional[str] = None
    api_client_id: Optional[int] = None
    price: Optional[Decimal] = None
    status: Optional[str] = None
    return_url: Optional[str] = None
    test: Optional[bool] = None
    charge_type: Optional[str] = None
    decorated_return_url: Optional[str] = None
    confirmation_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RecurringApplicationCharge(ShopifyModel):
    """Subscription charge billed to the merchant by an app"""
    id: Optional[int] = None
    name: Optional[str] = None
    api_client_id: Optional[int] = None
    price: Optional[Decimal] = None
    capped_amount: Optional[Decimal] = None
    balance_used: Optional[Decimal] = None
    balance_remaining: Optional[Decimal] = None
    risk_level: Optional[Decimal] = None
    status: Optional[str] = None
    terms: Optional[str] = None
    return_url: Optional[str] = None
    test: Optional[bool] = None
    trial_days: Optional[int] = None
    decorated_return_url: Optional[str] = None
    confirmation_url: Optional[str] = None
    billing_on: Optional[date] = None
    activated_on: Optional[date] = None
    cancelled_on: Optional[date] = None
    trial_ends_on: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UsageCharge(ShopifyModel):
    """Variable charge against a capped recurring charge"""
    id: Optional[int] = None
    recurring_application_charge_id: Optional[int] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    balance_used: Optional[Decimal] = None
    balance_remaining: Optional[Decimal] = None
    risk_level: Optional[Decimal] = None
    billing_on: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Payout(ShopifyModel):
    """Shopify Payments transfer to the merchant's bank account"""
    id: Optional[int] = None
    date: Optional[CalendarDate] = None
    currency: Optional[str] = None
    amount: Optional[Decimal] = None
    status: Optional[str] = None


# =============================================================================
# Shipping & Fulfillment Service Models
# =============================================================================

class CarrierService(ShopifyModel):
    """App-provided shipping rate calculator"""
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    callback_url: Optional[str] = None
    carrier_service_type: Optional[str] = None
    format: Optional[str] = None
    service_discovery: Optional[bool] = None
    admin_graphql_api_id: Optional[str] = None


class FulfillmentService(ShopifyModel):
    """Third-party warehouse that prepares and ships orders"""
    id: Optional[int] = None
    name: Optional[str] = None
    handle: Optional[str] = None
    email: Optional[str] = None
    service_name: Optional[str] = None
    callback_url: Optional[str] = None
    location_id: Optional[int] = None
    provider_id: Optional[int] = None
    include_pending_stock: Optional[bool] = None
    inventory_management: Optional[bool] = None
    tracking_support: Optional[bool] = None
    requires_shipping_method: Optional[bool] = None
    permits_sku_sharing: Optional[bool] = None
    fulfillment_orders_opt_in: Optional[bool] = None
    admin_graphql_api_id: Optional[str] = None


class ShippingProvince(ShopifyModel):
    id: Optional[int] = None
    country_id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    tax: Optional[Decimal] = None
    tax_name: Optional[str] = None
    tax_type: Optional[str] = None
    tax_percentage: Optional[Decimal] = None


class ShippingCountry(ShopifyModel):
    id: Optional[int] = None
    shipping_zone_id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    tax: Optional[Decimal] = None
    tax_name: Optional[str] = None
    provinces: Optional[List[ShippingProvince]] = None


class ShippingZone(ShopifyModel):
    """Region with its own shipping rates"""
    id: Optional[int] = None
    name: Optional[str] = None
    profile_id: Optional[str] = None
    location_group_id: Optional[str] = None
    countries: Optional[List[ShippingCountry]] = None
    weight_based_shipping_rates: Optional[List[Dict[str, Any]]] = None
    price_based_shipping_rates: Optional[List[Dict[str, Any]]] = None
    carrier_shipping_rate_providers: Optional[List[Dict[str, Any]]] = None
    admin_graphql_api_id: Optional[str] = None


class StorefrontAccessToken(ShopifyModel):
    """Token for the Storefront API"""
    id: Optional[int] = None
    title: Optional[str] = None
    access_token: Optional[str] = None
    access_scope: Optional[str] = None
    created_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None
