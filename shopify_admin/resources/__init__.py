"""
Shopify Admin API resource clients
"""

from .base import (
    CountableResource,
    CreatableResource,
    CRUDResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    PaginatedResource,
    Resource,
    UpdatableResource,
)
from .billing import (
    ApplicationChargeResource,
    PayoutResource,
    RecurringApplicationChargeResource,
    UsageChargeResource,
)
from .collections import (
    CollectionResource,
    CollectResource,
    CustomCollectionResource,
    SmartCollectionResource,
)
from .content import (
    AssetResource,
    BlogResource,
    PageResource,
    RedirectResource,
    ScriptTagResource,
    ThemeResource,
)
from .customers import CustomerAddressResource, CustomerResource
from .discounts import DiscountCodeResource, GiftCardResource, PriceRuleResource
from .inventory import InventoryItemResource, InventoryLevelResource, LocationResource
from .metafields import MetafieldResource, MetafieldsMixin
from .orders import (
    AbandonedCheckoutResource,
    DraftOrderResource,
    FulfillmentOrderResource,
    FulfillmentResource,
    OrderResource,
    OrderRiskResource,
    TransactionResource,
)
from .products import ImageResource, ProductListingResource, ProductResource, VariantResource
from .shop import (
    AccessScopeResource,
    CarrierServiceResource,
    FulfillmentServiceResource,
    ShippingZoneResource,
    ShopResource,
    StorefrontAccessTokenResource,
)
from .webhooks import WebhookResource

__all__ = [
    # Base
    "Resource",
    "ListableResource",
    "PaginatedResource",
    "CountableResource",
    "GettableResource",
    "CreatableResource",
    "UpdatableResource",
    "DeletableResource",
    "CRUDResource",
    "MetafieldsMixin",
    # Shop
    "ShopResource",
    "AccessScopeResource",
    "CarrierServiceResource",
    "FulfillmentServiceResource",
    "ShippingZoneResource",
    "StorefrontAccessTokenResource",
    # Products
    "ProductResource",
    "VariantResource",
    "ImageResource",
    "ProductListingResource",
    # Collections
    "CollectionResource",
    "CustomCollectionResource",
    "SmartCollectionResource",
    "CollectResource",
    # Customers
    "CustomerResource",
    "CustomerAddressResource",
    # Orders
    "OrderResource",
    "FulfillmentResource",
    "FulfillmentOrderResource",
    "TransactionResource",
    "OrderRiskResource",
    "DraftOrderResource",
    "AbandonedCheckoutResource",
    # Online store
    "MetafieldResource",
    "PageResource",
    "BlogResource",
    "RedirectResource",
    "ScriptTagResource",
    "ThemeResource",
    "AssetResource",
    "WebhookResource",
    # Inventory
    "LocationResource",
    "InventoryItemResource",
    "InventoryLevelResource",
    # Discounts
    "PriceRuleResource",
    "DiscountCodeResource",
    "GiftCardResource",
    # Billing
    "ApplicationChargeResource",
    "RecurringApplicationChargeResource",
    "UsageChargeResource",
    "PayoutResource",
]
