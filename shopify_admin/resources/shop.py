"""
Shop Resources
Shop details, granted access scopes, shipping configuration, and
storefront access tokens.
"""

from typing import TYPE_CHECKING, List

from ..models import (
    AccessScope,
    CarrierService,
    FulfillmentService,
    ShippingZone,
    Shop,
    StorefrontAccessToken,
)
from .base import (
    CreatableResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    Resource,
    UpdatableResource,
)

if TYPE_CHECKING:
    from ..client import QueryParams


class ShopResource(Resource):
    """The shop the client is connected to"""
    path = "shop"
    singular = "shop"
    model = Shop

    async def get(self, options: "QueryParams" = None) -> Shop:
        """
        Get shop information.

        Returns:
            Shop model with store details
        """
        data = await self.client.get(self._path(), options)
        return self._parse(data)


class AccessScopeResource(Resource):
    """OAuth access scopes granted to the token"""
    singular = "access_scope"
    plural = "access_scopes"
    model = AccessScope

    async def list(self, options: "QueryParams" = None) -> List[AccessScope]:
        """
        Get OAuth access scopes granted to this token.

        Returns:
            List of AccessScope (handle e.g. 'read_products')
        """
        # Unversioned endpoint outside the admin API prefix
        data = await self.client.get("/admin/oauth/access_scopes.json", options)
        return self._parse_list(data)


class CarrierServiceResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    path = "carrier_services"
    singular = "carrier_service"
    plural = "carrier_services"
    model = CarrierService


class FulfillmentServiceResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    path = "fulfillment_services"
    singular = "fulfillment_service"
    plural = "fulfillment_services"
    model = FulfillmentService


class ShippingZoneResource(ListableResource):
    path = "shipping_zones"
    singular = "shipping_zone"
    plural = "shipping_zones"
    model = ShippingZone


class StorefrontAccessTokenResource(ListableResource, CreatableResource, DeletableResource):
    path = "storefront_access_tokens"
    singular = "storefront_access_token"
    plural = "storefront_access_tokens"
    model = StorefrontAccessToken
