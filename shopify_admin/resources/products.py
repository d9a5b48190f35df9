"""
Product Resources
Products, variants, product images and product listings.
"""

from typing import TYPE_CHECKING, List

from ..models import Image, Product, ProductListing, Variant
from .base import (
    CountableResource,
    CreatableResource,
    CRUDResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    PaginatedResource,
    UpdatableResource,
)
from .metafields import MetafieldsMixin

if TYPE_CHECKING:
    from ..client import ShopifyAdminClient, QueryParams


class VariantResource(GettableResource, UpdatableResource, MetafieldsMixin):
    """
    Product variants.

    Unbound (client.variants) a variant can be fetched and updated by id.
    Listing, counting, creating and deleting need the owning product:
    client.products.variants(product_id).
    """
    path = "variants"
    singular = "variant"
    plural = "variants"
    model = Variant

    def __init__(self, client: "ShopifyAdminClient", product_id: int = None):
        super().__init__(client)
        self.product_id = product_id

    def _product_path(self, *parts) -> str:
        if self.product_id is None:
            raise ValueError("variants must be bound to a product for this operation")
        return "/".join([f"products/{self.product_id}/variants", *(str(p) for p in parts)]) + ".json"

    async def list(self, options: "QueryParams" = None) -> List[Variant]:
        """List the product's variants"""
        data = await self.client.get(self._product_path(), options)
        return self._parse_list(data)

    async def count(self, options: "QueryParams" = None) -> int:
        """Count the product's variants"""
        return await self.client.count(self._product_path("count"), options)

    async def create(self, variant) -> Variant:
        """Create a variant on the product"""
        data = await self.client.post(self._product_path(), self._wrap(variant))
        return self._parse(data)

    async def delete(self, variant_id: int) -> None:
        """Delete a variant from the product"""
        await self.client.delete(self._product_path(variant_id))


class ImageResource(CRUDResource):
    """Images of one product (products/{id}/images)"""
    path = "images"
    singular = "image"
    plural = "images"
    model = Image


class ProductResource(CRUDResource, PaginatedResource, MetafieldsMixin):
    """Shopify products"""
    path = "products"
    singular = "product"
    plural = "products"
    model = Product

    def variants(self, product_id: int) -> VariantResource:
        """Variants of the given product"""
        return VariantResource(self.client, product_id)

    def images(self, product_id: int) -> ImageResource:
        """Images of the given product"""
        return ImageResource(self.client, prefix=f"{self.path}/{product_id}")


class ProductListingResource(
    ListableResource,
    PaginatedResource,
    CountableResource,
    GettableResource,
    DeletableResource,
):
    """Products published to the calling sales channel"""
    path = "product_listings"
    singular = "product_listing"
    plural = "product_listings"
    model = ProductListing
    id_field = "product_id"

    async def product_ids(self, options: "QueryParams" = None) -> List[int]:
        """Ids of the products published to the channel"""
        data = await self.client.get(self._path("product_ids"), options)
        return data.get("product_ids") or []

    async def publish(self, product_id: int) -> ProductListing:
        """Publish a product to the channel"""
        data = await self.client.put(
            self._path(product_id), {self.singular: {"product_id": product_id}}
        )
        return self._parse(data)
