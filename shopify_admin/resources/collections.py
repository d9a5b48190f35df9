"""
Collection Resources
Read-only collections, custom and smart collections, and collects.
"""

from typing import TYPE_CHECKING, List, Tuple

from ..models import Collect, Collection, CustomCollection, Pagination, Product, SmartCollection
from .base import (
    CountableResource,
    CreatableResource,
    CRUDResource,
    DeletableResource,
    GettableResource,
    ListableResource,
)
from .metafields import MetafieldsMixin

if TYPE_CHECKING:
    from ..client import QueryParams


class CollectionResource(GettableResource):
    """Either kind of collection, read-only"""
    path = "collections"
    singular = "collection"
    plural = "collections"
    model = Collection

    async def list_products(
        self, collection_id: int, options: "QueryParams" = None
    ) -> Tuple[List[Product], Pagination]:
        """
        One page of the products in a collection.

        Args:
            collection_id: Collection to read
            options: ListOptions or dict, e.g. pagination cursor from a
                previous call

        Returns:
            Tuple of (products, pagination)
        """
        data, pagination = await self.client.get_with_pagination(
            self._path(collection_id, "products"), options
        )
        products = [Product.model_validate(p) for p in data.get("products") or []]
        return products, pagination


class CustomCollectionResource(CRUDResource, MetafieldsMixin):
    """Manually curated collections"""
    path = "custom_collections"
    singular = "custom_collection"
    plural = "custom_collections"
    model = CustomCollection
    metafield_owner = "collections"


class SmartCollectionResource(CRUDResource, MetafieldsMixin):
    """Rule-based collections"""
    path = "smart_collections"
    singular = "smart_collection"
    plural = "smart_collections"
    model = SmartCollection
    metafield_owner = "collections"

    async def set_order(
        self, collection_id: int, product_ids: List[int] = None, sort_order: str = None
    ) -> None:
        """Set manual product ordering, or change the collection's sort order"""
        params = {"products[]": product_ids, "sort_order": sort_order}
        await self.client.put(self._path(collection_id, "order"), params=params)


class CollectResource(
    ListableResource,
    CountableResource,
    GettableResource,
    CreatableResource,
    DeletableResource,
):
    """Product membership in custom collections"""
    path = "collects"
    singular = "collect"
    plural = "collects"
    model = Collect
