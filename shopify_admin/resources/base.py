"""
Resource Client Base Classes
Each resource wraps one REST sub-path and knows its JSON envelope keys.
Operations are mixed in per resource.
"""

import logging
from typing import TYPE_CHECKING, Any, AsyncIterator, Dict, List, Tuple, Type, Union

from pydantic import BaseModel

from ..models import Pagination, ShopifyModel

if TYPE_CHECKING:
    from ..client import ShopifyAdminClient, QueryParams

logger = logging.getLogger(__name__)

Payload = Union[ShopifyModel, Dict[str, Any]]


class Resource:
    """
    A REST sub-path and the model/envelope that goes with it.

    path: collection path relative to the API prefix (e.g. "products")
    singular/plural: envelope keys ({"product": ...} / {"products": [...]})
    prefix: owner path for bound sub-resources (e.g. "products/123")
    """
    path: str = ""
    singular: str = ""
    plural: str = ""
    model: Type[ShopifyModel] = ShopifyModel
    id_field: str = "id"

    def __init__(self, client: "ShopifyAdminClient", prefix: str = ""):
        self.client = client
        self.prefix = prefix

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.base_path}>"

    @property
    def base_path(self) -> str:
        if self.prefix:
            return f"{self.prefix}/{self.path}"
        return self.path

    def _path(self, *parts: Any) -> str:
        """Build "{base_path}/{part}/....json" """
        return "/".join([self.base_path, *(str(p) for p in parts)]) + ".json"

    def _parse(self, data: Dict[str, Any], key: str = None) -> ShopifyModel:
        return self.model.model_validate(data.get(key or self.singular) or {})

    def _parse_list(self, data: Dict[str, Any], key: str = None) -> List[ShopifyModel]:
        return [self.model.model_validate(item) for item in data.get(key or self.plural) or []]

    @staticmethod
    def _payload(obj: Payload) -> Dict[str, Any]:
        if isinstance(obj, BaseModel):
            if isinstance(obj, ShopifyModel):
                return obj.to_payload()
            return obj.model_dump(mode="json", exclude_none=True)
        return dict(obj)

    def _wrap(self, obj: Payload) -> Dict[str, Any]:
        return {self.singular: self._payload(obj)}

    def _resource_id(self, obj: Payload) -> Any:
        if isinstance(obj, BaseModel):
            return getattr(obj, self.id_field, None)
        return obj.get(self.id_field)


class ListableResource(Resource):
    async def list(self, options: "QueryParams" = None) -> List[ShopifyModel]:
        """List resources"""
        data = await self.client.get(self._path(), options)
        return self._parse_list(data)


class PaginatedResource(Resource):
    async def list_with_pagination(
        self, options: "QueryParams" = None
    ) -> Tuple[List[ShopifyModel], Pagination]:
        """List one page of resources together with the cursors around it"""
        data, pagination = await self.client.get_with_pagination(self._path(), options)
        return self._parse_list(data), pagination

    async def iterate(
        self, options: "QueryParams" = None, max_pages: int = None
    ) -> AsyncIterator[ShopifyModel]:
        """
        Iterate over every resource, following next-page cursors.

        Args:
            options: Filters for the first page. Later pages only carry the
                cursor, as the API rejects other filters alongside page_info
            max_pages: Maximum pages to fetch (None = all)

        Yields:
            Resource models, page by page
        """
        page_count = 0
        total = 0
        while True:
            items, pagination = await self.list_with_pagination(options)
            page_count += 1
            total += len(items)
            logger.debug(f"Fetched {self.plural} page {page_count}: {len(items)} items (total: {total})")

            for item in items:
                yield item

            if pagination.next_page_options is None:
                break
            if max_pages and page_count >= max_pages:
                logger.info(f"Reached max pages limit ({max_pages})")
                break
            options = pagination.next_page_options


class CountableResource(Resource):
    async def count(self, options: "QueryParams" = None) -> int:
        """Count resources"""
        return await self.client.count(self._path("count"), options)


class GettableResource(Resource):
    async def get(self, resource_id: Any, options: "QueryParams" = None) -> ShopifyModel:
        """Get a single resource by id"""
        data = await self.client.get(self._path(resource_id), options)
        return self._parse(data)


class CreatableResource(Resource):
    async def create(self, obj: Payload) -> ShopifyModel:
        """Create a resource"""
        data = await self.client.post(self._path(), self._wrap(obj))
        return self._parse(data)


class UpdatableResource(Resource):
    async def update(self, obj: Payload) -> ShopifyModel:
        """
        Update a resource identified by the id carried on the object.

        Raises:
            ValueError: If the object has no id
        """
        resource_id = self._resource_id(obj)
        if resource_id is None:
            raise ValueError(f"{self.singular} {self.id_field} is required for update")
        data = await self.client.put(self._path(resource_id), self._wrap(obj))
        return self._parse(data)


class DeletableResource(Resource):
    async def delete(self, resource_id: Any) -> None:
        """Delete a resource by id"""
        await self.client.delete(self._path(resource_id))


class CRUDResource(
    ListableResource,
    CountableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """list, count, get, create, update and delete"""
    pass

