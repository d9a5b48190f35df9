"""
Inventory Resources
Locations, inventory items and inventory levels.
"""

from typing import TYPE_CHECKING, List, Union

from ..models import InventoryItem, InventoryLevel, InventoryLevelAdjustOptions, Location
from .base import (
    CountableResource,
    GettableResource,
    ListableResource,
    Payload,
    UpdatableResource,
)

if TYPE_CHECKING:
    from ..client import QueryParams


class LocationResource(ListableResource, CountableResource, GettableResource):
    """Shop locations"""
    path = "locations"
    singular = "location"
    plural = "locations"
    model = Location

    async def inventory_levels(
        self, location_id: int, options: "QueryParams" = None
    ) -> List[InventoryLevel]:
        """Inventory levels stocked at the location"""
        data = await self.client.get(self._path(location_id, "inventory_levels"), options)
        return [InventoryLevel.model_validate(level) for level in data.get("inventory_levels") or []]


class InventoryItemResource(ListableResource, GettableResource, UpdatableResource):
    """Inventory items (list requires ids in the options)"""
    path = "inventory_items"
    singular = "inventory_item"
    plural = "inventory_items"
    model = InventoryItem


class InventoryLevelResource(ListableResource):
    """
    Inventory levels.

    Levels have no id of their own; they are addressed by the pair
    (inventory_item_id, location_id).
    """
    path = "inventory_levels"
    singular = "inventory_level"
    plural = "inventory_levels"
    model = InventoryLevel

    async def _post_level(self, action: str, body: Payload) -> InventoryLevel:
        data = await self.client.post(self._path(action), self._payload(body))
        return self._parse(data)

    async def adjust(self, options: Union[InventoryLevelAdjustOptions, dict]) -> InventoryLevel:
        """Adjust the available quantity by a relative amount"""
        return await self._post_level("adjust", options)

    async def connect(self, level: Payload) -> InventoryLevel:
        """Connect an inventory item to a location"""
        return await self._post_level("connect", level)

    async def set(self, level: Payload) -> InventoryLevel:
        """Set the available quantity at a location"""
        return await self._post_level("set", level)

    async def delete(self, inventory_item_id: int, location_id: int) -> None:
        """Disconnect an inventory item from a location"""
        await self.client.delete(
            self._path(),
            params={"inventory_item_id": inventory_item_id, "location_id": location_id},
        )
