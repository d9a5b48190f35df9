"""
Discount Resources
Price rules, their discount codes, and gift cards.
"""

from typing import TYPE_CHECKING, List

from ..models import DiscountCode, GiftCard, PriceRule
from .base import (
    CountableResource,
    CreatableResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    UpdatableResource,
)

if TYPE_CHECKING:
    from ..client import QueryParams


class DiscountCodeResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """Discount codes of one price rule (price_rules/{id}/discount_codes)"""
    path = "discount_codes"
    singular = "discount_code"
    plural = "discount_codes"
    model = DiscountCode


class PriceRuleResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """Price rules"""
    path = "price_rules"
    singular = "price_rule"
    plural = "price_rules"
    model = PriceRule

    def discount_codes(self, price_rule_id: int) -> DiscountCodeResource:
        """Discount codes of the given price rule"""
        return DiscountCodeResource(self.client, prefix=f"{self.path}/{price_rule_id}")


class GiftCardResource(
    ListableResource,
    CountableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
):
    """Gift cards (they cannot be deleted, only disabled)"""
    path = "gift_cards"
    singular = "gift_card"
    plural = "gift_cards"
    model = GiftCard

    async def disable(self, gift_card_id: int) -> GiftCard:
        """Permanently disable a gift card"""
        data = await self.client.post(
            self._path(gift_card_id, "disable"), {self.singular: {"id": gift_card_id}}
        )
        return self._parse(data)

    async def search(self, options: "QueryParams" = None) -> List[GiftCard]:
        """Search gift cards, e.g. {"query": "last_characters:mnop"}"""
        data = await self.client.get(self._path("search"), options)
        return self._parse_list(data)
