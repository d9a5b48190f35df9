"""
Billing Resources
App charges billed to the merchant, and Shopify Payments payouts.
"""

from decimal import Decimal
from typing import Union

from ..models import ApplicationCharge, Payout, RecurringApplicationCharge, UsageCharge
from .base import (
    CreatableResource,
    DeletableResource,
    GettableResource,
    ListableResource,
    PaginatedResource,
    Payload,
)


class ApplicationChargeResource(ListableResource, GettableResource, CreatableResource):
    """One-time application charges"""
    path = "application_charges"
    singular = "application_charge"
    plural = "application_charges"
    model = ApplicationCharge

    async def activate(self, charge: Payload) -> ApplicationCharge:
        """Activate an accepted charge"""
        charge_id = self._resource_id(charge)
        if charge_id is None:
            raise ValueError("application_charge id is required for activate")
        data = await self.client.post(self._path(charge_id, "activate"), self._wrap(charge))
        return self._parse(data)


class UsageChargeResource(ListableResource, GettableResource, CreatableResource):
    """Usage charges of one recurring charge"""
    path = "usage_charges"
    singular = "usage_charge"
    plural = "usage_charges"
    model = UsageCharge


class RecurringApplicationChargeResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    DeletableResource,
):
    """Recurring application charges (subscriptions)"""
    path = "recurring_application_charges"
    singular = "recurring_application_charge"
    plural = "recurring_application_charges"
    model = RecurringApplicationCharge

    async def update_capped_amount(
        self, charge_id: int, capped_amount: Union[Decimal, float, str]
    ) -> RecurringApplicationCharge:
        """Raise the capped amount of a usage-based charge"""
        data = await self.client.put(
            self._path(charge_id, "customize"),
            params={f"{self.singular}[capped_amount]": capped_amount},
        )
        return self._parse(data)

    def usage_charges(self, charge_id: int) -> UsageChargeResource:
        """Usage charges of the given recurring charge"""
        return UsageChargeResource(self.client, prefix=f"{self.path}/{charge_id}")


class PayoutResource(ListableResource, PaginatedResource, GettableResource):
    """Shopify Payments payouts"""
    path = "shopify_payments/payouts"
    singular = "payout"
    plural = "payouts"
    model = Payout
