"""
Customer Resources
Customers and their saved addresses.
"""

from typing import TYPE_CHECKING, List

from ..models import Customer, CustomerAddress, Order
from .base import (
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
    from ..client import QueryParams


class CustomerAddressResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """Addresses of one customer (customers/{id}/addresses)"""
    path = "addresses"
    singular = "customer_address"
    plural = "addresses"
    model = CustomerAddress

    async def set_default(self, address_id: int) -> CustomerAddress:
        """Make an address the customer's default"""
        data = await self.client.put(self._path(address_id, "default"))
        return self._parse(data)


class CustomerResource(CRUDResource, PaginatedResource, MetafieldsMixin):
    """Shopify customers"""
    path = "customers"
    singular = "customer"
    plural = "customers"
    model = Customer

    async def search(self, options: "QueryParams" = None) -> List[Customer]:
        """
        Search customers.

        Args:
            options: CustomerSearchOptions (query, order, limit, fields) or dict

        Returns:
            Matching customers
        """
        data = await self.client.get(self._path("search"), options)
        return self._parse_list(data)

    async def list_orders(self, customer_id: int, options: "QueryParams" = None) -> List[Order]:
        """Orders placed by the customer"""
        data = await self.client.get(self._path(customer_id, "orders"), options)
        return [Order.model_validate(o) for o in data.get("orders") or []]

    async def list_tags(self, options: "QueryParams" = None) -> List[str]:
        """All tags used on customers"""
        data = await self.client.get(self._path("tags"), options)
        return data.get("tags") or []

    def addresses(self, customer_id: int) -> CustomerAddressResource:
        """Addresses of the given customer"""
        return CustomerAddressResource(self.client, prefix=f"{self.path}/{customer_id}")
