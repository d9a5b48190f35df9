"""
Order Resources
Orders and their fulfillments, fulfillment orders, transactions and risks,
plus draft orders and abandoned checkouts.
"""

from typing import TYPE_CHECKING, List, Union

from ..models import (
    AbandonedCheckout,
    DraftOrder,
    DraftOrderInvoice,
    Fulfillment,
    FulfillmentOrder,
    FulfillmentRequest,
    Order,
    OrderCancelOptions,
    OrderRisk,
    Transaction,
)
from ..utils import fulfillment_path_prefix
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
from .metafields import MetafieldsMixin

if TYPE_CHECKING:
    from ..client import ShopifyAdminClient, QueryParams


class FulfillmentResource(
    ListableResource,
    CountableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
):
    """Fulfillments of an order (orders/{id}/fulfillments)"""
    singular = "fulfillment"
    plural = "fulfillments"
    model = Fulfillment

    def __init__(self, client: "ShopifyAdminClient", owner: str = "", owner_id: int = None):
        super().__init__(client)
        self.owner = owner
        self.owner_id = owner_id

    @property
    def base_path(self) -> str:
        return fulfillment_path_prefix(self.owner, self.owner_id)

    async def _action(self, fulfillment_id: int, action: str) -> Fulfillment:
        data = await self.client.post(self._path(fulfillment_id, action))
        return self._parse(data)

    async def complete(self, fulfillment_id: int) -> Fulfillment:
        """Mark a fulfillment as complete"""
        return await self._action(fulfillment_id, "complete")

    async def transition(self, fulfillment_id: int) -> Fulfillment:
        """Transition a fulfillment back to open"""
        return await self._action(fulfillment_id, "open")

    async def cancel(self, fulfillment_id: int) -> Fulfillment:
        """Cancel a fulfillment"""
        return await self._action(fulfillment_id, "cancel")


class FulfillmentOrderResource(Resource):
    """Fulfillment orders of an order, and fulfillments created from them"""
    path = "fulfillment_orders"
    singular = "fulfillment"
    plural = "fulfillment_orders"
    model = FulfillmentOrder

    async def list(self, options: "QueryParams" = None) -> List[FulfillmentOrder]:
        """List the order's fulfillment orders"""
        data = await self.client.get(self._path(), options)
        return self._parse_list(data)

    def _request_body(self, request: Union[FulfillmentRequest, dict]) -> dict:
        return {"fulfillment": self._payload(request)}

    async def create_fulfillment(self, request: Union[FulfillmentRequest, dict]) -> Fulfillment:
        """Create a fulfillment for one or more fulfillment orders"""
        data = await self.client.post("fulfillments.json", self._request_body(request))
        return Fulfillment.model_validate(data.get("fulfillment") or {})

    async def update_tracking(
        self, fulfillment_id: int, request: Union[FulfillmentRequest, dict]
    ) -> Fulfillment:
        """Update the tracking information of a fulfillment"""
        data = await self.client.post(
            f"fulfillments/{fulfillment_id}/update_tracking.json", self._request_body(request)
        )
        return Fulfillment.model_validate(data.get("fulfillment") or {})


class TransactionResource(ListableResource, CountableResource, GettableResource, CreatableResource):
    """Transactions of an order (orders/{id}/transactions)"""
    path = "transactions"
    singular = "transaction"
    plural = "transactions"
    model = Transaction


class OrderRiskResource(
    ListableResource,
    GettableResource,
    CreatableResource,
    UpdatableResource,
    DeletableResource,
):
    """Fraud risks of an order (orders/{id}/risks)"""
    path = "risks"
    singular = "risk"
    plural = "risks"
    model = OrderRisk


class OrderResource(CRUDResource, PaginatedResource, MetafieldsMixin):
    """Shopify orders"""
    path = "orders"
    singular = "order"
    plural = "orders"
    model = Order

    async def cancel(
        self, order_id: int, options: Union[OrderCancelOptions, dict] = None
    ) -> Order:
        """
        Cancel an order.

        Args:
            order_id: Order to cancel
            options: Refund/restock/notification options, sent as the body

        Returns:
            The cancelled order
        """
        body = self._payload(options) if options is not None else None
        data = await self.client.post(self._path(order_id, "cancel"), body)
        return self._parse(data)

    async def close(self, order_id: int) -> Order:
        """Close an order"""
        data = await self.client.post(self._path(order_id, "close"))
        return self._parse(data)

    async def open(self, order_id: int) -> Order:
        """Re-open a closed order"""
        data = await self.client.post(self._path(order_id, "open"))
        return self._parse(data)

    def fulfillments(self, order_id: int) -> FulfillmentResource:
        return FulfillmentResource(self.client, self.path, order_id)

    def fulfillment_orders(self, order_id: int) -> FulfillmentOrderResource:
        return FulfillmentOrderResource(self.client, prefix=f"{self.path}/{order_id}")

    def transactions(self, order_id: int) -> TransactionResource:
        return TransactionResource(self.client, prefix=f"{self.path}/{order_id}")

    def risks(self, order_id: int) -> OrderRiskResource:
        return OrderRiskResource(self.client, prefix=f"{self.path}/{order_id}")


class DraftOrderResource(CRUDResource, MetafieldsMixin):
    """Shopify draft orders"""
    path = "draft_orders"
    singular = "draft_order"
    plural = "draft_orders"
    model = DraftOrder

    async def send_invoice(
        self, draft_order_id: int, invoice: Union[DraftOrderInvoice, dict]
    ) -> DraftOrderInvoice:
        """Send the draft order's invoice by email"""
        data = await self.client.post(
            self._path(draft_order_id, "send_invoice"),
            {"draft_order_invoice": self._payload(invoice)},
        )
        return DraftOrderInvoice.model_validate(data.get("draft_order_invoice") or {})

    async def complete(self, draft_order_id: int, payment_pending: bool = False) -> DraftOrder:
        """
        Turn a draft order into an order.

        Args:
            draft_order_id: Draft order to complete
            payment_pending: True when payment will be collected later
        """
        data = await self.client.put(
            self._path(draft_order_id, "complete"),
            params={"payment_pending": payment_pending},
        )
        return self._parse(data)


class AbandonedCheckoutResource(ListableResource, PaginatedResource):
    """Checkouts that were started but not completed"""
    path = "checkouts"
    singular = "checkout"
    plural = "checkouts"
    model = AbandonedCheckout
