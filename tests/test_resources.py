"""
Tests for resource clients: paths, methods, envelopes and special
operations.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from shopify_admin import (
    CountOptions,
    CustomerSearchOptions,
    DraftOrderListOptions,
    InventoryLevelAdjustOptions,
    InventoryLevelListOptions,
    OrderCancelOptions,
    PayoutsListOptions,
    ScriptTagListOptions,
    ThemeListOptions,
    WebhookListOptions,
)
from shopify_admin.models import (
    Asset,
    DraftOrderInvoice,
    FulfillmentRequest,
    LineItemsByFulfillmentOrder,
    Metafield,
    PayoutStatus,
    Product,
    SmartCollection,
    TrackingInfo,
    Variant,
)

PREFIX = "/admin/api/2024-01"


def path_of(shopify) -> str:
    return shopify.last_request.url.path[len(PREFIX):]


class TestCRUD:
    """Generic list/count/get/create/update/delete"""

    @pytest.mark.asyncio
    async def test_list(self, client, shopify):
        shopify.queue(200, {"products": [{"id": 1, "title": "Shirt", "variants": [{"id": 10, "price": "19.99"}]}]})

        products = await client.products.list({"limit": 10})

        assert shopify.last_request.method == "GET"
        assert path_of(shopify) == "/products.json"
        assert shopify.last_request.url.params["limit"] == "10"
        assert products[0].title == "Shirt"
        assert products[0].variants[0].price == Decimal("19.99")

    @pytest.mark.asyncio
    async def test_count(self, client, shopify):
        shopify.queue(200, {"count": 7})
        assert await client.orders.count({"status": "any"}) == 7
        assert path_of(shopify) == "/orders/count.json"

    @pytest.mark.asyncio
    async def test_get(self, client, shopify):
        shopify.queue(200, {"customer": {"id": 5, "first_name": "Ada", "last_name": "Lovelace"}})

        customer = await client.customers.get(5)

        assert path_of(shopify) == "/customers/5.json"
        assert customer.full_name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_create_wraps_envelope(self, client, shopify):
        shopify.queue(201, {"product": {"id": 99, "title": "Mug"}})

        product = await client.products.create(Product(title="Mug", vendor="Acme"))

        assert shopify.last_request.method == "POST"
        assert path_of(shopify) == "/products.json"
        assert shopify.last_json() == {"product": {"title": "Mug", "vendor": "Acme"}}
        assert product.id == 99

    @pytest.mark.asyncio
    async def test_create_accepts_dict(self, client, shopify):
        shopify.queue(201, {"page": {"id": 3}})
        await client.pages.create({"title": "About"})
        assert shopify.last_json() == {"page": {"title": "About"}}

    @pytest.mark.asyncio
    async def test_update_uses_model_id(self, client, shopify):
        shopify.queue(200, {"product": {"id": 99, "title": "Big Mug"}})

        product = await client.products.update(Product(id=99, title="Big Mug"))

        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/products/99.json"
        assert shopify.last_json() == {"product": {"id": 99, "title": "Big Mug"}}
        assert product.title == "Big Mug"

    @pytest.mark.asyncio
    async def test_update_without_id_raises(self, client, shopify):
        with pytest.raises(ValueError):
            await client.products.update(Product(title="No id"))
        assert shopify.requests == []

    @pytest.mark.asyncio
    async def test_delete(self, client, shopify):
        shopify.queue(200, {})
        assert await client.webhooks.delete(4) is None
        assert shopify.last_request.method == "DELETE"
        assert path_of(shopify) == "/webhooks/4.json"

    @pytest.mark.asyncio
    async def test_unknown_fields_are_kept(self, client, shopify):
        shopify.queue(200, {"product": {"id": 1, "brand_new_field": "x"}})

        product = await client.products.get(1)
        shopify.queue(200, {"product": {"id": 1}})
        await client.products.update(product)

        assert shopify.last_json()["product"]["brand_new_field"] == "x"

    @pytest.mark.asyncio
    async def test_missing_envelope_gives_empty_model(self, client, shopify):
        shopify.queue(200, {})
        product = await client.products.get(1)
        assert product.id is None


class TestEnvelopesAndPaths:
    """Resource paths and envelope keys"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "attribute,path,plural",
        [
            ("custom_collections", "/custom_collections.json", "custom_collections"),
            ("smart_collections", "/smart_collections.json", "smart_collections"),
            ("collects", "/collects.json", "collects"),
            ("draft_orders", "/draft_orders.json", "draft_orders"),
            ("abandoned_checkouts", "/checkouts.json", "checkouts"),
            ("metafields", "/metafields.json", "metafields"),
            ("blogs", "/blogs.json", "blogs"),
            ("redirects", "/redirects.json", "redirects"),
            ("script_tags", "/script_tags.json", "script_tags"),
            ("themes", "/themes.json", "themes"),
            ("locations", "/locations.json", "locations"),
            ("inventory_items", "/inventory_items.json", "inventory_items"),
            ("inventory_levels", "/inventory_levels.json", "inventory_levels"),
            ("price_rules", "/price_rules.json", "price_rules"),
            ("gift_cards", "/gift_cards.json", "gift_cards"),
            ("application_charges", "/application_charges.json", "application_charges"),
            (
                "recurring_application_charges",
                "/recurring_application_charges.json",
                "recurring_application_charges",
            ),
            ("carrier_services", "/carrier_services.json", "carrier_services"),
            ("fulfillment_services", "/fulfillment_services.json", "fulfillment_services"),
            ("shipping_zones", "/shipping_zones.json", "shipping_zones"),
            ("storefront_access_tokens", "/storefront_access_tokens.json", "storefront_access_tokens"),
            ("payouts", "/shopify_payments/payouts.json", "payouts"),
            ("product_listings", "/product_listings.json", "product_listings"),
        ],
    )
    async def test_list_paths(self, client, shopify, attribute, path, plural):
        shopify.queue(200, {plural: [{"id": 1}]})

        items = await getattr(client, attribute).list()

        assert path_of(shopify) == path
        assert len(items) == 1

    @pytest.mark.asyncio
    async def test_shop(self, client, shopify):
        shopify.queue(200, {"shop": {"id": 1, "name": "Test Shop", "currency": "USD"}})
        shop = await client.shop.get()
        assert path_of(shopify) == "/shop.json"
        assert shop.currency == "USD"

    @pytest.mark.asyncio
    async def test_access_scopes_unversioned(self, client, shopify):
        shopify.queue(200, {"access_scopes": [{"handle": "read_products"}, {"handle": "write_orders"}]})

        scopes = await client.access_scopes.list()

        assert shopify.last_request.url.path == "/admin/oauth/access_scopes.json"
        assert [s.handle for s in scopes] == ["read_products", "write_orders"]

    @pytest.mark.asyncio
    async def test_payout_dates(self, client, shopify):
        shopify.queue(200, {"payout": {"id": 1, "date": "2024-03-01", "amount": "41.90", "status": "paid"}})

        payout = await client.payouts.get(1)

        assert path_of(shopify) == "/shopify_payments/payouts/1.json"
        assert payout.date.isoformat() == "2024-03-01"
        assert payout.amount == Decimal("41.90")


class TestProducts:
    """Variants, images and product listings"""

    @pytest.mark.asyncio
    async def test_bound_variants(self, client, shopify):
        variants = client.products.variants(1)

        shopify.queue(200, {"variants": [{"id": 10}]})
        await variants.list()
        assert path_of(shopify) == "/products/1/variants.json"

        shopify.queue(200, {"count": 2})
        assert await variants.count() == 2
        assert path_of(shopify) == "/products/1/variants/count.json"

        shopify.queue(201, {"variant": {"id": 11}})
        await variants.create(Variant(option1="Blue", price=Decimal("9.50")))
        assert path_of(shopify) == "/products/1/variants.json"
        assert shopify.last_json() == {"variant": {"option1": "Blue", "price": "9.50"}}

        shopify.queue(200, {})
        await variants.delete(11)
        assert path_of(shopify) == "/products/1/variants/11.json"

    @pytest.mark.asyncio
    async def test_unbound_variants(self, client, shopify):
        shopify.queue(200, {"variant": {"id": 10, "sku": "SKU-1"}})
        variant = await client.variants.get(10)
        assert path_of(shopify) == "/variants/10.json"

        shopify.queue(200, {"variant": {"id": 10}})
        await client.variants.update(variant)
        assert path_of(shopify) == "/variants/10.json"

        with pytest.raises(ValueError):
            await client.variants.list()

    @pytest.mark.asyncio
    async def test_images(self, client, shopify):
        shopify.queue(200, {"images": [{"id": 2, "src": "https://cdn/x.png"}]})
        images = await client.products.images(1).list()
        assert path_of(shopify) == "/products/1/images.json"
        assert images[0].src == "https://cdn/x.png"

    @pytest.mark.asyncio
    async def test_product_listing_ids_and_publish(self, client, shopify):
        shopify.queue(200, {"product_ids": [1, 2]})
        assert await client.product_listings.product_ids() == [1, 2]
        assert path_of(shopify) == "/product_listings/product_ids.json"

        shopify.queue(200, {"product_listing": {"product_id": 5}})
        listing = await client.product_listings.publish(5)
        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/product_listings/5.json"
        assert shopify.last_json() == {"product_listing": {"product_id": 5}}
        assert listing.product_id == 5


class TestMetafields:
    """Metafields bound to owners"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "attribute,owner_path",
        [
            ("products", "/products/1/metafields.json"),
            ("variants", "/variants/1/metafields.json"),
            ("customers", "/customers/1/metafields.json"),
            ("orders", "/orders/1/metafields.json"),
            ("draft_orders", "/draft_orders/1/metafields.json"),
            ("pages", "/pages/1/metafields.json"),
            ("blogs", "/blogs/1/metafields.json"),
            ("custom_collections", "/collections/1/metafields.json"),
            ("smart_collections", "/collections/1/metafields.json"),
        ],
    )
    async def test_owner_paths(self, client, shopify, attribute, owner_path):
        shopify.queue(200, {"metafields": [{"id": 9, "namespace": "custom", "key": "k", "value": 3}]})

        metafields = await getattr(client, attribute).metafields(1).list()

        assert path_of(shopify) == owner_path
        assert metafields[0].value == 3

    @pytest.mark.asyncio
    async def test_create_owned_metafield(self, client, shopify):
        shopify.queue(201, {"metafield": {"id": 9}})
        await client.products.metafields(1).create(
            Metafield(namespace="custom", key="color", value="red", type="single_line_text_field")
        )
        assert path_of(shopify) == "/products/1/metafields.json"
        assert shopify.last_json() == {
            "metafield": {
                "namespace": "custom",
                "key": "color",
                "value": "red",
                "type": "single_line_text_field",
            }
        }


class TestCollectionsAndCustomers:

    @pytest.mark.asyncio
    async def test_smart_collection_rules(self, client, shopify):
        shopify.queue(201, {"smart_collection": {"id": 3, "rules": [{"column": "vendor", "relation": "equals", "condition": "Acme"}]}})

        collection = await client.smart_collections.create(
            SmartCollection(title="Acme", rules=[{"column": "vendor", "relation": "equals", "condition": "Acme"}])
        )

        assert collection.rules[0].condition == "Acme"

    @pytest.mark.asyncio
    async def test_smart_collection_set_order(self, client, shopify):
        shopify.queue(200, {})
        await client.smart_collections.set_order(3, product_ids=[9, 8], sort_order="manual")

        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/smart_collections/3/order.json"
        assert shopify.last_request.url.params.get_list("products[]") == ["9", "8"]
        assert shopify.last_request.url.params["sort_order"] == "manual"

    @pytest.mark.asyncio
    async def test_customer_search_orders_tags(self, client, shopify):
        shopify.queue(200, {"customers": [{"id": 1, "email": "a@example.com"}]})
        customers = await client.customers.search({"query": "email:a@example.com"})
        assert path_of(shopify) == "/customers/search.json"
        assert shopify.last_request.url.params["query"] == "email:a@example.com"
        assert customers[0].email == "a@example.com"

        shopify.queue(200, {"orders": [{"id": 100}]})
        orders = await client.customers.list_orders(1)
        assert path_of(shopify) == "/customers/1/orders.json"
        assert orders[0].id == 100

        shopify.queue(200, {"tags": ["vip", "wholesale"]})
        assert await client.customers.list_tags() == ["vip", "wholesale"]
        assert path_of(shopify) == "/customers/tags.json"

    @pytest.mark.asyncio
    async def test_customer_addresses(self, client, shopify):
        addresses = client.customers.addresses(1)

        shopify.queue(200, {"addresses": [{"id": 2, "city": "Ottawa"}]})
        assert (await addresses.list())[0].city == "Ottawa"
        assert path_of(shopify) == "/customers/1/addresses.json"

        shopify.queue(201, {"customer_address": {"id": 3}})
        await addresses.create({"address1": "1 Main St"})
        assert shopify.last_json() == {"customer_address": {"address1": "1 Main St"}}

        shopify.queue(200, {"customer_address": {"id": 3, "default": True}})
        address = await addresses.set_default(3)
        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/customers/1/addresses/3/default.json"
        assert address.default is True


class TestOrders:
    """Order actions and order sub-resources"""

    @pytest.mark.asyncio
    async def test_cancel_posts_bare_options(self, client, shopify):
        shopify.queue(200, {"order": {"id": 1, "cancel_reason": "customer"}})

        order = await client.orders.cancel(1, OrderCancelOptions(reason="customer", email=True))

        assert shopify.last_request.method == "POST"
        assert path_of(shopify) == "/orders/1/cancel.json"
        assert shopify.last_json() == {"reason": "customer", "email": True}
        assert order.cancel_reason == "customer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["close", "open"])
    async def test_close_and_open(self, client, shopify, action):
        shopify.queue(200, {"order": {"id": 1}})
        await getattr(client.orders, action)(1)
        assert path_of(shopify) == f"/orders/1/{action}.json"
        assert shopify.last_request.content == b""

    @pytest.mark.asyncio
    async def test_fulfillments(self, client, shopify):
        fulfillments = client.orders.fulfillments(1)

        shopify.queue(200, {"fulfillments": [{"id": 4, "tracking_number": "1Z"}]})
        assert (await fulfillments.list())[0].tracking_number == "1Z"
        assert path_of(shopify) == "/orders/1/fulfillments.json"

        for method, action in [("complete", "complete"), ("transition", "open"), ("cancel", "cancel")]:
            shopify.queue(200, {"fulfillment": {"id": 4}})
            await getattr(fulfillments, method)(4)
            assert shopify.last_request.method == "POST"
            assert path_of(shopify) == f"/orders/1/fulfillments/4/{action}.json"

    @pytest.mark.asyncio
    async def test_fulfillment_orders(self, client, shopify):
        fulfillment_orders = client.orders.fulfillment_orders(1)

        shopify.queue(200, {"fulfillment_orders": [{"id": 7, "status": "open"}]})
        assert (await fulfillment_orders.list())[0].status == "open"
        assert path_of(shopify) == "/orders/1/fulfillment_orders.json"

        request = FulfillmentRequest(
            notify_customer=True,
            tracking_info=TrackingInfo(number="1Z", company="UPS"),
            line_items_by_fulfillment_order=[LineItemsByFulfillmentOrder(fulfillment_order_id=7)],
        )
        shopify.queue(201, {"fulfillment": {"id": 8}})
        fulfillment = await fulfillment_orders.create_fulfillment(request)
        assert path_of(shopify) == "/fulfillments.json"
        assert shopify.last_json() == {
            "fulfillment": {
                "notify_customer": True,
                "tracking_info": {"number": "1Z", "company": "UPS"},
                "line_items_by_fulfillment_order": [{"fulfillment_order_id": 7}],
            }
        }
        assert fulfillment.id == 8

        shopify.queue(200, {"fulfillment": {"id": 8}})
        await fulfillment_orders.update_tracking(8, {"tracking_info": {"number": "2Z"}})
        assert path_of(shopify) == "/fulfillments/8/update_tracking.json"

    @pytest.mark.asyncio
    async def test_transactions_and_risks(self, client, shopify):
        shopify.queue(200, {"transactions": [{"id": 1, "amount": "10.00", "kind": "sale"}]})
        transactions = await client.orders.transactions(1).list()
        assert path_of(shopify) == "/orders/1/transactions.json"
        assert transactions[0].amount == Decimal("10.00")

        shopify.queue(200, {"risk": {"id": 2, "recommendation": "cancel"}})
        risk = await client.orders.risks(1).get(2)
        assert path_of(shopify) == "/orders/1/risks/2.json"
        assert risk.recommendation == "cancel"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payment_pending,expected", [(True, "true"), (False, "false")])
    async def test_draft_order_complete(self, client, shopify, payment_pending, expected):
        shopify.queue(200, {"draft_order": {"id": 1, "status": "completed"}})

        draft = await client.draft_orders.complete(1, payment_pending=payment_pending)

        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/draft_orders/1/complete.json"
        assert shopify.last_request.url.params["payment_pending"] == expected
        assert shopify.last_request.content == b""
        assert draft.status == "completed"

    @pytest.mark.asyncio
    async def test_draft_order_send_invoice(self, client, shopify):
        shopify.queue(201, {"draft_order_invoice": {"to": "a@example.com", "from": "shop@example.com"}})

        invoice = await client.draft_orders.send_invoice(
            1, DraftOrderInvoice(to="a@example.com", from_="shop@example.com", subject="Invoice")
        )

        assert path_of(shopify) == "/draft_orders/1/send_invoice.json"
        assert shopify.last_json() == {
            "draft_order_invoice": {"to": "a@example.com", "from": "shop@example.com", "subject": "Invoice"}
        }
        assert invoice.from_ == "shop@example.com"


class TestThemesAndInventory:
    """Key-addressed assets and pair-addressed inventory levels"""

    @pytest.mark.asyncio
    async def test_assets(self, client, shopify):
        assets = client.themes.assets(3)

        shopify.queue(200, {"asset": {"key": "templates/index.liquid", "value": "<h1>"}})
        asset = await assets.get("templates/index.liquid")
        assert path_of(shopify) == "/themes/3/assets.json"
        assert shopify.last_request.url.params["asset[key]"] == "templates/index.liquid"
        assert shopify.last_request.url.params["theme_id"] == "3"
        assert asset.value == "<h1>"

        shopify.queue(200, {"asset": {"key": "templates/index.liquid"}})
        await assets.update(Asset(key="templates/index.liquid", value="<h2>"))
        assert shopify.last_request.method == "PUT"
        assert shopify.last_json() == {"asset": {"key": "templates/index.liquid", "value": "<h2>"}}

        shopify.queue(200, {})
        await assets.delete("templates/index.liquid")
        assert shopify.last_request.method == "DELETE"
        assert shopify.last_request.url.params["asset[key]"] == "templates/index.liquid"

    @pytest.mark.asyncio
    async def test_inventory_level_adjust(self, client, shopify):
        shopify.queue(200, {"inventory_level": {"inventory_item_id": 1, "location_id": 2, "available": 5}})

        level = await client.inventory_levels.adjust(
            InventoryLevelAdjustOptions(inventory_item_id=1, location_id=2, available_adjustment=-3)
        )

        assert shopify.last_request.method == "POST"
        assert path_of(shopify) == "/inventory_levels/adjust.json"
        assert shopify.last_json() == {"inventory_item_id": 1, "location_id": 2, "available_adjustment": -3}
        assert level.available == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["connect", "set"])
    async def test_inventory_level_connect_and_set(self, client, shopify, action):
        shopify.queue(200, {"inventory_level": {"available": 1}})
        body = {"inventory_item_id": 1, "location_id": 2, "available": 1}
        await getattr(client.inventory_levels, action)(body)
        assert path_of(shopify) == f"/inventory_levels/{action}.json"
        assert shopify.last_json() == body

    @pytest.mark.asyncio
    async def test_inventory_level_delete(self, client, shopify):
        shopify.queue(204)
        await client.inventory_levels.delete(1, 2)

        assert shopify.last_request.method == "DELETE"
        assert path_of(shopify) == "/inventory_levels.json"
        assert shopify.last_request.url.params["inventory_item_id"] == "1"
        assert shopify.last_request.url.params["location_id"] == "2"

    @pytest.mark.asyncio
    async def test_location_inventory_levels(self, client, shopify):
        shopify.queue(200, {"inventory_levels": [{"inventory_item_id": 1, "available": 4}]})
        levels = await client.locations.inventory_levels(2)
        assert path_of(shopify) == "/locations/2/inventory_levels.json"
        assert levels[0].available == 4


class TestDiscountsAndBilling:

    @pytest.mark.asyncio
    async def test_discount_codes(self, client, shopify):
        shopify.queue(201, {"discount_code": {"id": 1, "code": "SAVE10"}})
        code = await client.price_rules.discount_codes(5).create({"code": "SAVE10"})
        assert path_of(shopify) == "/price_rules/5/discount_codes.json"
        assert code.code == "SAVE10"

    @pytest.mark.asyncio
    async def test_gift_card_disable_and_search(self, client, shopify):
        shopify.queue(200, {"gift_card": {"id": 1, "disabled_at": "2024-01-01T00:00:00-05:00"}})
        card = await client.gift_cards.disable(1)
        assert shopify.last_request.method == "POST"
        assert path_of(shopify) == "/gift_cards/1/disable.json"
        assert shopify.last_json() == {"gift_card": {"id": 1}}
        assert card.disabled_at is not None

        shopify.queue(200, {"gift_cards": [{"id": 1, "last_characters": "mnop"}]})
        cards = await client.gift_cards.search({"query": "last_characters:mnop"})
        assert path_of(shopify) == "/gift_cards/search.json"
        assert cards[0].last_characters == "mnop"

    @pytest.mark.asyncio
    async def test_application_charge_activate(self, client, shopify):
        shopify.queue(200, {"application_charge": {"id": 3, "status": "active"}})
        charge = await client.application_charges.activate({"id": 3, "status": "accepted"})
        assert path_of(shopify) == "/application_charges/3/activate.json"
        assert shopify.last_json() == {"application_charge": {"id": 3, "status": "accepted"}}
        assert charge.status == "active"

    @pytest.mark.asyncio
    async def test_recurring_charge_capped_amount(self, client, shopify):
        shopify.queue(200, {"recurring_application_charge": {"id": 4, "capped_amount": "200.00"}})

        charge = await client.recurring_application_charges.update_capped_amount(4, Decimal("200.00"))

        assert shopify.last_request.method == "PUT"
        assert path_of(shopify) == "/recurring_application_charges/4/customize.json"
        assert shopify.last_request.url.params["recurring_application_charge[capped_amount]"] == "200.00"
        assert charge.capped_amount == Decimal("200.00")

    @pytest.mark.asyncio
    async def test_usage_charges(self, client, shopify):
        shopify.queue(201, {"usage_charge": {"id": 9, "price": "1.00"}})
        usage = await client.recurring_application_charges.usage_charges(4).create(
            {"description": "100 emails", "price": "1.00"}
        )
        assert path_of(shopify) == "/recurring_application_charges/4/usage_charges.json"
        assert usage.price == Decimal("1.00")


class TestOptionQueries:
    """Typed options are encoded into the query string of resource calls"""

    @pytest.mark.asyncio
    async def test_count_options(self, client, shopify):
        shopify.queue(200, {"count": 2})

        await client.products.count(
            CountOptions(created_at_min=datetime(2024, 1, 1, tzinfo=timezone.utc))
        )

        assert dict(shopify.last_request.url.params) == {"created_at_min": "2024-01-01T00:00:00+00:00"}

    @pytest.mark.asyncio
    async def test_inventory_level_ids_are_comma_joined(self, client, shopify):
        shopify.queue(200, {"inventory_levels": [{"inventory_item_id": 808950810, "location_id": 655441491}]})

        levels = await client.inventory_levels.list(
            InventoryLevelListOptions(inventory_item_ids=[808950810, 39072856], location_ids=[655441491])
        )

        params = shopify.last_request.url.params
        assert path_of(shopify) == "/inventory_levels.json"
        assert params["inventory_item_ids"] == "808950810,39072856"
        assert params["location_ids"] == "655441491"
        assert levels[0].location_id == 655441491

    @pytest.mark.asyncio
    async def test_payout_dates_and_status(self, client, shopify):
        shopify.queue(200, {"payouts": []})

        await client.payouts.list(
            PayoutsListOptions(date_min=date(2024, 1, 1), date_max=date(2024, 1, 31), status=PayoutStatus.PAID)
        )

        assert path_of(shopify) == "/shopify_payments/payouts.json"
        assert dict(shopify.last_request.url.params) == {
            "date_min": "2024-01-01",
            "date_max": "2024-01-31",
            "status": "paid",
        }

    @pytest.mark.asyncio
    async def test_draft_order_options(self, client, shopify):
        shopify.queue(200, {"draft_orders": []})

        await client.draft_orders.list(DraftOrderListOptions(ids=[1, 2], status="open", limit=5))

        assert dict(shopify.last_request.url.params) == {"ids": "1,2", "status": "open", "limit": "5"}

    @pytest.mark.asyncio
    async def test_customer_search_options(self, client, shopify):
        shopify.queue(200, {"customers": []})

        await client.customers.search(CustomerSearchOptions(query="email:ada@example.com", order="updated_at DESC"))

        assert path_of(shopify) == "/customers/search.json"
        assert dict(shopify.last_request.url.params) == {
            "query": "email:ada@example.com",
            "order": "updated_at DESC",
        }

    @pytest.mark.asyncio
    async def test_content_and_webhook_options(self, client, shopify):
        shopify.queue(200, {"themes": []})
        await client.themes.list(ThemeListOptions(role="main"))
        assert dict(shopify.last_request.url.params) == {"role": "main"}

        shopify.queue(200, {"webhooks": []})
        await client.webhooks.list(WebhookListOptions(topic="orders/create", limit=10))
        assert dict(shopify.last_request.url.params) == {"limit": "10", "topic": "orders/create"}

        shopify.queue(200, {"script_tags": []})
        await client.script_tags.list(ScriptTagListOptions(src="https://example.com/app.js"))
        assert dict(shopify.last_request.url.params) == {"src": "https://example.com/app.js"}
