import asyncio
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.core.errors import ValidationFailure
from app.models.activity import Activity
from app.models.inventory_request import InventoryRequest
from app.models.order import OrderItem, OrderStatus
from app.models.product import ProductStatus
from app.services import client_service, expense_service, order_service, product_service, request_service

JAN_15 = datetime(2025, 1, 15, tzinfo=timezone.utc)


async def _client(name="TechCorp Solutions"):
    return await client_service.create_client({"name": name, "email": "contact@techcorp.com"})


class TestProducts:
    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, db, product_data):
        data = product_data(description="Blue widget")
        created = await product_service.create_product(dict(data))

        fetched = await product_service.get_product(created.id)

        assert fetched.id == created.id
        for field, value in data.items():
            assert getattr(fetched, field) == value
        assert fetched.status == ProductStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_create_records_activity(self, db, product_data):
        product = await product_service.create_product(product_data(name="Widget A"), user_id=4)

        entry = await Activity.get(related_type="product", related_id=product.id)
        assert entry.type == "inventory"
        assert entry.description == "Product Widget A added to inventory"
        assert entry.user_id == 4

    @pytest.mark.asyncio
    async def test_ids_increase(self, db, product_data):
        first = await product_service.create_product(product_data(sku="A"))
        second = await product_service.create_product(product_data(sku="B"))
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_duplicate_sku_rejected(self, db, product_data):
        await product_service.create_product(product_data(sku="DUP"))
        with pytest.raises(ValidationFailure) as excinfo:
            await product_service.create_product(product_data(sku="DUP", name="Other"))
        assert excinfo.value.field == "sku"
        assert len(await product_service.list_products()) == 1

    @pytest.mark.asyncio
    async def test_missing_id_is_not_an_error(self, db):
        assert await product_service.get_product(999) is None
        assert await product_service.update_product(999, {"name": "x"}) is None
        assert await product_service.delete_product(999) is False

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, db, product_data):
        product = await product_service.create_product(product_data(quantity=40))

        updated = await product_service.update_product(product.id, {"quantity": 12, "price": Decimal("11.50")})

        assert updated.quantity == 12
        assert updated.price == Decimal("11.50")
        assert updated.name == "Widget A"
        assert (await product_service.get_product(product.id)).quantity == 12

        entries = await Activity.filter(related_type="product", related_id=product.id).order_by("id")
        assert [(e.type, e.description) for e in entries] == [
            ("inventory", "Product Widget A added to inventory"),
            ("inventory", "Product Widget A updated"),
        ]

    @pytest.mark.asyncio
    async def test_update_to_taken_sku_rejected(self, db, product_data):
        await product_service.create_product(product_data(sku="A"))
        b = await product_service.create_product(product_data(sku="B"))
        with pytest.raises(ValidationFailure):
            await product_service.update_product(b.id, {"sku": "A"})
        assert await Activity.filter(description__endswith="updated").count() == 0

    @pytest.mark.asyncio
    async def test_delete(self, db, product_data):
        product = await product_service.create_product(product_data())
        assert await product_service.delete_product(product.id, user_id=3) is True

        entry = (await Activity.filter(related_type="product", related_id=product.id).order_by("-id"))[0]
        assert entry.type == "inventory"
        assert entry.description == "Product Widget A deleted from inventory"
        assert entry.user_id == 3

        assert await product_service.get_product(product.id) is None
        assert await product_service.delete_product(product.id) is False

    @pytest.mark.asyncio
    async def test_delete_keeps_requests_as_ad_hoc(self, db, user, product_data):
        product = await product_service.create_product(product_data())
        request = await request_service.submit("Widget A", 5, user_id=user.id, product_id=product.id)

        await product_service.delete_product(product.id)

        request = await InventoryRequest.get(id=request.id)
        assert request.product_id is None
        assert request.product_name == "Widget A"

    @pytest.mark.asyncio
    async def test_delete_sold_product_rejected(self, db, product_data):
        product = await product_service.create_product(product_data())
        client = await _client()
        await order_service.create_order({
            "client_id": client.id, "date": JAN_15,
            "items": [{"product_id": product.id, "quantity": 1, "price": Decimal("10.00")}],
        })
        with pytest.raises(ValidationFailure):
            await product_service.delete_product(product.id)


class TestOrderItems:
    @pytest.mark.asyncio
    async def test_item_decrements_stock(self, db, product_data):
        product = await product_service.create_product(product_data(quantity=20))
        order = await order_service.create_order({"client_id": (await _client()).id, "date": JAN_15, "total": Decimal("0")})

        await order_service.create_order_item({
            "order_id": order.id, "product_id": product.id, "quantity": 7, "price": Decimal("10.00"),
        })

        assert (await product_service.get_product(product.id)).quantity == 13

    @pytest.mark.asyncio
    async def test_stock_clamped_at_zero(self, db, product_data):
        product = await product_service.create_product(product_data(quantity=5))
        order = await order_service.create_order({"client_id": (await _client()).id, "date": JAN_15, "total": Decimal("0")})

        item = await order_service.create_order_item({
            "order_id": order.id, "product_id": product.id, "quantity": 8, "price": Decimal("10.00"),
        })

        assert item.quantity == 8
        assert (await product_service.get_product(product.id)).quantity == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("start,sold", [
        (10, [3, 3, 3]),
        (10, [4, 4, 4]),
        (0, [1]),
        (50, [10, 25, 30, 1]),
    ])
    async def test_sequence_of_items(self, db, product_data, start, sold):
        product = await product_service.create_product(product_data(quantity=start))
        order = await order_service.create_order({"client_id": (await _client()).id, "date": JAN_15, "total": Decimal("0")})

        for qty in sold:
            await order_service.create_order_item({
                "order_id": order.id, "product_id": product.id, "quantity": qty, "price": Decimal("1.00"),
            })

        assert (await product_service.get_product(product.id)).quantity == max(0, start - sum(sold))

    @pytest.mark.asyncio
    async def test_concurrent_items_each_take_stock(self, db, product_data):
        product = await product_service.create_product(product_data(quantity=10))
        order = await order_service.create_order({"client_id": (await _client()).id, "date": JAN_15, "total": Decimal("0")})

        await asyncio.gather(*(
            order_service.create_order_item({
                "order_id": order.id, "product_id": product.id, "quantity": qty, "price": Decimal("1.00"),
            })
            for qty in (3, 5)
        ))

        assert (await product_service.get_product(product.id)).quantity == 2
        assert await OrderItem.filter(order_id=order.id).count() == 2

    @pytest.mark.asyncio
    async def test_unknown_product_rejected_before_writing(self, db):
        order = await order_service.create_order({"client_id": (await _client()).id, "date": JAN_15, "total": Decimal("0")})

        with pytest.raises(ValidationFailure) as excinfo:
            await order_service.create_order_item({
                "order_id": order.id, "product_id": 404, "quantity": 1, "price": Decimal("1.00"),
            })

        assert excinfo.value.field == "product_id"
        assert await OrderItem.filter(order_id=order.id).count() == 0

    @pytest.mark.asyncio
    async def test_unknown_order_rejected(self, db, product_data):
        product = await product_service.create_product(product_data())
        with pytest.raises(ValidationFailure):
            await order_service.create_order_item({
                "order_id": 404, "product_id": product.id, "quantity": 1, "price": Decimal("1.00"),
            })
        assert (await product_service.get_product(product.id)).quantity == 100


class TestOrders:
    @pytest.mark.asyncio
    async def test_create_with_items_computes_total(self, db, product_data):
        mouse = await product_service.create_product(product_data(name="Mouse", sku="WM001", quantity=25))
        cable = await product_service.create_product(product_data(name="Cable", sku="UC002", quantity=8))
        client = await _client()

        order = await order_service.create_order({
            "client_id": client.id,
            "date": JAN_15,
            "items": [
                {"product_id": mouse.id, "quantity": 2, "price": Decimal("29.99")},
                {"product_id": cable.id, "quantity": 3, "price": Decimal("12.99")},
            ],
        }, user_id=1)

        assert order.total == Decimal("98.95")
        assert len(await order_service.list_order_items(order.id)) == 2
        assert (await product_service.get_product(mouse.id)).quantity == 23
        assert (await product_service.get_product(cable.id)).quantity == 5

        entry = await Activity.get(related_type="order", related_id=order.id)
        assert entry.type == "sale"
        assert entry.description == f"New order #{order.id} created with total $98.95"

    @pytest.mark.asyncio
    async def test_unknown_client_rejected(self, db):
        with pytest.raises(ValidationFailure) as excinfo:
            await order_service.create_order({"client_id": 77, "date": JAN_15, "total": Decimal("5")})
        assert excinfo.value.field == "client_id"
        assert await order_service.list_orders() == []

    @pytest.mark.asyncio
    async def test_bad_item_rolls_back_whole_order(self, db, product_data):
        product = await product_service.create_product(product_data(quantity=10))
        client = await _client()

        with pytest.raises(ValidationFailure):
            await order_service.create_order({
                "client_id": client.id,
                "date": JAN_15,
                "items": [
                    {"product_id": product.id, "quantity": 4, "price": Decimal("1.00")},
                    {"product_id": 999, "quantity": 1, "price": Decimal("1.00")},
                ],
            })

        assert await order_service.list_orders() == []
        assert (await product_service.get_product(product.id)).quantity == 10

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db, product_data):
        product = await product_service.create_product(product_data())
        order = await order_service.create_order({
            "client_id": (await _client()).id,
            "date": JAN_15,
            "items": [{"product_id": product.id, "quantity": 1, "price": Decimal("10.00")}],
        })

        updated = await order_service.update_order(order.id, {"status": OrderStatus.COMPLETED})
        assert updated.status == OrderStatus.COMPLETED
        assert updated.total == Decimal("10.00")

        assert await order_service.delete_order(order.id) is True
        assert await order_service.get_order(order.id) is None
        assert await OrderItem.filter(order_id=order.id).count() == 0
        assert await order_service.delete_order(order.id) is False


class TestClientsAndExpenses:
    @pytest.mark.asyncio
    async def test_client_lifecycle(self, db):
        client = await _client("Digital Innovations")
        entry = await Activity.get(related_type="client", related_id=client.id)
        assert entry.description == "New client Digital Innovations registered"

        updated = await client_service.update_client(client.id, {"is_active": False, "phone": "(555) 987-6543"})
        assert updated.is_active is False
        assert updated.name == "Digital Innovations"

        assert await client_service.delete_client(client.id) is True
        assert await client_service.get_client(client.id) is None

    @pytest.mark.asyncio
    async def test_client_with_orders_cannot_be_deleted(self, db):
        client = await _client()
        await order_service.create_order({"client_id": client.id, "date": JAN_15, "total": Decimal("5")})
        with pytest.raises(ValidationFailure):
            await client_service.delete_client(client.id)

    @pytest.mark.asyncio
    async def test_expense_lifecycle(self, db):
        expense = await expense_service.create_expense({
            "category": "Rent", "amount": Decimal("2500.00"), "date": JAN_15,
        }, user_id=2)

        fetched = await expense_service.get_expense(expense.id)
        assert fetched.amount == Decimal("2500.00")
        assert fetched.description is None

        entry = await Activity.get(related_type="expense", related_id=expense.id)
        assert entry.type == "expense"
        assert entry.description == "New expense of $2500.00 for Rent"

        updated = await expense_service.update_expense(expense.id, {"amount": Decimal("2400.00")})
        assert updated.amount == Decimal("2400.00")
        assert await expense_service.update_expense(999, {"amount": Decimal("1")}) is None

        assert await expense_service.delete_expense(expense.id) is True
        assert await expense_service.delete_expense(expense.id) is False
