from enum import Enum
from tortoise import fields, models


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"


class Order(models.Model):
    id = fields.IntField(primary_key=True)
    # RESTRICT: a client with orders cannot be removed (checked in client_service first)
    client = fields.ForeignKeyField("models.Client", related_name="orders", on_delete=fields.RESTRICT)
    date = fields.DatetimeField()
    status = fields.CharEnumField(OrderStatus, default=OrderStatus.PENDING)
    total = fields.DecimalField(max_digits=14, decimal_places=2, default=0)

    class Meta:
        table = "orders"
        indexes = [
            ("status",),
            ("date",),
        ]


class OrderItem(models.Model):
    id = fields.IntField(primary_key=True)
    order = fields.ForeignKeyField("models.Order", related_name="items", on_delete=fields.CASCADE)
    product = fields.ForeignKeyField("models.Product", related_name="order_items", on_delete=fields.RESTRICT)
    quantity = fields.IntField()
    price = fields.DecimalField(max_digits=12, decimal_places=2) # Unit price at time of sale

    class Meta:
        table = "order_items"
        indexes = [
            ("order_id", "product_id"),
        ]
