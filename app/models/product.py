from enum import Enum
from tortoise import fields, models


class ProductStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Product(models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=255)
    sku = fields.CharField(max_length=64, unique=True)
    description = fields.TextField(null=True)
    category = fields.CharField(max_length=128)
    quantity = fields.IntField(default=0)
    min_quantity = fields.IntField(default=10) # Reorder threshold for low stock
    price = fields.DecimalField(max_digits=12, decimal_places=2)
    cost = fields.DecimalField(max_digits=12, decimal_places=2)
    status = fields.CharEnumField(ProductStatus, default=ProductStatus.ACTIVE)

    class Meta:
        table = "products"
        indexes = [
            ("category",),
            ("status",),
        ]
