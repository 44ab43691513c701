from enum import Enum
from tortoise import fields, models


class RequestStatus(str, Enum):
    PENDING = "pending"  # Initial state
    APPROVED = "approved" # Terminal
    REJECTED = "rejected" # Terminal


class RequestPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class InventoryRequest(models.Model):
    id = fields.IntField(primary_key=True)
    # Optional: ad-hoc requests name an item that is not in the catalogue yet
    product = fields.ForeignKeyField(
        "models.Product", related_name="inventory_requests", null=True, on_delete=fields.SET_NULL
    )
    product_name = fields.CharField(max_length=255)
    quantity = fields.IntField()
    priority = fields.CharEnumField(RequestPriority, default=RequestPriority.MEDIUM)
    notes = fields.TextField(null=True)
    status = fields.CharEnumField(RequestStatus, default=RequestStatus.PENDING)
    user = fields.ForeignKeyField("models.User", related_name="inventory_requests", on_delete=fields.RESTRICT)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "inventory_requests"
        indexes = [
            ("status",),
            ("status", "created_at"),
        ]
