from tortoise import fields, models


class Activity(models.Model):
    """
    Append-only audit entry shown in the recent activity feed.
    Rows are written by activity_service.record and never updated or deleted.
    """
    id = fields.IntField(primary_key=True)
    type = fields.CharField(max_length=64) # e.g., 'inventory', 'sale', 'request'
    description = fields.TextField()
    timestamp = fields.DatetimeField(auto_now_add=True)
    user_id = fields.IntField(null=True)
    related_id = fields.IntField(null=True) # ID of the entity the entry talks about
    related_type = fields.CharField(max_length=64, null=True) # e.g., 'product', 'order'

    class Meta:
        table = "activities"
        indexes = [
            ("timestamp",),
        ]
