from tortoise import fields, models


class Expense(models.Model):
    id = fields.IntField(primary_key=True)
    category = fields.CharField(max_length=128)
    amount = fields.DecimalField(max_digits=14, decimal_places=2)
    date = fields.DatetimeField()
    description = fields.TextField(null=True)

    class Meta:
        table = "expenses"
        indexes = [
            ("category",),
            ("date",),
        ]
