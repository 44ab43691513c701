from tortoise import fields, models


class User(models.Model):
    id = fields.IntField(primary_key=True)
    username = fields.CharField(max_length=150, unique=True)
    # Whatever the caller hands over; the auth routes store a bcrypt hash
    password = fields.CharField(max_length=255)
    name = fields.CharField(max_length=255)
    role = fields.CharField(max_length=32, default="user")
    email = fields.CharField(max_length=255)

    class Meta:
        table = "users"
