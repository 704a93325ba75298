"""Data models for the store network and the product menu."""

from tortoise import fields, models
from ...common.models import money_field


class Store(models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=255)
    location = fields.CharField(max_length=255)
    manager = fields.CharField(max_length=255)
    opened_date = fields.DateField()

    orders: fields.ReverseRelation["Order"]  # Defined in the orders feature

    def __str__(self):
        return f"{self.name} ({self.location})"

    class Meta:
        table = "stores"


class Product(models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=255)
    category = fields.CharField(max_length=100)
    price = money_field()

    order_items: fields.ReverseRelation["OrderItem"]

    def __str__(self):
        return f"{self.name} ({self.category}, ${self.price:.2f})"

    class Meta:
        table = "products"
