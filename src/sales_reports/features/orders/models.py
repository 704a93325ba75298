from tortoise import fields, models
from tortoise.validators import MinValueValidator
from ...common.models import money_field


class Order(models.Model):
    id = fields.IntField(primary_key=True)
    store: fields.ForeignKeyRelation["Store"] = fields.ForeignKeyField(
        "models.Store", related_name="orders", on_delete=fields.RESTRICT
    )
    total = money_field()
    order_date = fields.DatetimeField()
    delivery_time_minutes = fields.IntField(validators=[MinValueValidator(1)])
    status = fields.CharField(max_length=50, default="Delivered")
    item_count = fields.IntField(default=0)

    items: fields.ReverseRelation["OrderItem"]

    def __str__(self):
        return f"Order {self.id} - Store {self.store_id} - ${self.total:.2f} ({self.status})"

    class Meta:
        table = "orders"


class OrderItem(models.Model):
    id = fields.IntField(primary_key=True)
    order: fields.ForeignKeyRelation[Order] = fields.ForeignKeyField(
        "models.Order", related_name="items", on_delete=fields.CASCADE
    )
    product: fields.ForeignKeyRelation["Product"] = fields.ForeignKeyField(
        "models.Product", related_name="order_items", on_delete=fields.RESTRICT
    )
    quantity = fields.IntField(validators=[MinValueValidator(1)])
    line_total = money_field()

    def __str__(self):
        return f"{self.quantity} x product {self.product_id} for Order {self.order_id}"

    class Meta:
        table = "order_items"
