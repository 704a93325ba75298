"""Shared model helpers.

Money is stored as a fixed-point decimal with two digits after the point.
`money_field` builds the Tortoise field for it and `to_money` normalises the
values that come back from the database (Decimal, float or string, depending
on the backend and on whether the value is an aggregate) to that same form."""

from decimal import ROUND_HALF_UP, Decimal

from tortoise import fields
from tortoise.validators import MinValueValidator

CENTS = Decimal("0.01")


def money_field(**kwargs) -> fields.DecimalField:
    return fields.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        **kwargs,
    )


def to_money(value) -> Decimal:
    """Round any numeric value to cents (half up). None becomes 0.00."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def average(total, count: int) -> Decimal:
    """Average of an exact total over `count` rows, rounded to cents. 0.00 for no rows."""
    if not count:
        return Decimal("0.00")
    return (Decimal(str(total)) / count).quantize(CENTS, rounding=ROUND_HALF_UP)
