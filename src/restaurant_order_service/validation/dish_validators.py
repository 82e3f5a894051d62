"""Validators specific to dish payloads."""

from restaurant_order_service.exceptions import ValidationError
from restaurant_order_service.validation.chain import RequestContext, is_number


def body_has_price(context: RequestContext) -> None:
    """Require a price in the payload.

    Unlike the other presence checks a price of zero counts as supplied, so a
    free dish can be created.
    """
    price = context.data.get("price")
    if price is None or price == "":
        raise ValidationError("A 'price' property is required.")
    context.values["price"] = price


def price_is_valid(context: RequestContext) -> None:
    """Creation price rule: any number greater than -1.

    Zero and fractional values down to (but excluding) -1 are accepted.
    """
    price = context.data.get("price")
    if not is_number(price):
        raise ValidationError("price must be a number.")
    if not price > -1:
        raise ValidationError("price cannot be less than 0.")
    context.values["price"] = price


def price_is_valid_for_update(context: RequestContext) -> None:
    """Update price rule: the accepted price must be a number greater than 0.

    Reads the value accepted earlier in the chain rather than the raw payload.
    """
    price = context.values.get("price")
    if not is_number(price) or price <= 0:
        raise ValidationError("price must be an integer greater than 0.")
