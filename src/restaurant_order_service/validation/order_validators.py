"""Validators specific to order payloads."""

from restaurant_order_service.exceptions import ValidationError
from restaurant_order_service.models.order_models import OrderStatusEnum
from restaurant_order_service.validation.chain import RequestContext, is_number


def status_is_valid(context: RequestContext) -> None:
    """Require the accepted status to be exactly one of the enum values."""
    status = context.values.get("status")
    if status not in OrderStatusEnum.values():
        raise ValidationError(
            "status property must be valid string: "
            "'pending', 'preparing', 'out-for-delivery', or 'delivered'"
        )


def dishes_is_non_empty_list(context: RequestContext) -> None:
    dishes = context.values.get("dishes")
    if not isinstance(dishes, list) or len(dishes) == 0:
        raise ValidationError("invalid dishes property: dishes property must be non-empty array")


def dish_quantities_are_valid(context: RequestContext) -> None:
    """Require every line item to carry a positive integer quantity.

    The first invalid line item halts the chain; later items are not checked.
    The error names the item by its dish id, or by its position when it has none.
    """
    for index, line_item in enumerate(context.values["dishes"]):
        if not isinstance(line_item, dict):
            line_item = {}
        quantity = line_item.get("quantity")
        if not is_number(quantity) or not isinstance(quantity, int) or quantity <= 0:
            label = line_item.get("id") or index
            raise ValidationError(
                f"dish {label} must have a quantity that is an integer greater than 0"
            )
