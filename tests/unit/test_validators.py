"""Unit tests for dish and order field validators."""

import pytest

from restaurant_order_service.exceptions import ValidationError
from restaurant_order_service.validation.chain import RequestContext
from restaurant_order_service.validation.dish_validators import (
    body_has_price,
    price_is_valid,
    price_is_valid_for_update,
)
from restaurant_order_service.validation.order_validators import (
    dish_quantities_are_valid,
    dishes_is_non_empty_list,
    status_is_valid,
)


@pytest.mark.unit
class TestDishPriceValidators:
    """Tests for the dish price validators."""

    @pytest.mark.parametrize("price", [0, 1, 12.5, -0.5, -0.99])
    def test_presence_accepts_any_supplied_price(self, price: float) -> None:
        """Test that zero counts as a supplied price."""
        context = RequestContext(data={"price": price})

        body_has_price(context)

        assert context.values["price"] == price

    @pytest.mark.parametrize("data", [{}, {"price": None}, {"price": ""}])
    def test_presence_rejects_missing_price(self, data: dict) -> None:
        with pytest.raises(ValidationError, match="A 'price' property is required."):
            body_has_price(RequestContext(data=data))

    @pytest.mark.parametrize("price", [0, 3, -0.5])
    def test_creation_rule_accepts_greater_than_minus_one(self, price: float) -> None:
        """Test the creation rule lets everything above -1 through, fractions included."""
        price_is_valid(RequestContext(data={"price": price}))

    @pytest.mark.parametrize("price", [-1, -1.5, -100])
    def test_creation_rule_rejects_minus_one_and_below(self, price: float) -> None:
        with pytest.raises(ValidationError, match="price cannot be less than 0."):
            price_is_valid(RequestContext(data={"price": price}))

    @pytest.mark.parametrize("price", ["17", "abc", True, [5]])
    def test_creation_rule_rejects_non_numbers(self, price: object) -> None:
        with pytest.raises(ValidationError, match="price must be a number."):
            price_is_valid(RequestContext(data={"price": price}))

    @pytest.mark.parametrize("price", [float("inf"), float("nan")])
    def test_non_finite_price_is_rejected_on_create_and_update(self, price: float) -> None:
        """Test that prices which cannot be rendered back as JSON are refused."""
        with pytest.raises(ValidationError, match="price must be a number."):
            price_is_valid(RequestContext(data={"price": price}))

        with pytest.raises(ValidationError, match="price must be an integer greater than 0."):
            price_is_valid_for_update(RequestContext(data={}, values={"price": price}))

    @pytest.mark.parametrize("price", [1, 0.01, 99])
    def test_update_rule_accepts_positive_numbers(self, price: float) -> None:
        price_is_valid_for_update(RequestContext(data={}, values={"price": price}))

    @pytest.mark.parametrize("price", [0, -0.5, "17", None])
    def test_update_rule_rejects(self, price: object) -> None:
        with pytest.raises(ValidationError, match="price must be an integer greater than 0."):
            price_is_valid_for_update(RequestContext(data={}, values={"price": price}))

    def test_update_rule_reads_accepted_value_not_payload(self) -> None:
        """Test that the update rule checks the value accepted earlier in the chain."""
        context = RequestContext(data={"price": 0}, values={"price": 5})

        price_is_valid_for_update(context)


@pytest.mark.unit
class TestOrderStatusValidator:
    """Tests for status_is_valid.

    The validator this replaces matched by substring, so values such as
    "pending-ish" slipped through. Matching is now exact.
    """

    @pytest.mark.parametrize("status", ["pending", "preparing", "out-for-delivery", "delivered"])
    def test_accepts_enum_values(self, status: str) -> None:
        status_is_valid(RequestContext(data={}, values={"status": status}))

    @pytest.mark.parametrize("status", ["pending-ish", "invalid", "Pending", "delivered ", 1])
    def test_rejects_other_values(self, status: object) -> None:
        with pytest.raises(ValidationError, match="status property must be valid string"):
            status_is_valid(RequestContext(data={}, values={"status": status}))


@pytest.mark.unit
class TestOrderDishesValidators:
    """Tests for the order line item validators."""

    def test_non_empty_list_passes(self) -> None:
        dishes_is_non_empty_list(RequestContext(data={}, values={"dishes": [{"quantity": 1}]}))

    @pytest.mark.parametrize("dishes", [[], {}, "dish", 3])
    def test_rejects_empty_or_non_list(self, dishes: object) -> None:
        with pytest.raises(ValidationError, match="dishes property must be non-empty array"):
            dishes_is_non_empty_list(RequestContext(data={}, values={"dishes": dishes}))

    def test_valid_quantities_pass(self) -> None:
        context = RequestContext(data={}, values={"dishes": [{"quantity": 1}, {"quantity": 4}]})

        dish_quantities_are_valid(context)

    @pytest.mark.parametrize(
        "line_item",
        [{}, {"quantity": 0}, {"quantity": -2}, {"quantity": "2"}, {"quantity": 1.5},
         {"quantity": True}, {"quantity": None}, "not-an-object"],
    )
    def test_invalid_quantity_fails(self, line_item: object) -> None:
        context = RequestContext(data={}, values={"dishes": [line_item]})

        with pytest.raises(ValidationError, match="dish 0 must have a quantity"):
            dish_quantities_are_valid(context)

    def test_first_invalid_item_halts(self) -> None:
        """Test that validation stops at the first bad line item.

        The validator this replaces kept looping and then continued down the
        chain even after reporting an error. Here the first bad item raises, so
        the error names that item and nothing after it is inspected.
        """
        context = RequestContext(
            data={},
            values={"dishes": [{"quantity": 1}, {"quantity": 0}, {"quantity": "x"}]},
        )

        with pytest.raises(ValidationError) as exc_info:
            dish_quantities_are_valid(context)

        assert exc_info.value.message == (
            "dish 1 must have a quantity that is an integer greater than 0"
        )

    def test_error_names_line_item_by_dish_id(self) -> None:
        """Test that a line item carrying a dish id is named by that id."""
        context = RequestContext(
            data={},
            values={"dishes": [{"id": "d1", "quantity": 1}, {"id": "d2", "quantity": 0}]},
        )

        with pytest.raises(ValidationError) as exc_info:
            dish_quantities_are_valid(context)

        assert exc_info.value.message == (
            "dish d2 must have a quantity that is an integer greater than 0"
        )

    @pytest.mark.parametrize("line_item", [{"quantity": 0}, {"id": "", "quantity": 0}, "x"])
    def test_error_falls_back_to_position(self, line_item: object) -> None:
        context = RequestContext(data={}, values={"dishes": [{"quantity": 1}, line_item]})

        with pytest.raises(ValidationError, match="dish 1 must have a quantity"):
            dish_quantities_are_valid(context)
