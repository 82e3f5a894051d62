"""Unit tests for the in-memory repositories."""

import pytest

from restaurant_order_service.models.dish_models import Dish
from restaurant_order_service.models.order_models import Order, OrderStatusEnum
from restaurant_order_service.repositories.memory_repositories import (
    DishRepository,
    OrderRepository,
)


def make_dish(dish_id: str, name: str = "Soup") -> Dish:
    return Dish(id=dish_id, name=name, description="Hot soup", price=5, image_url="url")


def make_order(order_id: str, status: OrderStatusEnum = OrderStatusEnum.PENDING) -> Order:
    return Order(
        id=order_id,
        deliver_to="Somewhere",
        mobile_number="555-0100",
        status=status,
        dishes=[{"id": "d1", "quantity": 1}],
    )


@pytest.mark.unit
class TestDishRepository:
    """Test suite for DishRepository."""

    def test_empty_by_default(self) -> None:
        """Test that a repository without seed records is empty."""
        repository = DishRepository()

        assert len(repository) == 0
        assert repository.list_all() == []

    def test_add_appends_in_order(self) -> None:
        """Test that records are listed in insertion order."""
        repository = DishRepository([make_dish("a")])

        repository.add(make_dish("b"))
        repository.add(make_dish("c"))

        assert [dish.id for dish in repository.list_all()] == ["a", "b", "c"]

    def test_get_returns_matching_record(self) -> None:
        """Test lookup by id returns the stored instance."""
        dish = make_dish("a")
        repository = DishRepository([dish])

        assert repository.get("a") is dish

    def test_get_returns_none_on_miss(self) -> None:
        """Test lookup of an unknown id."""
        repository = DishRepository([make_dish("a")])

        assert repository.get("missing") is None
        assert repository.get(None) is None

    def test_list_all_returns_copy(self) -> None:
        """Test that mutating the returned list does not affect the repository."""
        repository = DishRepository([make_dish("a")])

        repository.list_all().clear()

        assert len(repository) == 1

    def test_ids(self) -> None:
        """Test that ids returns every live id."""
        repository = DishRepository([make_dish("a"), make_dish("b")])

        assert repository.ids() == {"a", "b"}


@pytest.mark.unit
class TestOrderRepository:
    """Test suite for OrderRepository."""

    def test_remove_deletes_only_target(self) -> None:
        """Test that remove deletes exactly the matching record."""
        repository = OrderRepository([make_order("a"), make_order("b"), make_order("c")])

        removed = repository.remove("b")

        assert removed is True
        assert [order.id for order in repository.list_all()] == ["a", "c"]

    def test_remove_unknown_id_is_noop(self) -> None:
        """Test that removing an unknown id leaves the collection unchanged."""
        repository = OrderRepository([make_order("a"), make_order("b")])

        removed = repository.remove("zzz")

        assert removed is False
        assert [order.id for order in repository.list_all()] == ["a", "b"]
