"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before main is imported so no application is built at import time
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from restaurant_order_service.data.seed_data import (  # noqa: E402
    seeded_dish_repository,
    seeded_order_repository,
)
from restaurant_order_service.handlers.api_handler import create_app  # noqa: E402
from restaurant_order_service.repositories.memory_repositories import (  # noqa: E402
    DishRepository,
    OrderRepository,
)
from restaurant_order_service.services.dish_service import DishService  # noqa: E402
from restaurant_order_service.services.id_generator import IdGenerator  # noqa: E402
from restaurant_order_service.services.order_service import OrderService  # noqa: E402


@pytest.fixture
def dish_payload() -> dict:
    """Fixture providing a valid dish creation payload (without envelope)."""
    return {
        "name": "Mushroom risotto",
        "description": "Creamy arborio rice with wild mushrooms",
        "price": 14,
        "image_url": "https://example.com/risotto.jpg",
    }


@pytest.fixture
def order_payload() -> dict:
    """Fixture providing a valid order creation payload (without envelope)."""
    return {
        "deliverTo": "742 Evergreen Terrace, Springfield",
        "mobileNumber": "(555) 636-7463",
        "status": "pending",
        "dishes": [
            {
                "id": "90c3d873684bf381dfab29034b5bba73",
                "name": "Falafel and tahini bagel",
                "description": "A warm bagel filled with falafel and tahini",
                "image_url": "https://example.com/bagel.jpg",
                "price": 6,
                "quantity": 2,
            }
        ],
    }


@pytest.fixture
def dish_repository() -> DishRepository:
    """Fixture providing a freshly seeded dish repository."""
    return seeded_dish_repository()


@pytest.fixture
def order_repository() -> OrderRepository:
    """Fixture providing a freshly seeded order repository."""
    return seeded_order_repository()


@pytest.fixture
def id_generator(dish_repository: DishRepository, order_repository: OrderRepository) -> IdGenerator:
    """Fixture providing an id generator shared by both repositories."""
    return IdGenerator(dish_repository, order_repository)


@pytest.fixture
def dish_service(dish_repository: DishRepository, id_generator: IdGenerator) -> DishService:
    """Fixture providing a DishService over the seeded repository."""
    return DishService(dish_repository=dish_repository, id_generator=id_generator)


@pytest.fixture
def order_service(order_repository: OrderRepository, id_generator: IdGenerator) -> OrderService:
    """Fixture providing an OrderService over the seeded repository."""
    return OrderService(order_repository=order_repository, id_generator=id_generator)


@pytest.fixture
def client(dish_service: DishService, order_service: OrderService) -> TestClient:
    """Fixture providing a test client over real services and seeded data."""
    return TestClient(create_app(dish_service=dish_service, order_service=order_service))


@pytest.fixture
def pending_order_id() -> str:
    """Fixture providing the id of the seeded pending order."""
    return "6d1f3a8b3c2e4b1a9f0e7d5c4b3a2918"


@pytest.fixture
def delivered_order_id() -> str:
    """Fixture providing the id of the seeded delivered order."""
    return "5a887d326e83d3c5bdcbee398ea32aff"


@pytest.fixture
def seeded_dish_id() -> str:
    """Fixture providing the id of the first seeded dish."""
    return "d351db2b49b69679504652ea1cf38241"
