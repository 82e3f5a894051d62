"""Sample dishes and orders used to pre-seed the in-memory repositories."""

from typing import Any

from restaurant_order_service.models.dish_models import Dish
from restaurant_order_service.models.order_models import Order
from restaurant_order_service.repositories.memory_repositories import (
    DishRepository,
    OrderRepository,
)

SEED_DISHES: list[dict[str, Any]] = [
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg",
    },
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Broccoli and beetroot stir fry",
        "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
        "price": 15,
        "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg",
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg",
    },
]

SEED_ORDERS: list[dict[str, Any]] = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [
            {
                "id": "90c3d873684bf381dfab29034b5bba73",
                "name": "Falafel and tahini bagel",
                "description": "A warm bagel filled with falafel and tahini",
                "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg",
                "price": 6,
                "quantity": 1,
            }
        ],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "delivered",
        "dishes": [
            {
                "id": "d351db2b49b69679504652ea1cf38241",
                "name": "Dolcelatte and chickpea spaghetti",
                "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
                "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg",
                "price": 19,
                "quantity": 2,
            }
        ],
    },
    {
        "id": "6d1f3a8b3c2e4b1a9f0e7d5c4b3a2918",
        "deliverTo": "221B Baker Street, London",
        "mobileNumber": "(020) 7224-3688",
        "status": "pending",
        "dishes": [
            {
                "id": "3c637d011d844ebab1205fef8a7e36ea",
                "name": "Broccoli and beetroot stir fry",
                "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
                "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg",
                "price": 15,
                "quantity": 3,
            }
        ],
    },
]


def seeded_dish_repository() -> DishRepository:
    """Create a dish repository holding fresh copies of the sample dishes."""
    return DishRepository(Dish.from_dict(item) for item in SEED_DISHES)


def seeded_order_repository() -> OrderRepository:
    """Create an order repository holding fresh copies of the sample orders."""
    return OrderRepository(Order.from_dict(item) for item in SEED_ORDERS)
