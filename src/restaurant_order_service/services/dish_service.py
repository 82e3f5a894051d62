"""Dish service: validation chains and handlers for the dish collection."""

import logging
from typing import Any

from restaurant_order_service.models.dish_models import Dish
from restaurant_order_service.observability import traced
from restaurant_order_service.observability.metrics import record_dish_write
from restaurant_order_service.repositories.memory_repositories import DishRepository
from restaurant_order_service.services.id_generator import IdGenerator
from restaurant_order_service.validation.chain import RequestContext, run_chain
from restaurant_order_service.validation.dish_validators import (
    body_has_price,
    price_is_valid,
    price_is_valid_for_update,
)
from restaurant_order_service.validation.field_validators import (
    body_has,
    body_id_matches_path,
    record_exists,
)

logger = logging.getLogger(__name__)


class DishService:
    """Service for listing, reading, creating and updating dishes.

    Every operation except listing runs an ordered validation chain before its
    handler. Handlers assume the chain passed and do no error checking of
    their own.
    """

    def __init__(self, dish_repository: DishRepository, id_generator: IdGenerator) -> None:
        """Initialize the DishService.

        Args:
            dish_repository: Repository holding the dish collection
            id_generator: Generator for new dish ids
        """
        self.dish_repository = dish_repository
        self.id_generator = id_generator

        dish_exists = record_exists(dish_repository, "Dish")
        body_has_name = body_has("name", require_string=True)
        body_has_description = body_has("description", require_string=True)
        body_has_image_url = body_has("image_url", article="An", require_string=True)

        self.read_chain = [dish_exists]
        self.create_chain = [
            body_has_name,
            body_has_description,
            body_has_price,
            price_is_valid,
            body_has_image_url,
        ]
        self.update_chain = [
            dish_exists,
            body_id_matches_path("dishId"),
            body_has_name,
            body_has_description,
            body_has_image_url,
            body_has_price,
            price_is_valid,
            price_is_valid_for_update,
        ]

    def list_dishes(self) -> list[Dish]:
        """Return all dishes in insertion order."""
        return self.dish_repository.list_all()

    @traced("dishes.read")
    def read_dish(self, dish_id: str) -> Dish:
        """Return the dish with the given id.

        Raises:
            NotFoundError: If no dish matches dish_id
        """
        context = RequestContext(data={}, path_id=dish_id)
        return run_chain("dishes.read", self.read_chain, self._read, context)

    @traced("dishes.create")
    def create_dish(self, body: Any) -> Dish:
        """Validate a creation payload and append the new dish.

        Args:
            body: Decoded request body, expected as ``{"data": {...}}``

        Returns:
            The stored dish with its generated id

        Raises:
            ValidationError: If a field is missing or the price is invalid
        """
        context = RequestContext.from_body(body)
        return run_chain("dishes.create", self.create_chain, self._create, context)

    @traced("dishes.update")
    def update_dish(self, dish_id: str, body: Any) -> Dish:
        """Validate an update payload and overwrite the dish in place.

        Args:
            dish_id: Id of the dish taken from the route path
            body: Decoded request body, expected as ``{"data": {...}}``

        Returns:
            The updated dish, id unchanged

        Raises:
            NotFoundError: If no dish matches dish_id
            ConstraintError: If the body id differs from dish_id
            ValidationError: If a field is missing or the price is invalid
        """
        context = RequestContext.from_body(body, path_id=dish_id)
        return run_chain("dishes.update", self.update_chain, self._update, context)

    def _read(self, context: RequestContext) -> Dish:
        dish: Dish = context.record
        return dish

    def _create(self, context: RequestContext) -> Dish:
        data = context.data
        dish = Dish(
            id=self.id_generator.next_id(),
            name=data["name"],
            description=data["description"],
            price=data["price"],
            image_url=data["image_url"],
        )
        self.dish_repository.add(dish)
        record_dish_write("create")
        logger.info(f"Created dish {dish.id}")
        return dish

    def _update(self, context: RequestContext) -> Dish:
        # Looked up again rather than taken from the existence check
        dish: Dish = self.dish_repository.get(context.path_id)  # type: ignore[assignment]
        data = context.data
        dish.name = data["name"]
        dish.description = data["description"]
        dish.price = data["price"]
        dish.image_url = data["image_url"]
        record_dish_write("update")
        logger.info(f"Updated dish {context.path_id}")
        return dish
