"""Order service: validation chains and handlers for the order collection."""

import logging
from typing import Any

from restaurant_order_service.exceptions import ConstraintError
from restaurant_order_service.models.order_models import Order, OrderStatusEnum
from restaurant_order_service.observability import traced
from restaurant_order_service.observability.metrics import record_order_write
from restaurant_order_service.repositories.memory_repositories import OrderRepository
from restaurant_order_service.services.id_generator import IdGenerator
from restaurant_order_service.validation.chain import RequestContext, run_chain
from restaurant_order_service.validation.field_validators import (
    body_has,
    body_id_matches_path,
    record_exists,
)
from restaurant_order_service.validation.order_validators import (
    dish_quantities_are_valid,
    dishes_is_non_empty_list,
    status_is_valid,
)

logger = logging.getLogger(__name__)


class OrderService:
    """Service for listing, reading, creating, updating and deleting orders.

    The order chains are a superset of the dish chains: on top of presence
    checks they validate the status enum and every line item's quantity.
    Orders are always created as out-for-delivery and can only be deleted while
    pending.
    """

    def __init__(self, order_repository: OrderRepository, id_generator: IdGenerator) -> None:
        """Initialize the OrderService.

        Args:
            order_repository: Repository holding the order collection
            id_generator: Generator for new order ids
        """
        self.order_repository = order_repository
        self.id_generator = id_generator

        order_exists = record_exists(order_repository, "Order")
        body_has_deliver_to = body_has("deliverTo", require_string=True)
        body_has_mobile_number = body_has("mobileNumber", require_string=True)
        body_has_dishes = body_has("dishes")

        self.read_chain = [order_exists]
        self.create_chain = [
            body_has_deliver_to,
            body_has_mobile_number,
            body_has_dishes,
            dishes_is_non_empty_list,
            dish_quantities_are_valid,
        ]
        self.update_chain = [
            order_exists,
            body_id_matches_path("orderId"),
            body_has_deliver_to,
            body_has_mobile_number,
            body_has_dishes,
            body_has("status"),
            status_is_valid,
            dishes_is_non_empty_list,
            dish_quantities_are_valid,
        ]
        self.delete_chain = [order_exists]

    def list_orders(self) -> list[Order]:
        """Return all orders in insertion order."""
        return self.order_repository.list_all()

    @traced("orders.read")
    def read_order(self, order_id: str) -> Order:
        """Return the order with the given id.

        Raises:
            NotFoundError: If no order matches order_id
        """
        context = RequestContext(data={}, path_id=order_id)
        return run_chain("orders.read", self.read_chain, self._read, context)

    @traced("orders.create")
    def create_order(self, body: Any) -> Order:
        """Validate a creation payload and append the new order.

        Any status in the payload is ignored; new orders start out for
        delivery.

        Args:
            body: Decoded request body, expected as ``{"data": {...}}``

        Returns:
            The stored order with its generated id

        Raises:
            ValidationError: If a field is missing or a line item is invalid
        """
        context = RequestContext.from_body(body)
        return run_chain("orders.create", self.create_chain, self._create, context)

    @traced("orders.update")
    def update_order(self, order_id: str, body: Any) -> Order:
        """Validate an update payload and overwrite the order in place.

        Args:
            order_id: Id of the order taken from the route path
            body: Decoded request body, expected as ``{"data": {...}}``

        Returns:
            The updated order, id unchanged

        Raises:
            NotFoundError: If no order matches order_id
            ConstraintError: If the body id differs from order_id
            ValidationError: If a field is missing, the status is not a known
                value or a line item is invalid
        """
        context = RequestContext.from_body(body, path_id=order_id)
        return run_chain("orders.update", self.update_chain, self._update, context)

    @traced("orders.delete")
    def delete_order(self, order_id: str) -> None:
        """Delete a pending order.

        Raises:
            NotFoundError: If no order matches order_id
            ConstraintError: If the order is not pending; nothing is removed
        """
        context = RequestContext(data={}, path_id=order_id)
        run_chain("orders.delete", self.delete_chain, self._delete, context)

    def _read(self, context: RequestContext) -> Order:
        order: Order = context.record
        return order

    def _create(self, context: RequestContext) -> Order:
        data = context.data
        order = Order(
            id=self.id_generator.next_id(),
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=OrderStatusEnum.OUT_FOR_DELIVERY,
            dishes=data["dishes"],
        )
        self.order_repository.add(order)
        record_order_write("create")
        logger.info(f"Created order {order.id}")
        return order

    def _update(self, context: RequestContext) -> Order:
        # Looked up again rather than taken from the existence check
        order: Order = self.order_repository.get(context.path_id)  # type: ignore[assignment]
        data = context.data
        order.deliver_to = data["deliverTo"]
        order.mobile_number = data["mobileNumber"]
        order.status = OrderStatusEnum(data["status"])
        order.dishes = data["dishes"]
        record_order_write("update")
        logger.info(f"Updated order {context.path_id} to status {order.status.value}")
        return order

    def _delete(self, context: RequestContext) -> None:
        order: Order = context.record
        if not order.is_pending:
            raise ConstraintError('order cannot be deleted unless order status = "pending"')

        self.order_repository.remove(order.id)
        record_order_write("delete")
        logger.info(f"Deleted order {order.id}")
