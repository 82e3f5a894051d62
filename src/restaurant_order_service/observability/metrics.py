"""Custom metrics for the restaurant order service."""

from opentelemetry import metrics

# Get meter for order service
meter = metrics.get_meter("restaurant-order-svc")

dish_write_counter = meter.create_counter(
    name="dish_writes_total",
    description="Total number of dishes created or updated",
    unit="1",
)

order_write_counter = meter.create_counter(
    name="order_writes_total",
    description="Total number of orders created, updated or deleted",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="validation_failures_total",
    description="Total number of requests rejected by a validation chain",
    unit="1",
)

# Collection size gauges
dish_collection_size = meter.create_up_down_counter(
    name="dish_collection_size",
    description="Current number of dishes held in memory",
    unit="1",
)

order_collection_size = meter.create_up_down_counter(
    name="order_collection_size",
    description="Current number of orders held in memory",
    unit="1",
)


def record_dish_write(operation: str) -> None:
    """Record a successful dish write.

    Args:
        operation: The operation performed ("create" or "update")
    """
    dish_write_counter.add(1, {"operation": operation})
    if operation == "create":
        dish_collection_size.add(1)


def record_order_write(operation: str) -> None:
    """Record a successful order write.

    Args:
        operation: The operation performed ("create", "update" or "delete")
    """
    order_write_counter.add(1, {"operation": operation})
    if operation == "create":
        order_collection_size.add(1)
    elif operation == "delete":
        order_collection_size.add(-1)


def record_validation_failure(chain: str, status_code: int) -> None:
    """Record a request rejected by a validation chain.

    Args:
        chain: Name of the chain that rejected the request (e.g. "orders.update")
        status_code: HTTP status code of the rejection
    """
    validation_failure_counter.add(1, {"chain": chain, "status_code": status_code})
