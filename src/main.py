"""Main application entry point for the restaurant order service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from restaurant_order_service.data.seed_data import (
    seeded_dish_repository,
    seeded_order_repository,
)
from restaurant_order_service.handlers.api_handler import create_app
from restaurant_order_service.observability import configure_logging, setup_observability
from restaurant_order_service.repositories.memory_repositories import (
    DishRepository,
    OrderRepository,
)
from restaurant_order_service.services.dish_service import DishService
from restaurant_order_service.services.id_generator import IdGenerator
from restaurant_order_service.services.order_service import OrderService

logger = logging.getLogger(__name__)


def create_repositories() -> tuple[DishRepository, OrderRepository]:
    """Create the in-memory repositories, seeded unless SEED_DATA is false.

    Returns:
        Tuple of (dish repository, order repository)
    """
    if os.getenv("SEED_DATA", "true").lower() == "true":
        dish_repository = seeded_dish_repository()
        order_repository = seeded_order_repository()
        logger.info(
            f"Seeded {len(dish_repository)} dishes and {len(order_repository)} orders"
        )
    else:
        dish_repository = DishRepository()
        order_repository = OrderRepository()
        logger.info("Starting with empty dish and order collections")

    return dish_repository, order_repository


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the in-memory repositories
    3. Creates the services sharing one id generator
    4. Creates the FastAPI app
    5. Sets up observability

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing restaurant order service...")

    dish_repository, order_repository = create_repositories()

    # Dishes and orders share one id namespace
    id_generator = IdGenerator(dish_repository, order_repository)

    dish_service = DishService(dish_repository=dish_repository, id_generator=id_generator)
    order_service = OrderService(order_repository=order_repository, id_generator=id_generator)

    logger.info("Services initialized")

    app = create_app(dish_service=dish_service, order_service=order_service)

    enable_telemetry = os.getenv("ENABLE_TELEMETRY", "false").lower() == "true"
    setup_observability(app, enable_exporters=enable_telemetry)

    logger.info("Restaurant order service initialized successfully")

    return app


# Create the FastAPI application instance (only when not in test mode)
# This prevents the app from being created during test collection
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    # Create a placeholder app for test imports
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    port = int(os.getenv("PORT", "5000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info(f"Starting development server on {host}:{port}")
    logger.info(f"API documentation available at http://{host}:{port}/docs")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
