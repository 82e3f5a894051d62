"""FastAPI application binding the dish and order routes."""

import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from restaurant_order_service.exceptions import MethodNotAllowedError, NotFoundError, ServiceError
from restaurant_order_service.observability import traced
from restaurant_order_service.services.dish_service import DishService
from restaurant_order_service.services.order_service import OrderService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


@traced("http.decode_body")
async def read_json_body(request: Request) -> Any:
    """Decode the request body, returning None when it is absent or not JSON."""
    try:
        return await request.json()
    except ValueError:
        logger.debug(f"Ignoring undecodable body on {request.method} {request.url.path}")
        return None


def allowed_methods(request: Request) -> list[str]:
    """Collect the verbs bound on the request path across every matching route."""
    methods: set[str] = set()
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            methods |= getattr(route, "methods", None) or set()
    return sorted(methods)


def error_response(error: ServiceError, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render a service error as an ``{"error": message}`` envelope."""
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message},
        headers=headers,
    )


def create_app(dish_service: DishService, order_service: OrderService) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        dish_service: Service owning the dish collection
        order_service: Service owning the order collection

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Restaurant Order Service API",
        description="CRUD API for restaurant dishes and customer orders",
        version="1.0.0",
    )

    # Store services in app state for access in route handlers
    app.state.dish_service = dish_service
    app.state.order_service = order_service

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
        logger.warning(
            f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
        )
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error: ServiceError
        headers = exc.headers
        if exc.status_code == 405:
            error = MethodNotAllowedError(f"{request.method} not allowed for {request.url.path}")
            headers = {"Allow": ", ".join(allowed_methods(request))}
        elif exc.status_code == 404:
            error = NotFoundError(f"Path not found: {request.url.path}")
        else:
            error = ServiceError(str(exc.detail), status_code=exc.status_code)
        logger.warning(f"{request.method} {request.url.path} rejected with {exc.status_code}")
        return error_response(error, headers=headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/dishes", tags=["Dishes"])
    async def list_dishes() -> dict[str, Any]:
        """List every dish in insertion order."""
        dishes = app.state.dish_service.list_dishes()
        return {"data": [dish.to_dict() for dish in dishes]}

    @app.post("/dishes", status_code=201, tags=["Dishes"])
    async def create_dish(request: Request) -> dict[str, Any]:
        """Create a dish from a ``{"data": {...}}`` envelope."""
        body = await read_json_body(request)
        dish = app.state.dish_service.create_dish(body)
        return {"data": dish.to_dict()}

    @app.get("/dishes/{dish_id}", tags=["Dishes"])
    async def read_dish(dish_id: str) -> dict[str, Any]:
        """Read a single dish."""
        dish = app.state.dish_service.read_dish(dish_id)
        return {"data": dish.to_dict()}

    @app.put("/dishes/{dish_id}", tags=["Dishes"])
    async def update_dish(dish_id: str, request: Request) -> dict[str, Any]:
        """Replace the mutable fields of a dish."""
        body = await read_json_body(request)
        dish = app.state.dish_service.update_dish(dish_id, body)
        return {"data": dish.to_dict()}

    @app.get("/orders", tags=["Orders"])
    async def list_orders() -> dict[str, Any]:
        """List every order in insertion order."""
        orders = app.state.order_service.list_orders()
        return {"data": [order.to_dict() for order in orders]}

    @app.post("/orders", status_code=201, tags=["Orders"])
    async def create_order(request: Request) -> dict[str, Any]:
        """Create an order from a ``{"data": {...}}`` envelope."""
        body = await read_json_body(request)
        order = app.state.order_service.create_order(body)
        return {"data": order.to_dict()}

    @app.get("/orders/{order_id}", tags=["Orders"])
    async def read_order(order_id: str) -> dict[str, Any]:
        """Read a single order."""
        order = app.state.order_service.read_order(order_id)
        return {"data": order.to_dict()}

    @app.put("/orders/{order_id}", tags=["Orders"])
    async def update_order(order_id: str, request: Request) -> dict[str, Any]:
        """Replace the mutable fields of an order."""
        body = await read_json_body(request)
        order = app.state.order_service.update_order(order_id, body)
        return {"data": order.to_dict()}

    @app.delete("/orders/{order_id}", status_code=204, tags=["Orders"])
    async def delete_order(order_id: str) -> Response:
        """Delete an order that is still pending."""
        app.state.order_service.delete_order(order_id)
        return Response(status_code=204)

    return app
