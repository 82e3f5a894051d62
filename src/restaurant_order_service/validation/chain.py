"""Ordered validation chains.

A chain is a list of validators followed by a terminal handler. Each validator
receives the request context and either returns (the chain continues with the
same, possibly updated, context) or raises a ServiceError, which halts the
chain before any later validator or the handler runs.
"""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from restaurant_order_service.exceptions import ServiceError
from restaurant_order_service.observability.metrics import record_validation_failure

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RequestContext:
    """Per-request state threaded through a validation chain.

    Attributes:
        data: The request payload found inside the ``data`` envelope
        path_id: Record id from the route path, None for collection routes
        values: Field values accepted by presence validators so far
        record: Record attached by an existence validator
    """

    data: dict[str, Any]
    path_id: str | None = None
    values: dict[str, Any] = field(default_factory=dict)
    record: Any = None

    @classmethod
    def from_body(cls, body: Any, path_id: str | None = None) -> "RequestContext":
        """Build a context from a decoded request body.

        Anything other than ``{"data": {...}}`` is treated as an empty payload.

        Args:
            body: Decoded JSON request body, or None
            path_id: Record id from the route path

        Returns:
            RequestContext: Fresh context with no accepted values
        """
        data = body.get("data") if isinstance(body, dict) else None
        return cls(data=data if isinstance(data, dict) else {}, path_id=path_id)


Validator = Callable[[RequestContext], None]


def is_present(value: Any) -> bool:
    """Whether a payload value counts as supplied.

    Empty strings, None, False and zero are missing. Lists and objects count as
    present even when empty; their contents are checked by later validators.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def is_number(value: Any) -> bool:
    """Whether a payload value is a finite JSON number.

    Booleans are excluded, as are the NaN and Infinity tokens the JSON decoder
    accepts but responses cannot carry.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def run_chain(
    chain_name: str,
    validators: Sequence[Validator],
    handler: Callable[[RequestContext], T],
    context: RequestContext,
) -> T:
    """Run validators in order, then the terminal handler.

    Args:
        chain_name: Route name used in logs and metrics (e.g. "dishes.update")
        validators: Ordered validators for the route
        handler: Terminal handler executed when every validator passes
        context: Request context shared by validators and handler

    Returns:
        Whatever the terminal handler returns

    Raises:
        ServiceError: From the first failing validator or from the handler
    """
    for validator in validators:
        try:
            validator(context)
        except ServiceError as e:
            logger.info(
                f"{chain_name} rejected by {validator.__name__}: {e.message}",
                extra={"chain": chain_name, "status_code": e.status_code},
            )
            record_validation_failure(chain_name, e.status_code)
            raise

    return handler(context)
