"""Order data models.

Orders use camelCase field names on the wire (``deliverTo``,
``mobileNumber``); the model exposes snake_case attributes with aliases.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrderStatusEnum(str, Enum):
    """Enumeration of order status values."""

    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw string values in declaration order."""
        return [member.value for member in cls]


class Order(BaseModel):
    """A customer order.

    Line items in ``dishes`` are kept as submitted. Only their ``quantity`` is
    validated; a referenced dish id is never checked against the dish
    collection.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique identifier, assigned at creation")
    deliver_to: str = Field(..., alias="deliverTo", description="Delivery address or recipient")
    mobile_number: str = Field(..., alias="mobileNumber", description="Contact number")
    status: OrderStatusEnum = Field(..., description="Current order status")
    dishes: list[dict[str, Any]] = Field(..., description="Ordered line items", min_length=1)

    @property
    def is_pending(self) -> bool:
        """Whether the order may still be deleted."""
        return self.status == OrderStatusEnum.PENDING

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation.

        Returns:
            dict: JSON-compatible representation using camelCase keys
        """
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "Order":
        """Create an Order from its wire representation.

        Args:
            item: Dictionary with camelCase order fields

        Returns:
            Order: Parsed model instance
        """
        return cls(
            id=item["id"],
            deliver_to=item["deliverTo"],
            mobile_number=item["mobileNumber"],
            status=OrderStatusEnum(item["status"]),
            dishes=[dict(line_item) for line_item in item["dishes"]],
        )
