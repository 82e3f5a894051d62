"""Dish data model.

Dishes are stored in memory and returned in the ``data`` envelope exactly as
they were submitted, plus the generated id.
"""

from typing import Any

from pydantic import BaseModel, Field


class Dish(BaseModel):
    """A dish on the restaurant menu."""

    id: str = Field(..., description="Unique identifier, assigned at creation")
    name: str = Field(..., description="Dish name")
    description: str = Field(..., description="Dish description")
    price: int | float = Field(..., description="Dish price")
    image_url: str = Field(..., description="URL to dish image")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation.

        Returns:
            dict: JSON-compatible representation
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "Dish":
        """Create a Dish from its wire representation.

        Args:
            item: Dictionary with the five dish fields

        Returns:
            Dish: Parsed model instance
        """
        return cls(
            id=item["id"],
            name=item["name"],
            description=item["description"],
            price=item["price"],
            image_url=item["image_url"],
        )
