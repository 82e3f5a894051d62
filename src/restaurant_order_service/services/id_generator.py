"""Identifier generation for new dishes and orders."""

import logging
import uuid
from typing import Any

from restaurant_order_service.repositories.memory_repositories import InMemoryRepository

logger = logging.getLogger(__name__)


class IdGenerator:
    """Generates ids that are unique across every registered repository.

    Dishes and orders share one id namespace, so the generator checks all
    repositories it was given before handing out an id.
    """

    def __init__(self, *repositories: InMemoryRepository[Any]) -> None:
        """Initialize the generator.

        Args:
            repositories: Repositories whose live ids must not be reused
        """
        self.repositories = repositories

    def next_id(self) -> str:
        """Return a new identifier not used by any live record.

        Returns:
            32 character hex string
        """
        taken: set[str] = set()
        for repository in self.repositories:
            taken |= repository.ids()

        new_id = uuid.uuid4().hex
        while new_id in taken:
            logger.warning(f"Generated id {new_id} collides with a live record, regenerating")
            new_id = uuid.uuid4().hex

        return new_id
