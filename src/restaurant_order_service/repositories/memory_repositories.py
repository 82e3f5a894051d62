"""In-memory repository classes for dishes and orders.

Each repository owns one ordered, mutable list of records for the lifetime of
the process. There is no locking: requests are handled one chain at a time and
concurrent writes to the same record are an accepted race. Following the rest
of the service, expected misses are reported with None/False rather than
exceptions.
"""

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from restaurant_order_service.models.dish_models import Dish
from restaurant_order_service.models.order_models import Order

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Dish, Order)


class InMemoryRepository(Generic[RecordT]):
    """Ordered collection of records keyed by their ``id`` attribute.

    Lookups are linear scans over the list so that listing order always
    matches insertion order.
    """

    def __init__(self, records: Iterable[RecordT] | None = None) -> None:
        """Initialize repository.

        Args:
            records: Optional records to pre-seed the collection with
        """
        self._records: list[RecordT] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> list[RecordT]:
        """Return every record in insertion order.

        Returns:
            A shallow copy of the underlying list
        """
        return list(self._records)

    def get(self, record_id: str | None) -> RecordT | None:
        """Find a record by id.

        Args:
            record_id: Identifier taken from the request path

        Returns:
            The matching record if found, None otherwise
        """
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def add(self, record: RecordT) -> RecordT:
        """Append a record to the end of the collection.

        Args:
            record: Record with an already assigned id

        Returns:
            The stored record
        """
        self._records.append(record)
        logger.debug(f"Stored {type(record).__name__} {record.id}")
        return record

    def remove(self, record_id: str) -> bool:
        """Remove the record with the given id.

        Args:
            record_id: Identifier of the record to remove

        Returns:
            True if a record was removed, False if none matched
        """
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                logger.debug(f"Removed {type(record).__name__} {record_id}")
                return True
        return False

    def ids(self) -> set[str]:
        """Return the ids of all live records."""
        return {record.id for record in self._records}


class DishRepository(InMemoryRepository[Dish]):
    """Repository for the dish collection."""


class OrderRepository(InMemoryRepository[Order]):
    """Repository for the order collection."""
