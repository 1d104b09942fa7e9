"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def get_orders(self, skip: int, count: int) -> List[Order]:
        """List orders in ascending identity order.

        Args:
            skip: Number of orders to skip (>= 0)
            count: Maximum number of orders to return (> 0)

        Returns:
            List of Order aggregates

        Raises:
            InvalidArgumentError: If skip or count is out of range
        """
        pass

    @abstractmethod
    async def get_order(self, order_id: int) -> Order:
        """Retrieve order by identity.

        Raises:
            OrderNotFoundError: If no such order exists
        """
        pass

    @abstractmethod
    async def add_order(self, order: Order) -> int:
        """Persist a new order with its details atomically.

        Returns:
            Store-assigned order identity

        Raises:
            InvalidArgumentError: If order is None
            ValidationError: If any detail is invalid
            RepositoryError: If the store fails
        """
        pass

    @abstractmethod
    async def remove_order(self, order_id: int) -> None:
        """Delete an order and its details atomically.

        Raises:
            OrderNotFoundError: If no such order exists
        """
        pass

    @abstractmethod
    async def update_order(self, order: Order) -> None:
        """Replace an order's fields and all of its details atomically.

        Raises:
            InvalidArgumentError: If order or its id is None
            OrderNotFoundError: If no such order exists
            ValidationError: If any detail is invalid
        """
        pass
