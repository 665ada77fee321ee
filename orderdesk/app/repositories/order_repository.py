"""Order Repository Interface

Defines the contract for order persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from orderdesk.domain.order import Order


class OrderRepository(ABC):
    """
    Repository interface for Order persistence
    """

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """
        Create a new order

        Args:
            order: Order entity to persist

        Returns:
            Created Order with store-assigned id and timestamps
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """
        Retrieve order by ID

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_client(self, client_id: str) -> List[Order]:
        """
        Retrieve every order placed for a client
        """
        pass

    @abstractmethod
    async def get_pending_by_client(self, client_id: str) -> List[Order]:
        """
        Retrieve a client's orders that are still Pending
        """
        pass

    @abstractmethod
    async def mark_completed(self, order_id: str, invoice_id: str) -> None:
        """
        Set status=Completed and link the invoice

        This is a blind field overwrite, not a conditional update.

        Raises:
            DocumentNotFoundError: order does not exist
        """
        pass
