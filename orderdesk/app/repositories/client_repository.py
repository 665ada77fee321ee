"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from orderdesk.domain.client import Client


class ClientRepository(ABC):
    """
    Repository interface for Client persistence
    """

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client with store-assigned id and timestamps
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        """
        Retrieve client by ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Client]:
        """
        Retrieve all clients, newest first
        """
        pass

    @abstractmethod
    async def delete(self, client_id: str) -> None:
        """
        Delete a client; orders and invoices referencing it are kept
        """
        pass
