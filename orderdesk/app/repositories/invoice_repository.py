"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from orderdesk.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for invoicing operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with store-assigned id
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve all invoices, newest first
        """
        pass

    @abstractmethod
    async def update_status(self, invoice_id: str, status: InvoiceStatus) -> None:
        """
        Change an invoice's payment status

        Raises:
            DocumentNotFoundError: invoice does not exist
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> None:
        """
        Delete an invoice; the originating order is left untouched
        """
        pass
