"""
List Invoices Use Case

Retrieves invoices newest first, optionally filtered by status and by
client reference code.
"""
from typing import Optional
from libs.result import Result, Return, Error
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.domain.invoice import InvoiceStatus
from .dtos import InvoiceDTO, ListInvoicesResponseDTO


class ListInvoices:
    """
    Use case: List invoices

    The reference code filter is a case-insensitive substring match;
    an empty string matches everything.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        """
        Initialize with invoice repository.

        Args:
            invoice_repo: InvoiceRepository instance
        """
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        status: Optional[InvoiceStatus] = None,
        reference_code: str = "",
    ) -> Result[ListInvoicesResponseDTO]:
        """
        List invoices.

        Args:
            status: Only return invoices with this status (None = all)
            reference_code: Client reference code fragment to search for

        Returns:
            Result[ListInvoicesResponseDTO]: Filtered invoice list
        """
        try:
            invoices = await self.invoice_repo.list_all()
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to load invoices",
                    reason=str(e),
                )
            )

        needle = (reference_code or "").strip().lower()
        matching = [
            invoice
            for invoice in invoices
            if (status is None or invoice.status == status)
            and needle in invoice.client_reference_code.lower()
        ]

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=[InvoiceDTO.from_entity(invoice) for invoice in matching],
                total=len(matching),
            )
        )
