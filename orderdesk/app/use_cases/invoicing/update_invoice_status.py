"""UpdateInvoiceStatus Use Case

Records payment status changes made by the user.
"""

import logging
from libs.result import Result, Return, Error
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.domain.invoice import InvoiceStatus
from .dtos import InvoiceDTO

logger = logging.getLogger(__name__)


class UpdateInvoiceStatus:
    """
    Use Case: Update invoice status

    Business Rules:
    1. Invoice must exist
    2. Any of Paid / Pending / Overdue may be set; amounts are untouched
    3. The originating order is not affected
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str, status: InvoiceStatus) -> Result[InvoiceDTO]:
        """
        Execute status update

        Args:
            invoice_id: Invoice to update
            status: New status

        Returns:
            Result[InvoiceDTO]: Updated invoice as re-read from the store
        """
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            await self.invoice_repo.update_status(invoice_id, status)
            updated = await self.invoice_repo.get_by_id(invoice_id)

            logger.info(
                f"Invoice {invoice.invoice_number} status {invoice.status.value} -> {status.value}"
            )
            return Return.ok(InvoiceDTO.from_entity(updated))

        except Exception as e:
            logger.error(f"Updating status of invoice {invoice_id} failed: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_STATUS_FAILED",
                    message="Failed to update invoice status",
                    reason=str(e),
                )
            )
