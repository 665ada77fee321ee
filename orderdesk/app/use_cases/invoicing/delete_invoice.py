"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return, Error
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Deletion does not cascade: the originating order stays Completed and
    keeps pointing at the deleted invoice id.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceDTO]:
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

            await self.invoice_repo.delete(invoice_id)
            logger.info(f"Invoice {invoice.invoice_number} deleted")
            return Return.ok(InvoiceDTO.from_entity(invoice))

        except Exception as e:
            logger.error(f"Deleting invoice {invoice_id} failed: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
