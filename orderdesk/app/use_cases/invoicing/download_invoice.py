"""DownloadInvoice Use Case

Renders the PDF of an existing invoice.
"""

import base64
from libs.result import Result, Return, Error
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.app.services.pdf_service import PdfService
from orderdesk.domain.base import utcnow
from orderdesk.domain.errors import DocumentRenderError
from .dtos import InvoiceDocumentDTO


class DownloadInvoice:
    """
    Use Case: Generate invoice PDF

    Business Rules:
    1. Invoice must exist
    2. Any status can be rendered
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice by ID
    2. Generate PDF using PDF service
    3. Return response with PDF as base64
    """

    def __init__(self, invoice_repo: InvoiceRepository, pdf_service: PdfService):
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service

    async def execute(self, invoice_id: str) -> Result[InvoiceDocumentDTO]:
        """
        Execute invoice document generation

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoiceDocumentDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Generate PDF
            pdf_bytes = self.pdf_service.render_invoice(invoice)

            # Step 3: Build response
            return Return.ok(
                InvoiceDocumentDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    filename=self.pdf_service.filename_for(invoice),
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utcnow(),
                )
            )

        except DocumentRenderError as e:
            return Return.err(
                Error(
                    code="DOCUMENT_RENDER_FAILED",
                    message=f"Failed to generate document for invoice {invoice_id}",
                    reason=str(e),
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="DOWNLOAD_INVOICE_FAILED",
                    message="Failed to generate invoice document",
                    reason=str(e),
                )
            )
