"""Invoice API Routes

FastAPI routes for listing, updating, deleting and downloading invoices.
"""

import base64
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from orderdesk.adapter.repositories import DocumentInvoiceRepository
from orderdesk.api.error import raise_for_error
from orderdesk.app.services.document_store import DocumentStore
from orderdesk.app.services.pdf_service import PdfService
from orderdesk.app.use_cases.invoicing import (
    DeleteInvoice,
    DownloadInvoice,
    InvoiceDTO,
    InvoiceStats,
    InvoiceStatsDTO,
    ListInvoices,
    ListInvoicesResponseDTO,
    UpdateInvoiceStatus,
    UpdateInvoiceStatusCommandDTO,
)
from orderdesk.depends import get_document_store, get_pdf_service
from orderdesk.domain.invoice import InvoiceStatus

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    invoice_status: Optional[InvoiceStatus] = Query(None, alias="status"),
    reference_code: str = Query("", description="Client reference code fragment"),
    store: DocumentStore = Depends(get_document_store),
):
    """
    List invoices newest first.

    **Query parameters:**
    - `status` (optional): Paid, Pending or Overdue
    - `reference_code` (optional): case-insensitive match on the client reference code
    """
    use_case = ListInvoices(DocumentInvoiceRepository(store))
    result = await use_case.execute(status=invoice_status, reference_code=reference_code)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/stats", response_model=InvoiceStatsDTO)
async def invoice_stats(store: DocumentStore = Depends(get_document_store)):
    """Invoice count, paid count and revenue from paid invoices."""
    result = await InvoiceStats(DocumentInvoiceRepository(store)).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{invoice_id}/status", response_model=InvoiceDTO)
async def update_invoice_status(
    invoice_id: str,
    request: UpdateInvoiceStatusCommandDTO,
    store: DocumentStore = Depends(get_document_store),
):
    """Set an invoice's payment status."""
    use_case = UpdateInvoiceStatus(DocumentInvoiceRepository(store))
    result = await use_case.execute(invoice_id, request.status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{invoice_id}", response_model=InvoiceDTO)
async def delete_invoice(
    invoice_id: str,
    store: DocumentStore = Depends(get_document_store),
):
    """Delete an invoice. The order it came from is left as is."""
    use_case = DeleteInvoice(DocumentInvoiceRepository(store))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice with ID c1d2e3f4 not found"
                        }
                    }
                }
            }
        }
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    store: DocumentStore = Depends(get_document_store),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """Download an existing invoice as a PDF file."""
    use_case = DownloadInvoice(DocumentInvoiceRepository(store), pdf_service)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(
        content=base64.b64decode(result.value.pdf_base64),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={result.value.filename}"
        },
    )
