"""Order API Routes

FastAPI route that turns a pending order into an invoice.
"""

import base64
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from orderdesk.adapter.repositories import (
    DocumentClientRepository,
    DocumentInvoiceRepository,
    DocumentOrderRepository,
)
from orderdesk.api.error import raise_for_error
from orderdesk.app.services.document_store import DocumentStore
from orderdesk.app.services.invoice_number import InvoiceNumberGenerator
from orderdesk.app.services.pdf_service import PdfService
from orderdesk.app.use_cases.invoicing import ProcessOrder
from orderdesk.depends import (
    get_config,
    get_document_store,
    get_number_generator,
    get_pdf_service,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "/{order_id}/process",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "Invoice PDF; X-Invoice-Id and X-Invoice-Number name the new invoice"
        },
        404: {
            "description": "Order or client not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ORDER_NOT_FOUND",
                            "message": "Order with ID 9b0e7a51c2d84f6e not found"
                        }
                    }
                }
            }
        },
        409: {
            "description": "Order is no longer pending",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ORDER_ALREADY_PROCESSED",
                            "message": "Only pending orders can be processed. Current status: Completed"
                        }
                    }
                }
            }
        },
        502: {
            "description": "Invoice was created but a later step failed",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DOCUMENT_RENDER_FAILED",
                            "message": "Invoice INV-04567123-042 was created but its document could not be generated",
                            "details": {"invoice_id": "c1d2e3f4", "order_status": "Completed"}
                        }
                    }
                }
            }
        }
    }
)
async def process_order(
    order_id: str,
    store: DocumentStore = Depends(get_document_store),
    pdf_service: PdfService = Depends(get_pdf_service),
    number_generator: InvoiceNumberGenerator = Depends(get_number_generator),
    config=Depends(get_config),
):
    """
    Process a pending order into an invoice and download its PDF.

    The invoice is persisted and the order marked Completed before the
    document is rendered. A failure after the invoice is persisted
    returns 502 with the invoice id in `details`; nothing is rolled back.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Order or client not found
    - 409: Order already processed
    - 502: Partial failure
    """
    use_case = ProcessOrder(
        order_repo=DocumentOrderRepository(store),
        invoice_repo=DocumentInvoiceRepository(store),
        pdf_service=pdf_service,
        number_generator=number_generator,
        payment_term_days=config.INVOICE_DUE_DAYS,
    )
    result = await use_case.execute_by_id(order_id, DocumentClientRepository(store))

    if result.is_err():
        raise_for_error(result.error)

    processed = result.value
    return Response(
        content=base64.b64decode(processed.pdf_base64),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={processed.filename}",
            "X-Invoice-Id": processed.invoice.id,
            "X-Invoice-Number": processed.invoice.invoice_number,
        },
    )
