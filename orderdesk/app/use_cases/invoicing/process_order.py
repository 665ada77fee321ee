"""ProcessOrder Use Case

Turns a pending order into an invoice: builds and persists the invoice,
marks the order Completed with the invoice linked, then renders the
invoice document for download.
"""

import base64
import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from orderdesk.app.repositories.client_repository import ClientRepository
from orderdesk.app.repositories.invoice_repository import InvoiceRepository
from orderdesk.app.repositories.order_repository import OrderRepository
from orderdesk.app.services.invoice_number import InvoiceNumberGenerator
from orderdesk.app.services.pdf_service import PdfService
from orderdesk.domain.base import utcnow
from orderdesk.domain.client import Client
from orderdesk.domain.errors import InvoiceValidationError
from orderdesk.domain.invoice_builder import DEFAULT_PAYMENT_TERM_DAYS, build_invoice
from orderdesk.domain.order import Order, OrderStatus
from .dtos import InvoiceDTO, ProcessOrderResponseDTO

logger = logging.getLogger(__name__)


class ProcessOrder:
    """
    Use Case: Process a pending order into an invoice

    Business Rules:
    1. Only Pending orders are processed (re-read from the store first)
    2. The invoice copies the order's amounts and the client's contact data
    3. Invoice is created with status=Pending, due in 30 days
    4. The order becomes Completed and links the invoice id
    5. Rendering runs last; its failure never undoes steps 3-4

    Flow:
    1. Re-read the order and check it is still Pending
    2. Build invoice draft
    3. Persist invoice
    4. Mark order Completed
    5. Render PDF
    6. Return response

    Nothing is rolled back: a failure after step 3 leaves the invoice in
    place and is reported with its id in the error details. The Pending
    check is a read, not a conditional write, so two calls racing on the
    same order can both pass it and each create an invoice.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        invoice_repo: InvoiceRepository,
        pdf_service: PdfService,
        number_generator: InvoiceNumberGenerator,
        clock: Callable[[], datetime] = utcnow,
        payment_term_days: int = DEFAULT_PAYMENT_TERM_DAYS,
    ):
        self.order_repo = order_repo
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service
        self.number_generator = number_generator
        self.clock = clock
        self.payment_term_days = payment_term_days

    async def execute_by_id(
        self, order_id: str, client_repo: ClientRepository
    ) -> Result[ProcessOrderResponseDTO]:
        """
        Load the order and its client, then process it

        Errors:
            ORDER_NOT_FOUND, CLIENT_NOT_FOUND, plus everything execute() returns
        """
        try:
            order = await self.order_repo.get_by_id(order_id)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order with ID {order_id} not found",
                        reason="Order does not exist",
                    )
                )

            client = await client_repo.get_by_id(order.client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client with ID {order.client_id} not found",
                        reason=f"Order #{order.order_number} references a missing client",
                    )
                )
        except Exception as e:
            logger.error(f"Loading order {order_id} for processing failed: {e}")
            return Return.err(
                Error(
                    code="PROCESS_ORDER_FAILED",
                    message="Failed to load order for processing",
                    reason=str(e),
                )
            )

        return await self.execute(order, client)

    async def execute(self, order: Order, client: Client) -> Result[ProcessOrderResponseDTO]:
        """
        Execute order processing

        Args:
            order: Order to invoice
            client: Client the order belongs to

        Returns:
            Result[ProcessOrderResponseDTO]: invoice details and PDF, or error

        Errors:
            ORDER_NOT_FOUND: order no longer exists
            ORDER_ALREADY_PROCESSED: order is not Pending
            INVOICE_VALIDATION_FAILED: order/client cannot be invoiced
            INVOICE_PERSIST_FAILED: store rejected the invoice
            ORDER_UPDATE_FAILED: invoice saved, order not updated
            DOCUMENT_RENDER_FAILED: invoice saved and order completed,
                document not produced
        """
        # Step 1: Check the stored order is still Pending
        try:
            current = await self.order_repo.get_by_id(order.id)
        except Exception as e:
            logger.error(f"Reading order {order.id} failed: {e}")
            return Return.err(
                Error(
                    code="PROCESS_ORDER_FAILED",
                    message=f"Failed to read order #{order.order_number}",
                    reason=str(e),
                )
            )

        if not current:
            return Return.err(
                Error(
                    code="ORDER_NOT_FOUND",
                    message=f"Order with ID {order.id} not found",
                    reason="Order does not exist",
                )
            )

        if current.status != OrderStatus.PENDING:
            logger.warning(
                f"Order #{current.order_number} is {current.status.value}, not processing"
            )
            return Return.err(
                Error(
                    code="ORDER_ALREADY_PROCESSED",
                    message=f"Only pending orders can be processed. "
                            f"Current status: {current.status.value}",
                    reason="Order has already been processed",
                    details={"invoice_id": current.invoice_id},
                )
            )

        # Step 2: Build invoice draft
        try:
            draft = build_invoice(
                order=current,
                client=client,
                invoice_number=self.number_generator.generate(),
                issued_at=self.clock(),
                payment_term_days=self.payment_term_days,
            )
        except InvoiceValidationError as e:
            logger.warning(f"Order #{current.order_number} cannot be invoiced: {e}")
            return Return.err(
                Error(
                    code="INVOICE_VALIDATION_FAILED",
                    message=f"Order #{current.order_number} cannot be invoiced",
                    reason=str(e),
                )
            )

        # Step 3: Persist invoice
        try:
            invoice = await self.invoice_repo.create(draft)
        except Exception as e:
            logger.error(f"Persisting invoice {draft.invoice_number} failed: {e}")
            return Return.err(
                Error(
                    code="INVOICE_PERSIST_FAILED",
                    message=f"Failed to save invoice for order #{current.order_number}",
                    reason=str(e),
                )
            )

        partial = {
            "invoice_id": invoice.id,
            "invoice_number": invoice.invoice_number,
            "order_id": current.id,
        }

        # Step 4: Mark order Completed
        try:
            await self.order_repo.mark_completed(current.id, invoice.id)
        except Exception as e:
            logger.error(
                f"Invoice {invoice.invoice_number} saved but order "
                f"#{current.order_number} was not updated: {e}"
            )
            return Return.err(
                Error(
                    code="ORDER_UPDATE_FAILED",
                    message=f"Invoice {invoice.invoice_number} was created but order "
                            f"#{current.order_number} could not be marked Completed",
                    reason=str(e),
                    details=partial,
                )
            )

        logger.info(
            f"Order #{current.order_number} completed with invoice {invoice.invoice_number}"
        )

        # Step 5: Render PDF
        try:
            pdf_bytes = self.pdf_service.render_invoice(invoice)
        except Exception as e:
            logger.error(f"Document for invoice {invoice.invoice_number} not generated: {e}")
            return Return.err(
                Error(
                    code="DOCUMENT_RENDER_FAILED",
                    message=f"Invoice {invoice.invoice_number} was created but its "
                            f"document could not be generated",
                    reason=str(e),
                    details={**partial, "order_status": OrderStatus.COMPLETED.value},
                )
            )

        # Step 6: Build response
        response = ProcessOrderResponseDTO(
            order_id=current.id,
            order_status=OrderStatus.COMPLETED.value,
            invoice=InvoiceDTO.from_entity(invoice),
            filename=self.pdf_service.filename_for(invoice),
            pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
        )

        return Return.ok(response)
