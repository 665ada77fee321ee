"""Invoice record builder

Turns a pending order and its client into an unsaved invoice.
"""

from datetime import datetime, timedelta
from typing import Optional
from orderdesk.domain.client import Client
from orderdesk.domain.errors import InvoiceValidationError
from orderdesk.domain.invoice import Invoice, InvoiceStatus
from orderdesk.domain.order import Order

DEFAULT_PAYMENT_TERM_DAYS = 30


def default_notes(order: Order) -> str:
    return f"Generated from Order #{order.order_number}"


def build_invoice(
    order: Order,
    client: Client,
    invoice_number: str,
    issued_at: datetime,
    notes: Optional[str] = None,
    payment_term_days: int = DEFAULT_PAYMENT_TERM_DAYS,
) -> Invoice:
    """
    Build a draft invoice from an order

    The order's subtotal, tax rate, tax and total are taken as they are:
    the order's financial snapshot is authoritative at conversion time.
    Item totals are recomputed so a stale stored total_price never reaches
    the invoice. Neither input is mutated.

    Args:
        order: Order being invoiced
        client: Client the order belongs to
        invoice_number: Display number for the invoice
        issued_at: Issue timestamp
        notes: Optional notes, defaults to a reference to the order number
        payment_term_days: Days between issue and due date

    Returns:
        Unsaved Invoice (id is None) with status Pending

    Raises:
        InvoiceValidationError: order has no items, client has no name,
            or the payment term is negative
    """
    if not order.items:
        raise InvoiceValidationError(
            f"Order #{order.order_number or order.id} has no line items"
        )
    if not client.name or not client.name.strip():
        raise InvoiceValidationError("Client name is required to issue an invoice")
    if payment_term_days < 0:
        raise InvoiceValidationError(
            f"Payment term must not be negative, got {payment_term_days} days"
        )

    return Invoice(
        invoice_number=invoice_number,
        order_id=order.id or "",
        client_id=client.id or order.client_id,
        client_reference_code=client.reference_code,
        client=client.snapshot(),
        items=[item.repriced() for item in order.items],
        subtotal=order.subtotal,
        tax_rate=order.tax_rate,
        tax_amount=order.tax_amount,
        total_amount=order.total_amount,
        issue_date=issued_at,
        due_date=issued_at + timedelta(days=payment_term_days),
        status=InvoiceStatus.PENDING,
        notes=notes if notes is not None else default_notes(order),
        created_at=issued_at,
        updated_at=issued_at,
    )
