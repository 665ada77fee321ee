"""Invoice Domain Entity

Tracks invoices issued from completed orders and their payment status.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import model_validator
from sqlmodel import Field
from orderdesk.domain.base import BaseModel, utcnow
from orderdesk.domain.client import ClientSnapshot
from orderdesk.domain.line_item import LineItem


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class Invoice(BaseModel):
    """
    Invoice - billing document issued for an order

    Domain Rules:
    - invoice_number is a display label, not guaranteed unique
    - client and items are value copies taken at issue time
    - Amounts come from the order snapshot and are never recomputed
    - due_date >= issue_date
    - status changes independently of the originating order
    """

    id: Optional[str] = Field(default=None, description="Store-assigned identifier")

    invoice_number: str = Field(
        description="Display number (e.g., INV-12345678-042)"
    )

    order_id: str = Field(default="", description="Order this invoice was issued from")

    client_id: str = Field(default="")

    client_reference_code: str = Field(default="")

    client: ClientSnapshot = Field(default_factory=ClientSnapshot)

    items: List[LineItem] = Field(default_factory=list)

    subtotal: Decimal = Field(default=Decimal("0"))

    tax_rate: Decimal = Field(default=Decimal("0"))

    tax_amount: Decimal = Field(default=Decimal("0"))

    total_amount: Decimal = Field(default=Decimal("0"))

    issue_date: datetime = Field(default_factory=utcnow)

    due_date: datetime = Field(default_factory=utcnow)

    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)

    notes: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_due_date(self) -> "Invoice":
        if self.due_date < self.issue_date:
            raise ValueError("due_date must not be before issue_date")
        return self
