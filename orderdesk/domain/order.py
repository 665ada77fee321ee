"""Order Domain Entity

Tracks a client's order and the financial snapshot invoices are built from.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from sqlmodel import Field
from orderdesk.domain.base import BaseModel, utcnow
from orderdesk.domain.line_item import LineItem


class OrderStatus(str, Enum):
    """Order status types"""
    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Order(BaseModel):
    """
    Order - items a client ordered, with computed totals

    Domain Rules:
    - subtotal = sum(item.total_price)
    - tax_amount = round(subtotal * tax_rate, 2)
    - total_amount = subtotal + tax_amount
    - Created as Pending; moves to Completed once, when invoiced
    - invoice_id is set on completion and never cleared
    """

    id: Optional[str] = Field(default=None, description="Store-assigned identifier")

    client_id: str = Field(default="", description="Client this order belongs to")

    client_reference_code: str = Field(
        default="",
        description="Client business identifier at order time"
    )

    client_name: str = Field(default="", description="Client name at order time")

    order_number: str = Field(default="", description="Display number (e.g., ORD-12345678-042)")

    items: List[LineItem] = Field(default_factory=list)

    subtotal: Decimal = Field(default=Decimal("0"))

    tax_rate: Decimal = Field(
        default=Decimal("0.2"),
        description="Tax rate as a fraction (0.2 = 20%)"
    )

    tax_amount: Decimal = Field(default=Decimal("0"))

    total_amount: Decimal = Field(default=Decimal("0"))

    status: OrderStatus = Field(default=OrderStatus.PENDING)

    created_at: datetime = Field(default_factory=utcnow)

    updated_at: datetime = Field(default_factory=utcnow)

    invoice_id: Optional[str] = Field(
        default=None,
        description="Invoice generated from this order, once completed"
    )

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING
