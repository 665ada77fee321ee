"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from orderdesk.domain.client import Client, ClientStatus
from orderdesk.domain.invoice import Invoice, InvoiceStatus
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.order import Order, OrderStatus


class LineItemInputDTO(BaseModel):
    """One line of a new order as entered by the user"""

    description: str = Field(
        ...,
        min_length=1,
        description="Line item description"
    )

    quantity: Decimal = Field(
        ...,
        gt=0,
        description="Quantity (must be > 0)"
    )

    unit_price: Decimal = Field(
        ...,
        ge=0,
        description="Price per unit (must be >= 0)"
    )


class LineItemDTO(BaseModel):
    description: str
    quantity: Decimal
    unit_price: Decimal
    total_price: Decimal

    @classmethod
    def from_entity(cls, item: LineItem) -> "LineItemDTO":
        return cls(
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total_price=item.total_price,
        )


class CreateClientCommandDTO(BaseModel):
    """
    Command DTO for creating a client

    Used as input to CreateClient use case.
    """

    reference_code: str = Field(
        ...,
        min_length=1,
        description="Unique business identifier"
    )

    name: str = Field(..., min_length=1, description="Client display name")

    email: str = Field(default="", description="Contact email")

    phone: str = Field(default="", description="Contact phone")

    location: str = Field(default="", description="Address or city")

    status: ClientStatus = Field(default=ClientStatus.ACTIVE)

    class Config:
        json_schema_extra = {
            "example": {
                "reference_code": "CL-00042",
                "name": "Acme Corp",
                "email": "billing@acme.test",
                "phone": "+1 555 0100",
                "location": "Springfield",
                "status": "Active"
            }
        }


class ClientDTO(BaseModel):
    """
    Response DTO for a client

    pending_orders_count is only filled in by ListClients.
    """

    id: str
    reference_code: str
    name: str
    email: str
    phone: str
    location: str
    status: str
    pending_orders_count: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client, pending_orders_count: int = 0) -> "ClientDTO":
        return cls(
            id=client.id,
            reference_code=client.reference_code,
            name=client.name,
            email=client.email,
            phone=client.phone,
            location=client.location,
            status=client.status.value,
            pending_orders_count=pending_orders_count,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


class ListClientsResponseDTO(BaseModel):
    clients: List[ClientDTO]
    total: int


class CreateOrderCommandDTO(BaseModel):
    """
    Command DTO for creating an order

    Used as input to CreateOrder use case. When tax_rate is omitted the
    configured default rate applies.
    """

    client_id: str = Field(..., min_length=1, description="Client identifier")

    items: List[LineItemInputDTO] = Field(
        ...,
        min_length=1,
        description="Ordered line items (at least one)"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Tax rate as a fraction (0.2 = 20%)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "5f1c0d3b9a2e4c8f",
                "items": [
                    {"description": "Widget", "quantity": "2", "unit_price": "10.00"}
                ],
                "tax_rate": "0.2"
            }
        }


class OrderDTO(BaseModel):
    """Response DTO for an order"""

    id: str
    client_id: str
    client_reference_code: str
    client_name: str
    order_number: str
    items: List[LineItemDTO]
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    status: str
    invoice_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            client_id=order.client_id,
            client_reference_code=order.client_reference_code,
            client_name=order.client_name,
            order_number=order.order_number,
            items=[LineItemDTO.from_entity(item) for item in order.items],
            subtotal=order.subtotal,
            tax_rate=order.tax_rate,
            tax_amount=order.tax_amount,
            total_amount=order.total_amount,
            status=order.status.value,
            invoice_id=order.invoice_id,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class ListOrdersResponseDTO(BaseModel):
    orders: List[OrderDTO]
    total: int


class InvoiceDTO(BaseModel):
    """Response DTO for an invoice"""

    id: str
    invoice_number: str
    order_id: str
    client_id: str
    client_reference_code: str
    client_name: str
    client_email: str
    client_phone: str
    client_location: str
    items: List[LineItemDTO]
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    issue_date: datetime
    due_date: datetime
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            order_id=invoice.order_id,
            client_id=invoice.client_id,
            client_reference_code=invoice.client_reference_code,
            client_name=invoice.client.name,
            client_email=invoice.client.email,
            client_phone=invoice.client.phone,
            client_location=invoice.client.location,
            items=[LineItemDTO.from_entity(item) for item in invoice.items],
            subtotal=invoice.subtotal,
            tax_rate=invoice.tax_rate,
            tax_amount=invoice.tax_amount,
            total_amount=invoice.total_amount,
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            status=invoice.status.value,
            notes=invoice.notes,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceDTO]
    total: int


class InvoiceStatsDTO(BaseModel):
    """
    Response DTO for invoice dashboard figures

    total_revenue only counts Paid invoices.
    """

    total_invoices: int = Field(..., description="Number of invoices")

    paid_invoices: int = Field(..., description="Number of Paid invoices")

    total_revenue: Decimal = Field(..., description="Sum of total_amount over Paid invoices")


class UpdateInvoiceStatusCommandDTO(BaseModel):
    status: InvoiceStatus = Field(..., description="New status (Paid, Pending, Overdue)")


class InvoiceDocumentDTO(BaseModel):
    """
    Response DTO for a rendered invoice document

    Returned by DownloadInvoice.
    """

    invoice_id: str
    invoice_number: str
    filename: str = Field(..., description="Download file name (<invoice_number>.pdf)")
    pdf_base64: str = Field(..., description="Base64-encoded PDF document")
    generated_at: datetime


class ProcessOrderResponseDTO(BaseModel):
    """
    Response DTO for order processing

    Returned by ProcessOrder once the invoice is persisted, the order is
    completed and the document is rendered.
    """

    order_id: str = Field(..., description="Processed order")

    order_status: str = Field(..., description="Order status after processing")

    invoice: InvoiceDTO = Field(..., description="Invoice created from the order")

    filename: str = Field(..., description="Download file name")

    pdf_base64: str = Field(..., description="Base64-encoded PDF document")

    class Config:
        json_schema_extra = {
            "example": {
                "order_id": "9b0e7a51c2d84f6e",
                "order_status": "Completed",
                "invoice": {"invoice_number": "INV-04567123-042", "status": "Pending"},
                "filename": "INV-04567123-042.pdf",
                "pdf_base64": "JVBERi0xLjQKJeLjz9..."
            }
        }
