from .base import BaseModel, generate_uuid, utcnow
from .client import Client, ClientSnapshot, ClientStatus
from .errors import DomainError, InvoiceValidationError, DocumentRenderError
from .invoice import Invoice, InvoiceStatus
from .invoice_builder import build_invoice
from .line_item import LineItem
from .money import Totals, compute_totals, round_money
from .order import Order, OrderStatus

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utcnow",
    "Client",
    "ClientSnapshot",
    "ClientStatus",
    "DomainError",
    "InvoiceValidationError",
    "DocumentRenderError",
    "Invoice",
    "InvoiceStatus",
    "build_invoice",
    "LineItem",
    "Totals",
    "compute_totals",
    "round_money",
    "Order",
    "OrderStatus",
]
