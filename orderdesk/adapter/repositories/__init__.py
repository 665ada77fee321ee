from .client_repository import DocumentClientRepository
from .order_repository import DocumentOrderRepository
from .invoice_repository import DocumentInvoiceRepository

__all__ = [
    "DocumentClientRepository",
    "DocumentOrderRepository",
    "DocumentInvoiceRepository",
]
