from .client_repository import ClientRepository
from .order_repository import OrderRepository
from .invoice_repository import InvoiceRepository

__all__ = [
    "ClientRepository",
    "OrderRepository",
    "InvoiceRepository",
]
