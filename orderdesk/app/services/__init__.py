from .document_store import (
    DocumentStore,
    StoreError,
    DocumentNotFoundError,
    CLIENTS,
    ORDERS,
    INVOICES,
)
from .invoice_number import InvoiceNumberGenerator
from .pdf_service import PdfService

__all__ = [
    "DocumentStore",
    "StoreError",
    "DocumentNotFoundError",
    "CLIENTS",
    "ORDERS",
    "INVOICES",
    "InvoiceNumberGenerator",
    "PdfService",
]
