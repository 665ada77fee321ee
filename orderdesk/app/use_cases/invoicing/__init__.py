"""Invoicing use cases"""
from .create_client import CreateClient
from .list_clients import ListClients, ClientFilter
from .delete_client import DeleteClient
from .create_order import CreateOrder
from .list_client_orders import ListClientOrders
from .process_order import ProcessOrder
from .list_invoices import ListInvoices
from .invoice_stats import InvoiceStats
from .update_invoice_status import UpdateInvoiceStatus
from .delete_invoice import DeleteInvoice
from .download_invoice import DownloadInvoice
from .dtos import (
    LineItemInputDTO,
    LineItemDTO,
    CreateClientCommandDTO,
    ClientDTO,
    ListClientsResponseDTO,
    CreateOrderCommandDTO,
    OrderDTO,
    ListOrdersResponseDTO,
    InvoiceDTO,
    ListInvoicesResponseDTO,
    InvoiceStatsDTO,
    UpdateInvoiceStatusCommandDTO,
    InvoiceDocumentDTO,
    ProcessOrderResponseDTO,
)

__all__ = [
    "CreateClient",
    "ListClients",
    "ClientFilter",
    "DeleteClient",
    "CreateOrder",
    "ListClientOrders",
    "ProcessOrder",
    "ListInvoices",
    "InvoiceStats",
    "UpdateInvoiceStatus",
    "DeleteInvoice",
    "DownloadInvoice",
    "LineItemInputDTO",
    "LineItemDTO",
    "CreateClientCommandDTO",
    "ClientDTO",
    "ListClientsResponseDTO",
    "CreateOrderCommandDTO",
    "OrderDTO",
    "ListOrdersResponseDTO",
    "InvoiceDTO",
    "ListInvoicesResponseDTO",
    "InvoiceStatsDTO",
    "UpdateInvoiceStatusCommandDTO",
    "InvoiceDocumentDTO",
    "ProcessOrderResponseDTO",
]
