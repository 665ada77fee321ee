"""Service implementations"""
from .document_store import SqlAlchemyDocumentStore, StoredDocument
from .memory_store import InMemoryDocumentStore
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyDocumentStore",
    "StoredDocument",
    "InMemoryDocumentStore",
    "ReportLabPdfService",
]
