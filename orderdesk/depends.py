from typing import Dict
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from orderdesk.adapter.services.document_store import SqlAlchemyDocumentStore
from orderdesk.adapter.services.memory_store import InMemoryDocumentStore
from orderdesk.adapter.services.pdf_service import ReportLabPdfService
from orderdesk.app.services.document_store import DocumentStore
from orderdesk.app.services.invoice_number import InvoiceNumberGenerator

# One engine and session factory per database URI
_engines: Dict[str, AsyncEngine] = {}
_session_factories: Dict[str, sessionmaker] = {}
_memory_store = InMemoryDocumentStore()
_number_generator = InvoiceNumberGenerator()


def get_engine(db_uri: str) -> AsyncEngine:
    if db_uri not in _engines:
        _engines[db_uri] = create_async_engine(db_uri, echo=False, future=True)
    return _engines[db_uri]


def get_session_factory(db_uri: str) -> sessionmaker:
    if db_uri not in _session_factories:
        _session_factories[db_uri] = sessionmaker(
            get_engine(db_uri), class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
    return _session_factories[db_uri]


async def init_document_store(config):
    if config.STORE_BACKEND == "sqlalchemy":
        async with get_engine(config.DB_URI).begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)


def get_config(request: Request):
    return request.app.state.config


def get_document_store(config=Depends(get_config)) -> DocumentStore:
    if config.STORE_BACKEND == "memory":
        return _memory_store
    return SqlAlchemyDocumentStore(get_session_factory(config.DB_URI))


def get_pdf_service(config=Depends(get_config)) -> ReportLabPdfService:
    return ReportLabPdfService(
        currency_symbol=config.CURRENCY_SYMBOL,
        issuer_name=config.COMPANY_NAME,
        issuer_address=config.COMPANY_ADDRESS,
    )


def get_number_generator() -> InvoiceNumberGenerator:
    return _number_generator
