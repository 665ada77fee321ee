import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from orderdesk.adapter.repositories import (
    DocumentClientRepository,
    DocumentInvoiceRepository,
    DocumentOrderRepository,
)
from orderdesk.adapter.services.document_store import SqlAlchemyDocumentStore
from orderdesk.adapter.services.memory_store import InMemoryDocumentStore
from orderdesk.depends import get_document_store


class ApiTestConfig(ApplicationConfig):
    AUTH_DISABLED = False
    CORS_ORIGINS = []
    API_PREFIX = "/api"
    DEFAULT_TAX_RATE = "0.2"
    INVOICE_DUE_DAYS = 30


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a SQLite test database in a temporary directory"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'orderdesk_test.db'}", echo=False, future=True
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_store(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    return SqlAlchemyDocumentStore(Session)


@pytest_asyncio.fixture
async def memory_store():
    return InMemoryDocumentStore()


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def store(request, tmp_path):
    """Each store backend in turn"""
    if request.param == "memory":
        yield InMemoryDocumentStore()
        return

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'orderdesk_param.db'}", echo=False, future=True
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    yield SqlAlchemyDocumentStore(Session)

    await engine.dispose()


@pytest_asyncio.fixture
async def repos(memory_store):
    """Client, order and invoice repositories over one in-memory store"""
    return (
        DocumentClientRepository(memory_store),
        DocumentOrderRepository(memory_store),
        DocumentInvoiceRepository(memory_store),
    )


@pytest_asyncio.fixture
async def client(memory_store):
    """Create test client with the store dependency overridden"""
    from orderdesk.api.app import create_app

    app = create_app(ApiTestConfig)

    app.dependency_overrides[get_document_store] = lambda: memory_store

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-User-Id": "user_1"},
    ) as ac:
        yield ac
