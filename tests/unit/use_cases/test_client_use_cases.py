"""Unit tests for CreateClient, ListClients and DeleteClient use cases"""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from orderdesk.app.use_cases.invoicing.create_client import CreateClient
from orderdesk.app.use_cases.invoicing.delete_client import DeleteClient
from orderdesk.app.use_cases.invoicing.dtos import CreateClientCommandDTO
from orderdesk.app.use_cases.invoicing.list_clients import ClientFilter, ListClients
from orderdesk.domain.client import Client, ClientStatus
from orderdesk.domain.order import Order


@pytest.fixture
def mock_client_repo():
    return MagicMock()


@pytest.fixture
def mock_order_repo():
    return MagicMock()


@pytest.fixture
def clients():
    """Newest first, as the repository returns them"""
    return [
        Client(id="c3", reference_code="CL-3", name="Gamma", created_at=datetime(2024, 3, 1)),
        Client(
            id="c2",
            reference_code="CL-2",
            name="Beta",
            status=ClientStatus.INACTIVE,
            created_at=datetime(2024, 2, 1),
        ),
        Client(id="c1", reference_code="CL-1", name="Alpha", created_at=datetime(2024, 1, 1)),
    ]


def pending_orders(counts):
    async def get_pending_by_client(client_id):
        return [Order(client_id=client_id) for _ in range(counts.get(client_id, 0))]

    return get_pending_by_client


@pytest.mark.asyncio
class TestCreateClient:
    """Test client registration"""

    async def test_creates_client(self, mock_client_repo):
        # Arrange
        mock_client_repo.list_all = AsyncMock(return_value=[])
        mock_client_repo.create = AsyncMock(
            side_effect=lambda client: client.model_copy(update={"id": "c1"})
        )
        command = CreateClientCommandDTO(
            reference_code=" CL-00042 ",
            name="Acme Corp ",
            email="billing@acme.test",
        )

        # Act
        result = await CreateClient(mock_client_repo).execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.id == "c1"
        assert result.value.reference_code == "CL-00042"
        assert result.value.name == "Acme Corp"
        assert result.value.status == "Active"

    async def test_duplicate_reference_code_is_rejected(self, mock_client_repo, clients):
        """
        Given: A client with reference code CL-1 exists
        When: Another client is created as cl-1
        Then: CLIENT_ALREADY_EXISTS is returned
        """
        # Arrange
        mock_client_repo.list_all = AsyncMock(return_value=clients)
        mock_client_repo.create = AsyncMock()

        # Act
        result = await CreateClient(mock_client_repo).execute(
            CreateClientCommandDTO(reference_code="cl-1", name="Copy")
        )

        # Assert
        assert result.error.code == "CLIENT_ALREADY_EXISTS"
        mock_client_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestListClients:
    """Test client listing with pending order counts"""

    async def test_pending_clients_sort_last(self, mock_client_repo, mock_order_repo, clients):
        """
        Given: Gamma has 2 pending orders, the others none
        When: All clients are listed
        Then: Gamma comes last; the others keep newest-first order
        """
        # Arrange
        mock_client_repo.list_all = AsyncMock(return_value=clients)
        mock_order_repo.get_pending_by_client = AsyncMock(side_effect=pending_orders({"c3": 2}))

        # Act
        result = await ListClients(mock_client_repo, mock_order_repo).execute()

        # Assert
        assert [c.id for c in result.value.clients] == ["c2", "c1", "c3"]
        assert [c.pending_orders_count for c in result.value.clients] == [0, 0, 2]
        assert result.value.total == 3

    @pytest.mark.parametrize(
        "client_filter,expected",
        [
            (ClientFilter.ALL, ["c2", "c3", "c1"]),
            (ClientFilter.ACTIVE, ["c3", "c1"]),
            (ClientFilter.INACTIVE, ["c2"]),
            (ClientFilter.PENDING_ORDERS, ["c3", "c1"]),
        ],
    )
    async def test_filters(self, mock_client_repo, mock_order_repo, clients, client_filter, expected):
        # Arrange
        mock_client_repo.list_all = AsyncMock(return_value=clients)
        mock_order_repo.get_pending_by_client = AsyncMock(
            side_effect=pending_orders({"c3": 1, "c1": 3})
        )

        # Act
        result = await ListClients(mock_client_repo, mock_order_repo).execute(client_filter)

        # Assert
        assert [c.id for c in result.value.clients] == expected

    async def test_store_failure(self, mock_client_repo, mock_order_repo):
        mock_client_repo.list_all = AsyncMock(side_effect=RuntimeError("offline"))

        result = await ListClients(mock_client_repo, mock_order_repo).execute()

        assert result.error.code == "LIST_CLIENTS_FAILED"


@pytest.mark.asyncio
class TestDeleteClient:
    """Test client deletion"""

    async def test_deletes_existing_client(self, mock_client_repo, clients):
        mock_client_repo.get_by_id = AsyncMock(return_value=clients[0])
        mock_client_repo.delete = AsyncMock()

        result = await DeleteClient(mock_client_repo).execute("c3")

        assert result.value.id == "c3"
        mock_client_repo.delete.assert_awaited_once_with("c3")

    async def test_unknown_client(self, mock_client_repo):
        mock_client_repo.get_by_id = AsyncMock(return_value=None)
        mock_client_repo.delete = AsyncMock()

        result = await DeleteClient(mock_client_repo).execute("missing")

        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_client_repo.delete.assert_not_called()
