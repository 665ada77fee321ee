"""Unit tests for CreateOrder and ListClientOrders use cases"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from orderdesk.app.use_cases.invoicing.create_order import CreateOrder
from orderdesk.app.use_cases.invoicing.dtos import CreateOrderCommandDTO, LineItemInputDTO
from orderdesk.app.use_cases.invoicing.list_client_orders import ListClientOrders
from orderdesk.domain.client import Client
from orderdesk.domain.order import Order, OrderStatus


@pytest.fixture
def mock_client_repo():
    return MagicMock()


@pytest.fixture
def mock_order_repo():
    return MagicMock()


@pytest.fixture
def mock_number_generator():
    generator = MagicMock()
    generator.order_number = MagicMock(return_value="ORD-04567000-001")
    return generator


@pytest.fixture
def create_order_use_case(mock_client_repo, mock_order_repo, mock_number_generator):
    return CreateOrder(
        mock_client_repo,
        mock_order_repo,
        mock_number_generator,
        default_tax_rate=Decimal("0.2"),
    )


@pytest.fixture
def sample_client():
    return Client(id="client_1", reference_code="CL-00042", name="Acme Corp")


def stored(order):
    return order.model_copy(update={"id": "order_1"})


@pytest.mark.asyncio
class TestCreateOrder:
    """Test order creation"""

    async def test_creates_pending_order_with_totals(
        self, create_order_use_case, mock_client_repo, mock_order_repo, sample_client
    ):
        """
        Given: An existing client and two line items
        When: CreateOrder is executed without a tax rate
        Then: Order is Pending with item totals and 20% tax computed
        """
        # Arrange
        mock_client_repo.get_by_id = AsyncMock(return_value=sample_client)
        mock_order_repo.create = AsyncMock(side_effect=stored)
        command = CreateOrderCommandDTO(
            client_id="client_1",
            items=[
                LineItemInputDTO(description=" Widget ", quantity=Decimal("2"), unit_price=Decimal("10.00")),
                LineItemInputDTO(description="Setup", quantity=Decimal("1"), unit_price=Decimal("5.555")),
            ],
        )

        # Act
        result = await create_order_use_case.execute(command)

        # Assert
        assert result.is_ok()
        order = result.value
        assert order.id == "order_1"
        assert order.order_number == "ORD-04567000-001"
        assert order.status == "Pending"
        assert order.client_reference_code == "CL-00042"
        assert order.client_name == "Acme Corp"
        assert order.items[0].description == "Widget"
        assert order.items[0].total_price == Decimal("20.00")
        assert order.items[1].total_price == Decimal("5.56")
        assert order.subtotal == Decimal("25.56")
        assert order.tax_rate == Decimal("0.2")
        assert order.tax_amount == Decimal("5.11")
        assert order.total_amount == Decimal("30.67")

    async def test_explicit_tax_rate(
        self, create_order_use_case, mock_client_repo, mock_order_repo, sample_client
    ):
        # Arrange
        mock_client_repo.get_by_id = AsyncMock(return_value=sample_client)
        mock_order_repo.create = AsyncMock(side_effect=stored)
        command = CreateOrderCommandDTO(
            client_id="client_1",
            items=[LineItemInputDTO(description="Widget", quantity=Decimal("1"), unit_price=Decimal("100"))],
            tax_rate=Decimal("0"),
        )

        # Act
        result = await create_order_use_case.execute(command)

        # Assert
        assert result.value.tax_amount == Decimal("0.00")
        assert result.value.total_amount == Decimal("100.00")

    async def test_unknown_client(self, create_order_use_case, mock_client_repo, mock_order_repo):
        # Arrange
        mock_client_repo.get_by_id = AsyncMock(return_value=None)
        mock_order_repo.create = AsyncMock()
        command = CreateOrderCommandDTO(
            client_id="missing",
            items=[LineItemInputDTO(description="Widget", quantity=Decimal("1"), unit_price=Decimal("1"))],
        )

        # Act
        result = await create_order_use_case.execute(command)

        # Assert
        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_order_repo.create.assert_not_called()

    async def test_store_failure(
        self, create_order_use_case, mock_client_repo, mock_order_repo, sample_client
    ):
        mock_client_repo.get_by_id = AsyncMock(return_value=sample_client)
        mock_order_repo.create = AsyncMock(side_effect=RuntimeError("write failed"))
        command = CreateOrderCommandDTO(
            client_id="client_1",
            items=[LineItemInputDTO(description="Widget", quantity=Decimal("1"), unit_price=Decimal("1"))],
        )

        result = await create_order_use_case.execute(command)

        assert result.error.code == "CREATE_ORDER_FAILED"


class TestCreateOrderCommandValidation:
    """Test command DTO validation"""

    def test_items_are_required(self):
        with pytest.raises(ValueError):
            CreateOrderCommandDTO(client_id="client_1", items=[])

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValueError):
            LineItemInputDTO(description="Widget", quantity=Decimal("0"), unit_price=Decimal("1"))


@pytest.mark.asyncio
class TestListClientOrders:
    """Test listing a client's orders"""

    async def test_newest_first(self, mock_client_repo, mock_order_repo, sample_client):
        # Arrange
        older = Order(id="o1", client_id="client_1", created_at=datetime(2024, 1, 1))
        newer = Order(
            id="o2",
            client_id="client_1",
            status=OrderStatus.COMPLETED,
            invoice_id="inv_1",
            created_at=datetime(2024, 2, 1),
        )
        mock_client_repo.get_by_id = AsyncMock(return_value=sample_client)
        mock_order_repo.get_by_client = AsyncMock(return_value=[older, newer])

        # Act
        result = await ListClientOrders(mock_client_repo, mock_order_repo).execute("client_1")

        # Assert
        assert [order.id for order in result.value.orders] == ["o2", "o1"]
        assert result.value.total == 2
        assert result.value.orders[0].invoice_id == "inv_1"

    async def test_unknown_client(self, mock_client_repo, mock_order_repo):
        mock_client_repo.get_by_id = AsyncMock(return_value=None)

        result = await ListClientOrders(mock_client_repo, mock_order_repo).execute("missing")

        assert result.error.code == "CLIENT_NOT_FOUND"
