"""Unit tests for Client, Order, Invoice and LineItem entities"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from pydantic import ValidationError
from orderdesk.domain.client import Client, ClientStatus
from orderdesk.domain.invoice import Invoice, InvoiceStatus
from orderdesk.domain.line_item import LineItem
from orderdesk.domain.order import Order, OrderStatus


class TestLineItem:
    """Test LineItem value object"""

    def test_priced_derives_total(self):
        """Test total_price = quantity * unit_price rounded to cents"""
        # Act
        item = LineItem.priced("Consulting", Decimal("2.5"), Decimal("80.333"))

        # Assert
        assert item.total_price == Decimal("200.83")

    def test_negative_quantity_is_rejected(self):
        """Test quantity must be non-negative"""
        with pytest.raises(ValidationError):
            LineItem(description="Bad", quantity=Decimal("-1"), unit_price=Decimal("1"))

    def test_negative_unit_price_is_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(description="Bad", quantity=Decimal("1"), unit_price=Decimal("-0.01"))

    def test_repriced_returns_independent_copy(self):
        """Test repriced() fixes a stale total without touching the original"""
        # Arrange
        item = LineItem(
            description="Widget",
            quantity=Decimal("2"),
            unit_price=Decimal("10.00"),
            total_price=Decimal("5.00"),
        )

        # Act
        copy = item.repriced()

        # Assert
        assert copy is not item
        assert copy.total_price == Decimal("20.00")
        assert item.total_price == Decimal("5.00")


class TestClient:
    """Test Client entity"""

    def test_defaults(self):
        # Act
        client = Client(name="Acme Corp")

        # Assert
        assert client.id is None
        assert client.status == ClientStatus.ACTIVE
        assert client.email == ""
        assert isinstance(client.created_at, datetime)

    def test_snapshot_copies_contact_fields(self):
        client = Client(name="Acme", email="a@acme.test", phone="123", location="Springfield")

        snapshot = client.snapshot()

        assert snapshot.name == "Acme"
        assert snapshot.email == "a@acme.test"
        assert snapshot.phone == "123"
        assert snapshot.location == "Springfield"


class TestOrder:
    """Test Order entity"""

    def test_defaults(self):
        """Test new orders are Pending with the standard tax rate"""
        order = Order(client_id="client_1")

        assert order.status == OrderStatus.PENDING
        assert order.tax_rate == Decimal("0.2")
        assert order.invoice_id is None
        assert order.items == []
        assert order.is_pending

    def test_completed_order_is_not_pending(self):
        order = Order(client_id="client_1", status=OrderStatus.COMPLETED, invoice_id="inv_1")
        assert not order.is_pending


class TestInvoice:
    """Test Invoice entity"""

    def test_due_date_before_issue_date_is_rejected(self):
        """Test due_date >= issue_date is enforced"""
        issued = datetime(2024, 3, 1)

        with pytest.raises(ValidationError):
            Invoice(
                invoice_number="INV-1",
                issue_date=issued,
                due_date=issued - timedelta(days=1),
            )

    def test_same_day_due_date_is_allowed(self):
        issued = datetime(2024, 3, 1)

        invoice = Invoice(invoice_number="INV-1", issue_date=issued, due_date=issued)

        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.tax_rate == Decimal("0")
