"""Integration tests for the document store backends

Every test runs against the in-memory store and against SQLite.
"""

import pytest
from datetime import datetime
from orderdesk.app.services.document_store import CLIENTS, ORDERS, DocumentNotFoundError


@pytest.mark.asyncio
class TestDocumentStore:
    """Store contract shared by all backends"""

    async def test_insert_assigns_id_and_timestamps(self, store):
        # Act
        document_id = await store.insert(CLIENTS, {"name": "Acme", "reference_code": "CL-1"})
        record = await store.get_by_id(CLIENTS, document_id)

        # Assert
        assert document_id
        assert record["id"] == document_id
        assert record["name"] == "Acme"
        assert isinstance(record["created_at"], datetime)
        assert record["created_at"] == record["updated_at"]

    async def test_caller_supplied_id_is_ignored(self, store):
        document_id = await store.insert(CLIENTS, {"id": "forced", "name": "Acme"})

        assert document_id != "forced"
        assert await store.get_by_id(CLIENTS, "forced") is None

    async def test_get_by_id_missing(self, store):
        assert await store.get_by_id(CLIENTS, "missing") is None

    async def test_collections_are_separate(self, store):
        document_id = await store.insert(CLIENTS, {"name": "Acme"})

        assert await store.get_by_id(ORDERS, document_id) is None
        assert await store.get_all(ORDERS) == []

    async def test_get_all_ordered_newest_first(self, store):
        # Arrange
        first = await store.insert(CLIENTS, {"name": "First"})
        second = await store.insert(CLIENTS, {"name": "Second"})
        third = await store.insert(CLIENTS, {"name": "Third"})

        # Act
        rows = await store.get_all(CLIENTS, order_by="created_at", descending=True)

        # Assert
        assert [row["id"] for row in rows] == [third, second, first]

    async def test_get_all_ordered_by_data_field(self, store):
        await store.insert(CLIENTS, {"name": "Beta"})
        await store.insert(CLIENTS, {"name": "Alpha"})

        rows = await store.get_all(CLIENTS, order_by="name")

        assert [row["name"] for row in rows] == ["Alpha", "Beta"]

    async def test_get_where_one_and_two_filters(self, store):
        # Arrange
        await store.insert(ORDERS, {"client_id": "c1", "status": "Pending"})
        await store.insert(ORDERS, {"client_id": "c1", "status": "Completed"})
        await store.insert(ORDERS, {"client_id": "c2", "status": "Pending"})

        # Act
        by_client = await store.get_where(ORDERS, "client_id", "c1")
        pending = await store.get_where(ORDERS, "client_id", "c1", "status", "Pending")

        # Assert
        assert len(by_client) == 2
        assert len(pending) == 1
        assert pending[0]["status"] == "Pending"

    async def test_update_fields_merges_and_stamps(self, store):
        # Arrange
        document_id = await store.insert(ORDERS, {"status": "Pending", "order_number": "ORD-1"})
        before = await store.get_by_id(ORDERS, document_id)

        # Act
        await store.update_fields(ORDERS, document_id, {"status": "Completed", "invoice_id": "inv_1"})
        after = await store.get_by_id(ORDERS, document_id)

        # Assert
        assert after["status"] == "Completed"
        assert after["invoice_id"] == "inv_1"
        assert after["order_number"] == "ORD-1"
        assert after["created_at"] == before["created_at"]
        assert after["updated_at"] >= before["updated_at"]

    async def test_update_missing_document_raises(self, store):
        with pytest.raises(DocumentNotFoundError):
            await store.update_fields(ORDERS, "missing", {"status": "Completed"})

    async def test_delete_and_delete_missing(self, store):
        # Arrange
        document_id = await store.insert(CLIENTS, {"name": "Acme"})

        # Act
        await store.delete(CLIENTS, document_id)
        await store.delete(CLIENTS, document_id)

        # Assert
        assert await store.get_by_id(CLIENTS, document_id) is None

    async def test_returned_records_are_copies(self, store):
        """Test mutating a returned record does not change the stored one"""
        document_id = await store.insert(ORDERS, {"items": [{"description": "Widget"}]})

        record = await store.get_by_id(ORDERS, document_id)
        record["items"][0]["description"] = "Changed"

        stored = await store.get_by_id(ORDERS, document_id)
        assert stored["items"][0]["description"] == "Widget"
