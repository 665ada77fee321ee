"""Document Store Interface

Defines the contract for the document database the application persists to.
Collections hold schemaless documents keyed by a store-assigned id.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

CLIENTS = "clients"
ORDERS = "orders"
INVOICES = "invoices"

Record = Dict[str, Any]


class StoreError(Exception):
    """Raised when the document store cannot complete an operation"""


class DocumentNotFoundError(StoreError):
    """Raised when updating a document that does not exist"""

    def __init__(self, collection: str, document_id: str):
        self.collection = collection
        self.document_id = document_id
        super().__init__(f"Document {document_id} not found in {collection}")


class DocumentStore(ABC):
    """
    Store interface for collection-based document persistence

    Records returned by the store always carry "id", "created_at" and
    "updated_at"; the timestamps are assigned by the store, never by the
    caller. Writes are blind overwrites: there is no optimistic locking.
    """

    @abstractmethod
    async def insert(self, collection: str, fields: Record) -> str:
        """
        Insert a new document

        Args:
            collection: Collection name (e.g., "invoices")
            fields: Document fields; id and timestamps are ignored

        Returns:
            Store-assigned document id
        """
        pass

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Record]:
        """
        Retrieve every document in a collection

        Args:
            collection: Collection name
            order_by: Optional field to sort by
            descending: Sort direction when order_by is given

        Returns:
            List of records
        """
        pass

    @abstractmethod
    async def get_where(
        self,
        collection: str,
        field: str,
        equals: Any,
        field2: Optional[str] = None,
        equals2: Any = None,
    ) -> List[Record]:
        """
        Retrieve documents matching one or two equality filters

        Args:
            collection: Collection name
            field: First field to compare
            equals: Value the first field must equal
            field2: Optional second field
            equals2: Value the second field must equal

        Returns:
            List of matching records
        """
        pass

    @abstractmethod
    async def get_by_id(self, collection: str, document_id: str) -> Optional[Record]:
        """
        Retrieve a document by id

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_fields(
        self, collection: str, document_id: str, fields: Record
    ) -> None:
        """
        Overwrite the given fields of a document and stamp updated_at

        Raises:
            DocumentNotFoundError: document does not exist
        """
        pass

    @abstractmethod
    async def delete(self, collection: str, document_id: str) -> None:
        """
        Delete a document; deleting a missing document is a no-op
        """
        pass
