# =============================================================================
# core/store.py  -  Document Store Access
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers exactly one question for the data-fetch tools:
#     "Which documents in collection X were created by user U?"
#
# TWO IMPLEMENTATIONS, ONE INTERFACE:
#   - FirestoreStore: Cloud Firestore, collection-group query filtered on
#     createdBy.  Used in the deployed function.
#   - InMemoryStore: a dict of documents.  Used for offline runs (DOCIT_STORE=
#     memory) and in tests.
#   The record normalization in core/records.py does not know or care which
#   one produced the documents.
#
# READ-ONLY:
#   Nothing here writes to Firestore.  InMemoryStore.add() exists only to seed
#   the offline store.
# =============================================================================

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

OWNER_FIELD = "createdBy"


@dataclass(frozen=True)
class StoredDocument:
    """A raw document as the store yields it."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


class DocumentStore:
    """Read-only query interface over user-owned collections."""

    async def find_owned(self, collection: str, owner_id: str) -> list[StoredDocument]:
        """Return every document named ``collection`` whose owner is ``owner_id``.

        Queries all sub-collections with that name, not only a top-level one.
        Order is whatever the backing store yields.
        """
        raise NotImplementedError


class FirestoreStore(DocumentStore):
    """Cloud Firestore collection-group queries.

    The blocking client is driven from a worker thread so that a single
    client can serve calls made from different event loops.
    """

    def __init__(self, client):
        self._client = client

    @classmethod
    def from_app(cls, app=None) -> "FirestoreStore":
        """Use the Firestore client of an initialized firebase_admin app."""
        from firebase_admin import firestore

        return cls(firestore.client(app))

    def _query(self, collection: str, owner_id: str) -> list[StoredDocument]:
        from google.cloud.firestore_v1.base_query import FieldFilter

        query = self._client.collection_group(collection).where(
            filter=FieldFilter(OWNER_FIELD, "==", owner_id)
        )
        return [StoredDocument(id=snap.id, data=snap.to_dict() or {}) for snap in query.stream()]

    async def find_owned(self, collection: str, owner_id: str) -> list[StoredDocument]:
        docs = await asyncio.to_thread(self._query, collection, owner_id)
        logger.debug("Firestore %s query for %s returned %d documents", collection, owner_id, len(docs))
        return docs


class InMemoryStore(DocumentStore):
    """A dict-backed store for offline runs and tests."""

    def __init__(self):
        self._collections: dict[str, list[StoredDocument]] = {}

    def add(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self._collections.setdefault(collection, []).append(StoredDocument(id=doc_id, data=dict(data)))

    async def find_owned(self, collection: str, owner_id: str) -> list[StoredDocument]:
        return [
            StoredDocument(id=doc.id, data=dict(doc.data))
            for doc in self._collections.get(collection, [])
            if doc.data.get(OWNER_FIELD) == owner_id
        ]
