"""Batched Firestore writes used by the seed scripts."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)


class BatchLimitExceeded(ValueError):
    """Raised when a single batch would exceed Firestore's write limit."""


class CollectionRepository:
    """Bulk operations against one Firestore collection.

    ``client`` is a ``google.cloud.firestore.Client``; only ``collection`` and
    ``batch`` are used so tests can pass an in-memory double.
    """

    def __init__(self, client: Any, collection_name: str, *, batch_limit: int = 500):
        if batch_limit <= 0:
            raise ValueError("batch_limit must be a positive integer")
        self._client = client
        self._collection_name = collection_name
        self._batch_limit = batch_limit

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def _collection(self):
        return self._client.collection(self._collection_name)

    def generate_id(self) -> str:
        """Return a fresh auto-generated document identifier."""
        return self._collection().document().id

    def count(self) -> int:
        return sum(1 for _ in self._collection().stream())

    def delete_all(self) -> int:
        """Delete every document in batches; return how many were removed."""

        deleted = 0
        while True:
            documents = list(self._collection().limit(self._batch_limit).stream())
            if not documents:
                break

            batch = self._client.batch()
            for document in documents:
                batch.delete(document.reference)
            batch.commit()

            deleted += len(documents)
            logger.debug(
                "Deleted batch of %s documents from %s", len(documents), self._collection_name
            )
            if len(documents) < self._batch_limit:
                break
        return deleted

    def set_many(self, documents: Sequence[Tuple[str, dict]]) -> List[str]:
        """Write ``(document_id, data)`` pairs in one batch."""

        self._ensure_fits(len(documents))
        batch = self._client.batch()
        for document_id, data in documents:
            batch.set(self._collection().document(document_id), data)
        batch.commit()
        return [document_id for document_id, _ in documents]

    def add_many(self, documents: Iterable[dict]) -> List[str]:
        """Write documents with store-generated identifiers in one batch."""

        documents = list(documents)
        self._ensure_fits(len(documents))
        batch = self._client.batch()
        document_ids: List[str] = []
        for data in documents:
            reference = self._collection().document()
            batch.set(reference, data)
            document_ids.append(reference.id)
        batch.commit()
        return document_ids

    def _ensure_fits(self, size: int) -> None:
        if size > self._batch_limit:
            raise BatchLimitExceeded(
                f"Cannot write {size} documents in one batch (limit {self._batch_limit})"
            )


__all__ = ["CollectionRepository", "BatchLimitExceeded"]
