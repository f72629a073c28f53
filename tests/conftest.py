from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Tuple

import pytest

from app.core.config import Settings


class FakeDocumentReference:
    def __init__(self, store: "FakeFirestore", collection: str, document_id: str):
        self._store = store
        self.collection_name = collection
        self.id = document_id


class FakeSnapshot:
    def __init__(self, reference: FakeDocumentReference, data: Dict[str, Any]):
        self.reference = reference
        self.id = reference.id
        self._data = data

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)


class FakeQuery:
    def __init__(self, store: "FakeFirestore", name: str, limit: Optional[int] = None):
        self._store = store
        self._name = name
        self._limit = limit

    def limit(self, count: int) -> "FakeQuery":
        return FakeQuery(self._store, self._name, count)

    def stream(self):
        documents = list(self._store.data.get(self._name, {}).items())
        if self._limit is not None:
            documents = documents[: self._limit]
        for document_id, data in documents:
            yield FakeSnapshot(FakeDocumentReference(self._store, self._name, document_id), data)


class FakeCollection(FakeQuery):
    def document(self, document_id: Optional[str] = None) -> FakeDocumentReference:
        return FakeDocumentReference(self._store, self._name, document_id or uuid.uuid4().hex[:20])


class FakeBatch:
    def __init__(self, store: "FakeFirestore"):
        self._store = store
        self._operations: List[Tuple[str, FakeDocumentReference, Optional[Dict[str, Any]]]] = []

    def set(self, reference: FakeDocumentReference, data: Dict[str, Any]) -> None:
        self._operations.append(("set", reference, dict(data)))

    def delete(self, reference: FakeDocumentReference) -> None:
        self._operations.append(("delete", reference, None))

    def commit(self) -> None:
        if self._store.fail_commits:
            raise RuntimeError("commit rejected")
        if len(self._operations) > 500:
            raise ValueError("maximum 500 writes allowed per request")
        for operation, reference, data in self._operations:
            collection = self._store.data.setdefault(reference.collection_name, {})
            if operation == "set":
                collection[reference.id] = data
            else:
                collection.pop(reference.id, None)
        self._store.commits.append(len(self._operations))


class FakeFirestore:
    """Enough of ``google.cloud.firestore.Client`` for batched writes."""

    def __init__(self) -> None:
        self.data: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.commits: List[int] = []
        self.fail_commits = False

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def batch(self) -> FakeBatch:
        return FakeBatch(self)

    def seed(self, name: str, count: int) -> None:
        collection = self.data.setdefault(name, {})
        for index in range(count):
            collection[f"doc-{index}"] = {"index": index}


@pytest.fixture()
def firestore_client() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture()
def config() -> Settings:
    config = Settings()
    config.APP_DISPLAY_NAME = "Spot Booker"
    config.FROM_EMAIL = "noreply@example.com"
    config.WELCOME_EMAIL_SUBJECT = "Welcome to Spot Booker!"
    config.WELCOME_FALLBACK_NAME = "User"
    config.SENDGRID_API_URL = "https://api.sendgrid.test/v3/mail/send"
    config.SENDGRID_CREDENTIAL_SOURCE = "env"
    config.USERS_COLLECTION = "users"
    config.DESKS_COLLECTION = "desks"
    config.FIRESTORE_BATCH_LIMIT = 500
    return config
