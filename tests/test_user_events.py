from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

from app.models import NotificationEvent
from app.schemas import UserRecord


class _Snapshot:
    def __init__(self, document_id, data):
        self.id = document_id
        self._data = data

    def to_dict(self):
        return dict(self._data)


def test_user_record_reads_firestore_field_names() -> None:
    created = datetime(2025, 1, 2, tzinfo=timezone.utc)
    record = UserRecord.model_validate(
        {
            "email": " ada@example.com ",
            "displayName": "Ada",
            "createdAt": created,
            "firstName": "Ada",
            "age": 36,
        }
    )

    assert record.email == "ada@example.com"
    assert record.display_name == "Ada"
    assert record.created_at == created
    assert record.greeting_name("User") == "Ada"


def test_user_record_tolerates_odd_values() -> None:
    record = UserRecord.model_validate({"displayName": "", "name": None, "createdAt": "yesterday"})

    assert record.email is None
    assert record.created_at is None
    assert record.greeting_name("User") == "User"


def test_event_from_firestore_uses_params_and_snapshot() -> None:
    event = SimpleNamespace(
        params={"userId": "abc123"},
        data=_Snapshot("abc123", {"email": "ada@example.com"}),
    )

    notification = NotificationEvent.from_firestore(event)

    assert notification.user_id == "abc123"
    assert notification.data == {"email": "ada@example.com"}


def test_event_from_firestore_without_snapshot() -> None:
    notification = NotificationEvent.from_firestore(SimpleNamespace(params={"userId": "gone"}, data=None))

    assert notification.user_id == "gone"
    assert notification.data is None
