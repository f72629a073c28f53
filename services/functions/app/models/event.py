"""Trigger payloads consumed by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class NotificationEvent:
    """A user document was created under ``users/{user_id}``."""

    user_id: str
    data: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_firestore(cls, event: Any) -> "NotificationEvent":
        """Build the event from a ``firestore_fn.Event[DocumentSnapshot | None]``."""

        snapshot = getattr(event, "data", None)
        data = snapshot.to_dict() if snapshot is not None else None
        user_id = (event.params or {}).get("userId")
        if not user_id and snapshot is not None:
            user_id = snapshot.id
        return cls(user_id=str(user_id or ""), data=data)


__all__ = ["NotificationEvent"]
