"""Sample data records written by the admin scripts."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class Desk:
    """A bookable desk stored in the ``desks`` collection."""

    id: str
    name: str
    code: str
    enabled: bool
    notes: str
    created_at: datetime
    updated_at: datetime

    @property
    def label(self) -> str:
        return f"{self.name} ({self.code})"

    def to_document(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "enabled": self.enabled,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class SampleUser:
    """A demo user document; the store assigns its identifier."""

    first_name: str
    last_name: str
    age: int
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_document(self) -> Dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
            "createdAt": self.created_at,
        }


__all__ = ["Desk", "SampleUser"]
