"""Schema for user documents read from Firestore."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    name: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    @field_validator("email", "display_name", "name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        # Documents are schemaless; anything that is not a usable string is
        # treated as missing rather than rejected.
        if not isinstance(value, str):
            return None
        stripped = value.strip()
        return stripped or None

    @field_validator("created_at", mode="before")
    @classmethod
    def _ignore_unknown_timestamp(cls, value: Any) -> Optional[datetime]:
        return value if isinstance(value, datetime) else None

    def greeting_name(self, fallback: str) -> str:
        return self.display_name or self.name or fallback


__all__ = ["UserRecord"]
