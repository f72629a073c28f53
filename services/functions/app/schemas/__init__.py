"""Pydantic schemas used by the Spot Booker functions."""

from app.schemas.user import UserRecord

__all__ = ["UserRecord"]
