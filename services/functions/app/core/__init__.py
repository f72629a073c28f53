"""Core utilities for the Spot Booker functions."""

from app.core.config import settings

__all__ = ["settings"]
