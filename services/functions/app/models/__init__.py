"""Domain models for the Spot Booker functions."""

from app.models.desk import Desk, SampleUser
from app.models.email import OutboundMessage
from app.models.event import NotificationEvent

__all__ = ["Desk", "NotificationEvent", "OutboundMessage", "SampleUser"]
