"""Email related domain models."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class OutboundMessage:
    """Represents an email ready to be handed to the provider."""

    recipient: str
    sender: str
    subject: str
    text_body: str
    html_body: str

    def as_fields(self) -> Dict[str, Any]:
        """Return the message keyed by the provider-neutral field names."""
        return {
            "to": self.recipient,
            "from": self.sender,
            "subject": self.subject,
            "text": self.text_body,
            "html": self.html_body,
        }


__all__ = ["OutboundMessage"]
