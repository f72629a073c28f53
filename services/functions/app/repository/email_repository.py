"""Repository responsible for sending emails through the SendGrid HTTP API."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from app.core.config import Settings, settings
from app.core.credentials import CredentialSource, get_credential_source
from app.models import OutboundMessage


class EmailDeliveryError(RuntimeError):
    """Raised when the provider does not accept a message."""


class EmailRepository:
    """Handles the low level communication with SendGrid.

    One instance is meant to live for the whole process; the underlying
    ``httpx.Client`` keeps its connection pool between invocations.
    """

    def __init__(
        self,
        *,
        credentials: CredentialSource | None = None,
        config: Settings | None = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._settings = config or settings
        self._credentials = credentials or get_credential_source(self._settings)
        self._client = client or httpx.Client(timeout=self._settings.SENDGRID_TIMEOUT)

    @property
    def credentials(self) -> CredentialSource:
        return self._credentials

    @property
    def is_configured(self) -> bool:
        return bool(self._credentials.get_api_key())

    @staticmethod
    def _build_payload(message: OutboundMessage) -> Dict[str, Any]:
        return {
            "personalizations": [{"to": [{"email": message.recipient}]}],
            "from": {"email": message.sender},
            "subject": message.subject,
            "content": [
                {"type": "text/plain", "value": message.text_body},
                {"type": "text/html", "value": message.html_body},
            ],
        }

    def send_email(self, message: OutboundMessage) -> None:
        api_key = self._credentials.get_api_key()
        if not api_key:
            raise EmailDeliveryError("SENDGRID_API_KEY must be configured to send emails")

        try:
            response = self._client.post(
                self._settings.SENDGRID_API_URL,
                json=self._build_payload(message),
                headers={"Authorization": f"Bearer {api_key}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise EmailDeliveryError(
                f"SendGrid returned HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.RequestError as exc:
            raise EmailDeliveryError(f"Failed to reach SendGrid: {exc}") from exc


__all__ = ["EmailRepository", "EmailDeliveryError"]
