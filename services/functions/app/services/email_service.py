"""Welcome email dispatch for newly created users."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from app.core.config import Settings, settings
from app.models import NotificationEvent, OutboundMessage
from app.repository import EmailDeliveryError, EmailRepository
from app.schemas import UserRecord

logger = logging.getLogger(__name__)


class EmailService:
    """Render and deliver the welcome email.

    Delivery is best effort: every outcome is logged and nothing is raised
    back to the trigger, so the platform never redelivers the event because
    of an email problem.
    """

    def __init__(
        self,
        *,
        repository: EmailRepository,
        config: Settings | None = None,
        templates_path: Optional[Path] = None,
    ):
        self._repository = repository
        self._settings = config or settings
        self._templates_path = templates_path or Path(__file__).resolve().parent.parent / "templates"
        self._environment = Environment(
            loader=FileSystemLoader(self._templates_path),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        try:
            template = self._environment.get_template(template_name)
        except TemplateNotFound as exc:  # pragma: no cover - configuration error
            raise RuntimeError(f"Email template '{template_name}' not found") from exc
        return template.render(**context)

    def build_welcome_email(self, record: UserRecord) -> OutboundMessage:
        if not record.email:
            raise ValueError("A recipient email address is required")

        context = {
            "name": record.greeting_name(self._settings.WELCOME_FALLBACK_NAME),
            "app_name": self._settings.APP_DISPLAY_NAME,
        }
        return OutboundMessage(
            recipient=record.email,
            sender=self._settings.FROM_EMAIL,
            subject=self._settings.WELCOME_EMAIL_SUBJECT,
            text_body=self._render_template("welcome.txt", context),
            html_body=self._render_template("welcome.html", context),
        )

    @staticmethod
    def _parse_record(event: NotificationEvent) -> Optional[UserRecord]:
        if event.data is None:
            return None
        return UserRecord.model_validate(dict(event.data))

    def send_welcome_email(self, event: NotificationEvent) -> bool:
        """Send the welcome email for ``event``; return whether it was accepted."""

        if not self._repository.is_configured:
            logger.error(
                "SENDGRID_API_KEY is not set; skipping welcome email for user %s",
                event.user_id,
            )
            return False

        record = self._parse_record(event)
        if record is None or not record.email:
            logger.warning(
                "User document created without email address (userId=%s)",
                event.user_id,
            )
            return False

        try:
            message = self.build_welcome_email(record)
            self._repository.send_email(message)
        except EmailDeliveryError as exc:
            logger.error(
                "Error sending welcome email (userId=%s, email=%s): %s",
                event.user_id,
                record.email,
                exc,
            )
            return False
        except Exception:
            logger.exception(
                "Unexpected error sending welcome email (userId=%s, email=%s)",
                event.user_id,
                record.email,
            )
            return False

        logger.info("Welcome email sent to %s (userId=%s)", record.email, event.user_id)
        return True


__all__ = ["EmailService"]
