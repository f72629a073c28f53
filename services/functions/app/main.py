"""Cloud Functions entry points for Spot Booker."""

from firebase_functions import firestore_fn, options

from app.core.config import settings
from app.models import NotificationEvent
from app.repository import EmailRepository
from app.services import EmailService

options.set_global_options(max_instances=settings.MAX_INSTANCES)

_email_repository = EmailRepository()
_email_service = EmailService(repository=_email_repository)


@firestore_fn.on_document_created(
    document=f"{settings.USERS_COLLECTION}/{{userId}}",
    secrets=_email_repository.credentials.function_secrets or None,
)
def send_welcome_email(event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None]) -> None:
    """Send the welcome email when a user document is created."""

    _email_service.send_welcome_email(NotificationEvent.from_firestore(event))


__all__ = ["send_welcome_email"]
