from .email_repository import EmailDeliveryError, EmailRepository
from .firestore_repository import BatchLimitExceeded, CollectionRepository

__all__ = [
    "EmailRepository",
    "EmailDeliveryError",
    "CollectionRepository",
    "BatchLimitExceeded",
]
