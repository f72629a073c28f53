"""Configuration for the Spot Booker functions and admin scripts."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _to_int(value: str, *, default: int) -> int:
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        return default


class Settings:
    APP_DISPLAY_NAME: str = os.getenv("APP_DISPLAY_NAME", "Spot Booker")

    # "env" reads SENDGRID_API_KEY from the process environment, "secret"
    # binds it as a managed secret on the deployed function.
    SENDGRID_CREDENTIAL_SOURCE: str = os.getenv("SENDGRID_CREDENTIAL_SOURCE", "env").strip().lower()
    SENDGRID_SECRET_NAME: str = os.getenv("SENDGRID_SECRET_NAME", "SENDGRID_API_KEY")
    SENDGRID_API_URL: str = os.getenv(
        "SENDGRID_API_URL",
        "https://api.sendgrid.com/v3/mail/send",
    )
    SENDGRID_TIMEOUT: float = float(os.getenv("SENDGRID_TIMEOUT", "10"))
    FROM_EMAIL: str = os.getenv("FROM_EMAIL", "noreply@example.com")

    WELCOME_EMAIL_SUBJECT: str = os.getenv(
        "WELCOME_EMAIL_SUBJECT",
        "Welcome to Spot Booker!",
    )
    WELCOME_FALLBACK_NAME: str = os.getenv("WELCOME_FALLBACK_NAME", "User")

    USERS_COLLECTION: str = os.getenv("USERS_COLLECTION", "users")
    DESKS_COLLECTION: str = os.getenv("DESKS_COLLECTION", "desks")
    # Firestore rejects batched writes with more than 500 operations.
    FIRESTORE_BATCH_LIMIT: int = _to_int(os.getenv("FIRESTORE_BATCH_LIMIT", "500"), default=500)

    FIREBASE_CREDENTIALS_PATH: str = os.getenv("FIREBASE_CREDENTIALS_PATH", "")
    FIREBASE_PROJECT_ID: str = os.getenv("FIREBASE_PROJECT_ID", "")

    MAX_INSTANCES: int = _to_int(os.getenv("FUNCTIONS_MAX_INSTANCES", "10"), default=10)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
