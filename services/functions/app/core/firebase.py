"""Firebase application initialization utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import firebase_admin
from firebase_admin import credentials, firestore

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)


def _build_init_kwargs(config: Settings) -> Dict[str, Any]:
    init_kwargs: Dict[str, Any] = {}
    if config.FIREBASE_PROJECT_ID:
        init_kwargs["projectId"] = config.FIREBASE_PROJECT_ID
    return init_kwargs


def get_firebase_app(config: Settings | None = None) -> firebase_admin.App:
    """Return the default Firebase app, initializing it if required.

    A service-account file is used when ``FIREBASE_CREDENTIALS_PATH`` is set
    and Application Default Credentials otherwise. A configured path that does
    not exist raises ``FileNotFoundError``.
    """

    config = config or settings
    if not firebase_admin._apps:  # type: ignore[attr-defined]
        credentials_path = config.FIREBASE_CREDENTIALS_PATH
        if credentials_path:
            if not Path(credentials_path).is_file():
                raise FileNotFoundError(
                    f"FIREBASE_CREDENTIALS_PATH points to a missing file: {credentials_path}"
                )
            cred = credentials.Certificate(credentials_path)
            logger.info("Initializing Firebase with service account %s", credentials_path)
        else:
            cred = credentials.ApplicationDefault()
            logger.info("Initializing Firebase with application default credentials")

        firebase_admin.initialize_app(cred, _build_init_kwargs(config))

    return firebase_admin.get_app()


def get_firestore_client(config: Settings | None = None):
    """Return a Firestore client bound to the default Firebase app."""

    return firestore.client(get_firebase_app(config))


__all__ = ["get_firebase_app", "get_firestore_client"]
