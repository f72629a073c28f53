"""Reset and seed the sample Firestore data."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from app.models import Desk, SampleUser
from app.repository import CollectionRepository
from app.services.sample_data import EXAMPLE_DESKS, SAMPLE_USERS

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SeedService:
    def __init__(
        self,
        *,
        desks: Optional[CollectionRepository] = None,
        users: Optional[CollectionRepository] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._desks = desks
        self._users = users
        self._clock = clock

    @property
    def desks(self) -> CollectionRepository:
        if self._desks is None:
            raise RuntimeError("No desks repository configured")
        return self._desks

    @property
    def users(self) -> CollectionRepository:
        if self._users is None:
            raise RuntimeError("No users repository configured")
        return self._users

    def build_example_desks(self) -> List[Desk]:
        now = self._clock()
        return [
            Desk(
                id=self.desks.generate_id(),
                name=name,
                code=code,
                enabled=enabled,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            for name, code, enabled, notes in EXAMPLE_DESKS
        ]

    def delete_all_desks(self) -> int:
        deleted = self.desks.delete_all()
        logger.info("Deleted %s documents from %s", deleted, self.desks.collection_name)
        return deleted

    def add_example_desks(self) -> List[Desk]:
        desks = self.build_example_desks()
        self.desks.set_many([(desk.id, desk.to_document()) for desk in desks])
        logger.info("Added %s example desks to %s", len(desks), self.desks.collection_name)
        return desks

    def add_sample_users(self) -> List[Tuple[str, SampleUser]]:
        now = self._clock()
        users = [
            SampleUser(first_name=first, last_name=last, age=age, created_at=now)
            for first, last, age in SAMPLE_USERS
        ]
        user_ids = self.users.add_many(user.to_document() for user in users)
        logger.info("Added %s sample users to %s", len(users), self.users.collection_name)
        return list(zip(user_ids, users))


__all__ = ["SeedService"]
