"""Add ten sample users to the Firestore ``users`` collection."""

import sys
from pathlib import Path
from typing import Any, Optional

ROOT = Path(__file__).resolve().parent.parent
FUNCTIONS_ROOT = ROOT / "services" / "functions"
DEFAULT_CREDENTIALS_PATH = ROOT / "scripts" / "keys" / "service-account.json"
if str(FUNCTIONS_ROOT) not in sys.path:
    sys.path.insert(0, str(FUNCTIONS_ROOT))

from app.core.config import Settings, settings
from app.core.firebase import get_firestore_client
from app.repository import CollectionRepository
from app.services import SeedService
from app.services.sample_data import SAMPLE_USERS


def script_settings() -> Settings:
    """Settings for operator runs; the key file defaults to scripts/keys/."""

    config = Settings()
    if not config.FIREBASE_CREDENTIALS_PATH:
        config.FIREBASE_CREDENTIALS_PATH = str(DEFAULT_CREDENTIALS_PATH)
    return config


def build_service(client: Optional[Any] = None) -> SeedService:
    if client is None:
        client = get_firestore_client(script_settings())
    users = CollectionRepository(
        client,
        settings.USERS_COLLECTION,
        batch_limit=settings.FIRESTORE_BATCH_LIMIT,
    )
    return SeedService(users=users)


def main(client: Optional[Any] = None) -> int:
    collection = settings.USERS_COLLECTION
    print("Starting user creation script...")
    print(f'Planning to add {len(SAMPLE_USERS)} users to "{collection}" collection')

    try:
        service = build_service(client)
        added = service.add_sample_users()
    except Exception as exc:  # any failure aborts the script
        print("Script failed:", file=sys.stderr)
        print(f"   Error: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully added {len(added)} users to {collection} collection")
    for user_id, user in added:
        print(f"   - {user.full_name} (Age: {user.age}) - ID: {user_id}")

    print("\nScript completed successfully!")
    print(f"Total users added: {len(added)}")
    print("Summary:")
    print(f"   - Collection: {collection}")
    print(f"   - Project: {settings.FIREBASE_PROJECT_ID or '(default)'}")
    print(f"   - User IDs: {', '.join(user_id for user_id, _ in added)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
