"""Delete every desk in Firestore and add the four example desks."""

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


def script_settings() -> Settings:
    """Settings for operator runs; the key file defaults to scripts/keys/."""

    config = Settings()
    if not config.FIREBASE_CREDENTIALS_PATH:
        config.FIREBASE_CREDENTIALS_PATH = str(DEFAULT_CREDENTIALS_PATH)
    return config


def build_service(client: Optional[Any] = None) -> SeedService:
    if client is None:
        client = get_firestore_client(script_settings())
    desks = CollectionRepository(
        client,
        settings.DESKS_COLLECTION,
        batch_limit=settings.FIRESTORE_BATCH_LIMIT,
    )
    return SeedService(desks=desks)


def delete_all_desks(service: SeedService) -> int:
    print("Deleting all existing desks...")
    deleted = service.delete_all_desks()
    if deleted:
        print(f"   Successfully deleted {deleted} desks.")
    else:
        print("   No existing desks found to delete.")
    return deleted


def add_example_desks(service: SeedService) -> None:
    print("Adding example desks...")
    desks = service.add_example_desks()
    print(f"   Successfully added {len(desks)} example desks.")

    print("\nSummary of added desks:")
    for desk in desks:
        status = "Enabled" if desk.enabled else "Disabled"
        print(f"   * {desk.label} - {status}")
        if desk.notes:
            print(f"     Notes: {desk.notes}")


def main(client: Optional[Any] = None) -> int:
    print("Starting desk reset process...")

    try:
        service = build_service(client)
        delete_all_desks(service)
        add_example_desks(service)
    except Exception as exc:  # any failure aborts the reset
        print(f"Error during desk reset: {exc}", file=sys.stderr)
        return 1

    print("Desk reset completed successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
