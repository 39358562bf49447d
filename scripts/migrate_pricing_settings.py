#!/usr/bin/env python3
"""
Migration script to move legacy pricing settings under the fixed key.

Older deployments stored the pricing settings as "whatever document is in
the collection", without a known _id. This script:
1. Finds every document in the settings collection whose _id is not 'main_settings'
2. Copies the prices of the oldest one into 'main_settings', replacing it only
   if it still holds the untouched defaults
3. Deletes the legacy documents when run with --apply (kept on conflict)

Usage:
    python scripts/migrate_pricing_settings.py            # dry run
    python scripts/migrate_pricing_settings.py --apply

Environment variables required:
    MONGODB_URI - MongoDB connection string
    MONGODB_DATABASE - Database name (default: superadmin)
    SETTINGS_COLLECTION - Collection name (default: settings)
"""

import argparse
import asyncio
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv

from app.services.pricing_settings_service import SETTINGS_KEY, DEFAULT_PRICES

# Load environment variables
load_dotenv()


def _price(doc: Dict[str, Any], field: str):
    value = doc.get(field)
    return DEFAULT_PRICES[field] if value is None else value


def _is_untouched_default(doc: Dict[str, Any]) -> bool:
    """True for a singleton the service created lazily and nobody has edited."""
    return (
        all(doc.get(field, 0) == default for field, default in DEFAULT_PRICES.items())
        and doc.get("createdAt") == doc.get("updatedAt")
    )


async def migrate_settings(collection, apply: bool = False) -> Dict[str, Any]:
    """
    Fold legacy settings documents into the keyed singleton.

    A singleton still holding the lazily created defaults is overwritten with
    the legacy prices. A singleton that has been edited wins, and the legacy
    documents are then left in place so no prices are lost.

    Args:
        collection: Motor collection holding the settings
        apply: Write changes when True, only report otherwise

    Returns:
        Summary dict with the counts and the action taken
    """
    # Legacy documents may lack createdAt; ObjectId order breaks the tie
    legacy_cursor = collection.find({"_id": {"$ne": SETTINGS_KEY}}).sort(
        [("createdAt", 1), ("_id", 1)]
    )
    legacy_docs = await legacy_cursor.to_list(length=None)
    print(f"Found {len(legacy_docs)} legacy settings documents")

    summary = {
        "legacy": len(legacy_docs),
        "created": False,
        "conflict": False,
        "deleted": 0,
        "applied": apply,
    }

    if not legacy_docs:
        print("No legacy settings found. Nothing to migrate.")
        return summary

    existing = await collection.find_one({"_id": SETTINGS_KEY})
    source = legacy_docs[0]

    if existing and not _is_untouched_default(existing):
        print(
            f"'{SETTINGS_KEY}' already holds edited prices "
            f"(pricePerClient={existing.get('pricePerClient')}, "
            f"restaurantPrice={existing.get('restaurantPrice')}); "
            "legacy documents were kept. Resolve manually."
        )
        summary["conflict"] = True
        return summary

    now = datetime.now(timezone.utc)
    document = {
        "_id": SETTINGS_KEY,
        "pricePerClient": _price(source, "pricePerClient"),
        "restaurantPrice": _price(source, "restaurantPrice"),
        "createdAt": source.get("createdAt") or now,
        "updatedAt": now,
    }
    action = "replace default" if existing else "create"
    print(
        f"Will {action} '{SETTINGS_KEY}' from {source['_id']}: "
        f"pricePerClient={document['pricePerClient']}, "
        f"restaurantPrice={document['restaurantPrice']}"
    )

    legacy_ids = [doc["_id"] for doc in legacy_docs]
    if not apply:
        print(f"Dry run: {len(legacy_ids)} legacy documents would be deleted")
        return summary

    await collection.replace_one({"_id": SETTINGS_KEY}, document, upsert=True)
    summary["created"] = True

    result = await collection.delete_many({"_id": {"$in": legacy_ids}})
    summary["deleted"] = result.deleted_count
    print(f"Deleted {result.deleted_count} legacy documents")

    return summary


async def main(apply: bool) -> None:
    mongodb_uri = os.getenv("MONGODB_URI")
    database_name = os.getenv("MONGODB_DATABASE", "superadmin")
    collection_name = os.getenv("SETTINGS_COLLECTION", "settings")

    if not mongodb_uri:
        print("ERROR: MONGODB_URI environment variable not set")
        sys.exit(1)

    print(f"Connecting to database: {database_name}")
    client = AsyncIOMotorClient(mongodb_uri)
    try:
        summary = await migrate_settings(client[database_name][collection_name], apply=apply)
    finally:
        client.close()

    # Print summary
    print("\n" + "=" * 50)
    print("Migration Summary")
    print("=" * 50)
    print(f"Legacy documents: {summary['legacy']}")
    print(f"Singleton written: {summary['created']}")
    print(f"Conflict (edited singleton kept): {summary['conflict']}")
    print(f"Legacy deleted: {summary['deleted']}")
    print("=" * 50)
    print("\nMigration complete!" if apply else "\nDry run complete. Re-run with --apply to write.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Migrate legacy pricing settings")
    parser.add_argument("--apply", action="store_true", help="write changes instead of a dry run")
    args = parser.parse_args()

    print("Pricing Settings Migration Script")
    print("-" * 40)
    asyncio.run(main(args.apply))
