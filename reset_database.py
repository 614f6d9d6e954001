#!/usr/bin/env python3
"""Drop the job and bid collections and recreate their indexes."""

from dotenv import load_dotenv

load_dotenv()

from pymongo.errors import PyMongoError

from solosphere.database import (
    BIDS_COLLECTION,
    JOBS_COLLECTION,
    close_mongo_connection,
    create_indexes,
    get_database,
)
from solosphere.main import create_app


def reset_all_collections(db):
    """Drop all collections and start fresh."""
    print("Clearing all collections...")
    for collection_name in (JOBS_COLLECTION, BIDS_COLLECTION):
        try:
            db[collection_name].drop()
            print(f"   Dropped {collection_name}")
        except PyMongoError as e:
            print(f"   Could not drop {collection_name}: {e}")

    create_indexes(db)
    print("   Recreated indexes")
    print("\nDatabase reset complete.")


if __name__ == "__main__":
    print("Resetting the SoloSphere database...")
    print("   This will DELETE ALL jobs and bids.")

    confirm = input("\nAre you sure? Type 'yes' to continue: ")
    if confirm.lower() == 'yes':
        app = create_app()
        with app.app_context():
            reset_all_collections(get_database())
        close_mongo_connection(app)
    else:
        print("Reset cancelled.")
