"""
Script to verify the content database connection.

Connects with the configured pool settings, reports the server version
and checks that every table the query layer reads is present.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect, text

from config.settings import Settings
from database.base import Base
from database.database import DatabaseManager
import database.models  # noqa: F401  (registers tables on Base.metadata)


def check_database_connection(settings: Settings) -> bool:
    """
    Test the connection and look for the expected tables.

    Returns:
        bool: True if connected and every table exists, False otherwise
    """
    db = DatabaseManager(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_open=settings.db_max_open,
        idle_timeout=settings.db_idle_timeout,
    )
    print("Attempting to connect to database...")

    try:
        with db.read_scope() as session:
            if db.dialect_name == "postgresql":
                version = session.execute(text("SELECT version();")).scalar()
                database = session.execute(text("SELECT current_database();")).scalar()
                print(f"\n✅ SUCCESS: Connected to PostgreSQL!")
                print(f"PostgreSQL version: {version}")
                print(f"Connected to database: {database}")
            else:
                session.execute(text("SELECT 1"))
                print(f"\n✅ SUCCESS: Connected ({db.dialect_name})")

        existing = set(inspect(db.engine).get_table_names())
        missing = sorted(set(Base.metadata.tables) - existing)
        if missing:
            print(f"\n❌ Missing tables: {', '.join(missing)}")
            return False

        print(f"\n✅ All {len(Base.metadata.tables)} content tables present")
        return True

    except Exception as e:
        print(f"\n❌ ERROR: Failed to connect to database")
        print(f"Error details: {str(e)}")
        print("\nTroubleshooting:")
        print("1. Verify DATABASE_URL in .env")
        print("2. Ensure the database accepts connections from this host")
        return False
    finally:
        db.dispose()


def main():
    """Main function to run the database connection check."""
    print("="*60)
    print("Content Database Connection Check")
    print("="*60 + "\n")

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    success = check_database_connection(settings)

    print("\n" + "="*60)
    if success:
        print("Check completed successfully! ✅")
    else:
        print("Check failed ❌")
    print("="*60)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
