#!/usr/bin/env python3
"""
Database management script for the timesheet service.
Creates and drops the tables of the configured database.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from timetrack.config import settings
from timetrack.infrastructure.db.database import init_db, drop_db


def create_tables():
    """Create missing tables."""
    print(f"Creating tables on {settings.database_url}...")
    init_db()
    print("Done.")


def drop_tables():
    """Drop all tables - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        drop_db()
        print("Tables dropped.")
        return True
    print("Drop cancelled.")
    return False


def reset_database():
    """Drop and recreate all tables."""
    if drop_tables():
        create_tables()


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create missing tables")
        print("  drop           - Drop all tables (WARNING: drops all data)")
        print("  reset          - Drop and recreate all tables")
        return

    command_name = sys.argv[1]

    if command_name == "init":
        create_tables()
    elif command_name == "drop":
        drop_tables()
    elif command_name == "reset":
        reset_database()
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()
