"""Delivery database management CLI.

Creates or drops the schema of the configured SQL provider. With the
default in-memory configuration there is nothing to do; select the
PostgreSQL overlay with ``PROTEAN_ENV=production``.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    from delivery.domain import delivery
    from delivery.utils.db import setup_db

    print("Initializing delivery domain...")
    delivery.init()
    print("Creating delivery database schema...")
    providers = setup_db(delivery)
    if providers:
        print(f"  Schema ready on: {', '.join(providers)}.")
    else:
        print("  No SQL provider configured, nothing to create.")
    print("Done.")


def drop_databases():
    from delivery.domain import delivery
    from delivery.utils.db import drop_db

    print("Initializing delivery domain...")
    delivery.init()
    print("Dropping delivery database schema...")
    providers = drop_db(delivery)
    if providers:
        print(f"  Schema dropped on: {', '.join(providers)}.")
    else:
        print("  No SQL provider configured, nothing to drop.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Delivery database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
