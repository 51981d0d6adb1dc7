"""Storefront management CLI.

Usage:
    python src/manage.py setup-db         # Create all tables
    python src/manage.py drop-db          # Drop all tables
    python src/manage.py seed-catalogue   # Insert the demo products into an empty catalogue
"""

import argparse
import sys


def _initialized_domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    """Create the database schema for every aggregate and entity."""
    from storefront.utils.db import setup_db

    domain = _initialized_domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the database schema created by setup-db."""
    from storefront.utils.db import drop_db

    domain = _initialized_domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def seed_demo_catalogue():
    """Insert the demo products, unless the catalogue already has some."""
    from storefront.product.seed import seed_catalogue

    domain = _initialized_domain()
    with domain.domain_context():
        added = seed_catalogue()
    print(f"Added {added} products." if added else "Catalogue is not empty, nothing to seed.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-catalogue", help="Insert demo products into an empty catalogue")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-catalogue":
        seed_demo_catalogue()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
