"""Storefront management CLI.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py seed           # Create the starter categories
    python src/manage.py create-admin   # Create an admin account
"""

import argparse
import os
import sys


def _domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_catalogue():
    from storefront.seed import seed_categories

    domain = _domain()
    with domain.domain_context():
        created = seed_categories()
    print(f"Seeded {created} categories.")


def create_admin(username=None, password=None):
    from storefront.identity.registration import register_user

    username = username or os.getenv("ADMIN_USERNAME")
    password = password or os.getenv("ADMIN_PASSWORD")
    if not username or not password:
        print("An admin username and password are required (flags or ADMIN_USERNAME / ADMIN_PASSWORD).")
        sys.exit(1)

    domain = _domain()
    with domain.domain_context():
        user_id = register_user(username=username, password=password, is_admin=True)
    print(f"Admin {username} created ({user_id}).")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Create the starter categories if none exist")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--username", help="Admin username (default: $ADMIN_USERNAME)")
    admin_parser.add_argument("--password", help="Admin password (default: $ADMIN_PASSWORD)")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_catalogue()
    elif args.command == "create-admin":
        create_admin(args.username, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
