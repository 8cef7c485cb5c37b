#!/usr/bin/env python3

import sys

import config
from storage import StorageError, count_registrations, driver_available, get_engine


def check_database_and_table(url=None, table_name=None):
    """Report database reachability and the state of the registration table"""
    url = url or config.database_url()
    table_name = table_name or config.DB_TABLE

    print(f"Checking database at {config.safe_url(url)}...")
    if not driver_available(url):
        print("Database driver is not installed")
        return False

    try:
        engine = get_engine(url)
        count = count_registrations(engine, table_name)
    except StorageError as e:
        print(f"Database error: {e}")
        return False

    if count is None:
        print(f"Table {table_name} does not exist (run 'flask --app app init-db')")
        return False

    print(f"Table {table_name} exists with {count} registrations")
    return True


if __name__ == '__main__':
    sys.exit(0 if check_database_and_table() else 1)
