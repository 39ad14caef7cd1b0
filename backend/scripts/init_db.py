"""Create the database tables, optionally dropping the existing ones first.

Usage:
  python scripts/init_db.py           # create missing tables
  python scripts/init_db.py --drop    # drop every table, then recreate (data is lost)
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from pikmi.database import Base, engine
import pikmi.models  # noqa: F401 - registers all models


def init_db(drop: bool = False, bind=engine) -> list[str]:
    if drop:
        print("Dropping all database tables...")
        Base.metadata.drop_all(bind=bind)
    print("Creating all database tables...")
    Base.metadata.create_all(bind=bind)
    tables = sorted(inspect(bind).get_table_names())
    print(f"Database initialized: {', '.join(tables)}")
    return tables


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--drop", action="store_true", help="Drop existing tables before creating them")
    args = parser.parse_args()
    init_db(drop=args.drop)


if __name__ == "__main__":
    main()
