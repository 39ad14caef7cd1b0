"""Create an admin account from the command line.

Usage:
  python scripts/create_admin.py --username alice --password secret
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pikmi.database import SessionLocal, engine, Base
import pikmi.models  # noqa: F401
from pikmi.schemas.admin import AdminCreate
from pikmi.services import admin_service
from pikmi.services.errors import ServiceError


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create admin user")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = admin_service.create_admin(db, AdminCreate(username=args.username, password=args.password))
    except ServiceError as exc:
        raise SystemExit(exc.message)
    finally:
        db.close()
    print(f"Admin created (id={admin.id})")


if __name__ == "__main__":
    main()
