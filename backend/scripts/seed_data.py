"""Seed the database with the default admin account and landing sections."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pikmi.database import SessionLocal, engine, Base
import pikmi.models  # noqa: F401

from pikmi.models.admin import Admin
from pikmi.models.landing import LandingContent
from pikmi.services.auth_service import hash_password

DEFAULT_ADMIN = ("admin", "admin123")

DEFAULT_CONTENT = {
    "hero_title": "Welcome to Pikmi",
    "hero_subtitle": "Everything you need, in one place.",
    "about_title": "About Us",
    "about_text": "Tell visitors who you are and what you do.",
    "features_title": "Features",
    "contact_email": "hello@example.com",
}


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Admin).count() > 0:
            print("Database already seeded. Skipping.")
            return

        username, password = DEFAULT_ADMIN
        db.add(Admin(username=username, password=hash_password(password)))

        existing_keys = {row[0] for row in db.query(LandingContent.section_key).all()}
        for key, content in DEFAULT_CONTENT.items():
            if key not in existing_keys:
                db.add(LandingContent(section_key=key, content=content))

        db.commit()
        print(f"Seeded admin '{username}' and {len(DEFAULT_CONTENT)} landing sections.")
        print("Change the default admin password after the first login.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
