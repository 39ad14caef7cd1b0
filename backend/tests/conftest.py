import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from pikmi.config import settings
from pikmi.database import Base, get_db
from pikmi.main import app
from pikmi.models.admin import Admin
from pikmi.models.landing import LandingContent
from pikmi.services.auth_service import hash_password

TEST_DB_URL = "sqlite:///./test_pikmi.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    target.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def seed_admins(db):
    admins = {
        "admin": Admin(username="admin", password=hash_password("admin123")),
        "editor": Admin(username="editor", password=hash_password("editor123")),
    }
    for a in admins.values():
        db.add(a)
    db.commit()
    for a in admins.values():
        db.refresh(a)
    return admins


@pytest.fixture
def seed_content(db):
    rows = [
        LandingContent(section_key="hero_title", content="Hello"),
        LandingContent(section_key="about_text", content="About us"),
    ]
    for r in rows:
        db.add(r)
    db.commit()
    for r in rows:
        db.refresh(r)
    return rows


def login(client, username: str = "admin", password: str = "admin123") -> dict:
    resp = client.post("/api/admin/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["user"]


def png_file(name: str = "test.png", field: str = "image"):
    return (field, (name, b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, "image/png"))
