"""관리자 로그인/세션 수명주기 동작을 검증하는 테스트입니다."""

from datetime import timedelta

from pikmi.config import settings
from pikmi.models.admin import Admin, AdminSession
from pikmi.services.auth_service import is_hashed
from pikmi.utils.time import utcnow
from tests.conftest import login


def test_login_success(client, seed_admins):
    resp = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Login successful"
    assert data["user"] == {"id": seed_admins["admin"].id, "username": "admin"}
    assert "password" not in data["user"]
    assert settings.SESSION_COOKIE_NAME in resp.cookies


def test_login_wrong_password(client, seed_admins):
    resp = client.post("/api/admin/login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Invalid username or password"}


def test_login_unknown_user_same_message(client, seed_admins):
    resp = client.post("/api/admin/login", json={"username": "ghost", "password": "admin123"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid username or password"


def test_login_username_is_case_sensitive(client, seed_admins):
    resp = client.post("/api/admin/login", json={"username": "ADMIN", "password": "admin123"})
    assert resp.status_code == 401


def test_login_missing_fields(client, seed_admins):
    resp = client.post("/api/admin/login", json={"username": "admin"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Username and password are required"}


def test_legacy_plaintext_password_is_upgraded(client, db):
    db.add(Admin(username="legacy", password="plain123"))
    db.commit()

    login(client, "legacy", "plain123")

    db.expire_all()
    stored = db.query(Admin).filter(Admin.username == "legacy").first().password
    assert stored != "plain123"
    assert is_hashed(stored)

    client.post("/api/admin/logout")
    login(client, "legacy", "plain123")


def test_me_authenticated(client, seed_admins):
    login(client)
    resp = client.get("/api/admin/me")
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["id"] == seed_admins["admin"].id
    assert user["username"] == "admin"
    assert user["created_at"]


def test_me_unauthenticated(client):
    resp = client.get("/api/admin/me")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Unauthorized. Please login."}


def test_me_after_account_deleted_returns_not_found(client, db, seed_admins):
    login(client, "editor", "editor123")
    db.query(Admin).filter(Admin.username == "editor").delete()
    db.commit()

    resp = client.get("/api/admin/me")
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_tampered_cookie_is_rejected(client, seed_admins):
    login(client)
    cookie = client.cookies.get(settings.SESSION_COOKIE_NAME)
    client.cookies.clear()
    client.cookies.set(settings.SESSION_COOKIE_NAME, cookie[:-2] + "xx")
    resp = client.get("/api/admin/me")
    assert resp.status_code == 401


def test_logout_invalidates_session(client, db, seed_admins):
    login(client)
    old_cookie = client.cookies.get(settings.SESSION_COOKIE_NAME)
    assert client.get("/api/admin/me").status_code == 200

    resp = client.post("/api/admin/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Logout successful"}
    assert db.query(AdminSession).count() == 0

    client.cookies.clear()
    client.cookies.set(settings.SESSION_COOKIE_NAME, old_cookie)
    assert client.get("/api/admin/me").status_code == 401


def test_logout_without_session(client):
    resp = client.post("/api/admin/logout")
    assert resp.status_code == 200
    assert resp.json()["success"] is True


def test_relogin_replaces_previous_session(client, db, seed_admins):
    login(client)
    login(client)
    assert db.query(AdminSession).count() == 1


def test_expired_session_is_rejected_and_removed(client, db, seed_admins):
    login(client)
    record = db.query(AdminSession).first()
    record.expires_at = utcnow() - timedelta(seconds=1)
    db.commit()

    resp = client.get("/api/admin/me")
    assert resp.status_code == 401
    db.expire_all()
    assert db.query(AdminSession).count() == 0


def test_session_expiry_slides_on_use(client, db, seed_admins):
    login(client)
    record = db.query(AdminSession).first()
    record.expires_at = utcnow() + timedelta(minutes=5)
    db.commit()

    assert client.get("/api/admin/me").status_code == 200
    db.expire_all()
    refreshed = db.query(AdminSession).first()
    assert refreshed.expires_at > utcnow() + timedelta(hours=23)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Server is running"
    assert data["timestamp"].endswith("Z")
