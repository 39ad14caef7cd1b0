"""관리자 계정 관리 및 대시보드 API 동작 검증 테스트입니다."""

from pikmi.models.admin import Admin
from pikmi.services.auth_service import verify_password
from tests.conftest import login


def test_create_admin_requires_auth(client):
    resp = client.post("/api/admin/create", json={"username": "newbie", "password": "secret"})
    assert resp.status_code == 401


def test_create_admin_success(client, db, seed_admins):
    login(client)
    resp = client.post("/api/admin/create", json={"username": "newbie", "password": "secret"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Admin created successfully"
    assert data["data"]["username"] == "newbie"
    assert data["data"]["created_at"]
    assert "password" not in data["data"]

    stored = db.query(Admin).filter(Admin.username == "newbie").first()
    assert stored.password != "secret"
    assert verify_password("secret", stored.password)


def test_created_admin_can_login(client, seed_admins):
    login(client)
    client.post("/api/admin/create", json={"username": "newbie", "password": "secret"})
    client.post("/api/admin/logout")
    user = login(client, "newbie", "secret")
    assert user["username"] == "newbie"


def test_create_admin_validation(client, seed_admins):
    login(client)
    cases = [
        ({"username": "newbie"}, "Username and password are required"),
        ({"username": "ab", "password": "secret"}, "Username must be at least 3 characters"),
        ({"username": "newbie", "password": "12"}, "Password must be at least 3 characters"),
    ]
    for body, message in cases:
        resp = client.post("/api/admin/create", json=body)
        assert resp.status_code == 400
        assert resp.json()["message"] == message


def test_create_admin_duplicate(client, seed_admins):
    login(client)
    resp = client.post("/api/admin/create", json={"username": "editor", "password": "another"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Username already exists"}


def test_admin_round_trip(client, seed_admins):
    login(client)
    created = client.post("/api/admin/create", json={"username": "temp", "password": "temp123"}).json()["data"]

    listed = client.get("/api/admin/admins").json()["data"]
    assert created["id"] in [a["id"] for a in listed]
    assert all("password" not in a for a in listed)
    assert listed[0]["id"] == created["id"]  # newest first

    resp = client.delete(f"/api/admin/admins/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Admin deleted successfully"}

    listed = client.get("/api/admin/admins").json()["data"]
    assert created["id"] not in [a["id"] for a in listed]


def test_delete_self_forbidden(client, db, seed_admins):
    user = login(client)
    resp = client.delete(f"/api/admin/admins/{user['id']}")
    assert resp.status_code == 400
    assert resp.json()["message"] == "You cannot delete your own account"
    assert db.query(Admin).filter(Admin.id == user["id"]).first() is not None


def test_delete_admin_not_found(client, seed_admins):
    login(client)
    resp = client.delete("/api/admin/admins/999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Admin not found"


def test_delete_admin_out_of_range_id(client, db, seed_admins):
    login(client)
    resp = client.delete("/api/admin/admins/99999999999999999999999")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Admin not found"}
    assert db.query(Admin).count() == 2


def test_dashboard_stats(client, seed_admins, seed_content):
    login(client, "editor", "editor123")
    resp = client.get("/api/admin/dashboard/stats")
    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "totalAdmins": 2,
        "totalContentSections": 2,
        "lastLogin": "editor",
    }


def test_dashboard_stats_requires_auth(client):
    assert client.get("/api/admin/dashboard/stats").status_code == 401
