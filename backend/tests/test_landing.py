"""공개 랜딩 API 동작 검증 테스트입니다."""

from datetime import datetime

from pikmi.models.landing import LandingImage
from tests.conftest import login


def test_content_map_empty_store(client):
    resp = client.get("/api/landing/content")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": {}}


def test_content_map_flattens_rows(client, seed_content):
    resp = client.get("/api/landing/content")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"hero_title": "Hello", "about_text": "About us"}


def test_content_by_key(client, seed_content):
    resp = client.get("/api/landing/content/hero_title")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"key": "hero_title", "content": "Hello"}


def test_content_by_key_not_found(client, seed_content):
    resp = client.get("/api/landing/content/missing_key")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Content not found"}


def test_created_content_is_readable_by_key(client, seed_admins):
    login(client)
    create_resp = client.post(
        "/api/admin/content",
        json={"section_key": "cta_text", "content": "Sign up <b>today</b>"},
    )
    assert create_resp.status_code == 200

    resp = client.get("/api/landing/content/cta_text")
    assert resp.json()["data"]["content"] == "Sign up <b>today</b>"
    assert client.get("/api/landing/content").json()["data"]["cta_text"] == "Sign up <b>today</b>"


def test_section_images_empty(client):
    resp = client.get("/api/landing/images/gallery")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": []}


def test_section_images_filtered_and_newest_first(client, db):
    db.add_all([
        LandingImage(section_key="gallery", image_url="/uploads/a.png", alt_text="A",
                     created_at=datetime(2026, 1, 1)),
        LandingImage(section_key="gallery", image_url="/uploads/b.png", alt_text="",
                     created_at=datetime(2026, 2, 1)),
        LandingImage(section_key="hero", image_url="/uploads/c.png", alt_text="C",
                     created_at=datetime(2026, 3, 1)),
    ])
    db.commit()

    resp = client.get("/api/landing/images/gallery")
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert [r["image_url"] for r in rows] == ["/uploads/b.png", "/uploads/a.png"]
    assert set(rows[0].keys()) == {"id", "section_key", "image_url", "alt_text"}
