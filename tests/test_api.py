"""
HTTP surface exercised through FastAPI's TestClient.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from storefront.app import create_app
from storefront.services.session_service import ADMIN_COOKIE_NAME


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


def _login(client):
    resp = client.post("/api/login", json={"username": "alaa", "password": "0000"})
    assert resp.status_code == 200
    return resp


def test_public_catalog_serves_seed(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == ["p1", "p2", "p3"]


def test_admin_routes_require_session(client, settings):
    assert client.post("/api/products", json={"name": "Lamp"}).status_code == 401
    resp = client.delete("/api/products/p1")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Admin authentication required"}
    assert not (settings.data_dir / "products.json").exists()


def test_admin_login_rejects_bad_credentials(client):
    resp = client.post("/api/login", json={"username": "alaa", "password": "1234"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}
    assert client.get("/api/me").json() == {"authenticated": False}


def test_admin_product_management(client):
    resp = _login(client)
    assert resp.json() == {"ok": True, "role": "admin"}
    assert client.get("/api/me").json() == {"authenticated": True, "role": "admin", "username": "alaa"}

    created = client.post("/api/products", json={"name": "Lamp", "price": 10})
    assert created.status_code == 201
    product = created.json()
    assert client.get("/api/products").json()[0] == product

    assert client.post("/api/products", json={"price": 3}).json() == {"error": "Name is required"}

    updated = client.put(f"/api/products/{product['id']}", json={"name": "", "price": 12})
    assert updated.json()["name"] == "Lamp"
    assert updated.json()["price"] == 12
    assert client.put("/api/products/nope", json={"name": "x"}).status_code == 404

    removed = client.delete(f"/api/products/{product['id']}")
    assert removed.json() == {"ok": True, "removed": updated.json()}
    assert client.delete(f"/api/products/{product['id']}").status_code == 404


def test_logout_revokes_token(client):
    token = _login(client).cookies.get(ADMIN_COOKIE_NAME)
    assert token

    assert client.post("/api/logout").json() == {"ok": True}
    assert client.get("/api/me").json() == {"authenticated": False}

    client.cookies.set(ADMIN_COOKIE_NAME, token)
    assert client.post("/api/products", json={"name": "Lamp"}).status_code == 401
    assert client.post("/api/logout").status_code == 200


def test_user_registration_and_login(client):
    resp = client.post("/api/users/register", json={"username": "bob", "password": "x", "fullName": "Bob"})
    assert resp.status_code == 201
    assert resp.json() == {"ok": True, "username": "bob"}

    assert client.post("/api/users/register", json={"username": "BOB", "password": "y"}).status_code == 409
    reserved = client.post("/api/users/register", json={"username": "Alaa", "password": "z"})
    assert reserved.status_code == 400
    assert reserved.json() == {"error": "This username is reserved for the admin"}
    assert client.post("/api/users/register", json={"username": "  ", "password": "z"}).status_code == 400
    assert client.post("/api/users/register", content=b"not json").status_code == 400
    assert client.post("/api/users/register", content=b"[" * 200000).status_code == 400

    ok = client.post("/api/users/login", json={"username": "bob", "password": "x"})
    assert ok.json() == {"ok": True, "role": "user", "username": "bob", "fullName": "Bob"}
    assert client.post("/api/users/login", json={"username": "bob", "password": "no"}).status_code == 401
    assert client.post("/api/users/login", json={"username": "alaa", "password": "0000"}).status_code == 403
    assert client.post("/api/users/login", json={}).status_code == 400


def test_admin_page_and_static_files(client, settings):
    assert client.get("/admin").status_code == 404
    assert client.get("/index.html").status_code == 404

    settings.static_dir.mkdir(parents=True)
    (settings.static_dir / "admin.html").write_text("<h1>admin</h1>", encoding="utf-8")
    (settings.static_dir / "index.html").write_text("<h1>shop</h1>", encoding="utf-8")

    with TestClient(create_app(settings)) as site:
        assert "admin" in site.get("/admin").text
        assert "shop" in site.get("/").text
        assert site.get("/api/products").status_code == 200
        assert site.get("/missing.css").status_code == 404


def test_storage_write_failure_is_a_server_error(settings):
    settings.data_dir.parent.mkdir(parents=True, exist_ok=True)
    settings.data_dir.write_text("not a directory", encoding="utf-8")
    with TestClient(create_app(settings), raise_server_exceptions=False) as c:
        _login(c)
        assert c.post("/api/products", json={"name": "Lamp"}).status_code == 500
        assert [p["id"] for p in c.get("/api/products").json()] == ["p1", "p2", "p3"]
