from datetime import timedelta

from fastapi.testclient import TestClient

import main
from conftest import register


def test_register_returns_token_and_public_user(client, mongo):
    res = client.post("/api/auth/register", json={"name": "Ada", "email": "Ada@Example.com", "password": "secret123"})
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["role"] == "user"
    assert "password_hash" not in body["user"]
    assert "cart" not in body["user"]
    stored = mongo["user"].find_one({"email": "ada@example.com"})
    assert stored["password_hash"] != "secret123"
    assert stored["cart"] == []


def test_register_rejects_duplicate_email(client):
    register(client, email="dup@example.com")
    res = client.post("/api/auth/register", json={"name": "Again", "email": "DUP@example.com", "password": "secret123"})
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "User already exists"}


def test_register_validates_password_length(client):
    res = client.post("/api/auth/register", json={"name": "Short", "email": "short@example.com", "password": "123"})
    assert res.status_code == 422
    assert res.json()["message"] == "Validation failed"


def test_register_rejects_blank_name(client, mongo):
    res = client.post("/api/auth/register", json={"name": "   ", "email": "blank@example.com", "password": "secret123"})
    assert res.status_code == 422
    assert res.json()["message"] == "Validation failed"
    assert mongo["user"].count_documents({}) == 0


def test_register_strips_name(client):
    res = client.post("/api/auth/register", json={"name": "  Ada  ", "email": "ada@example.com", "password": "secret123"})
    assert res.json()["user"]["name"] == "Ada"


def test_unhandled_error_renders_server_error(mongo, monkeypatch):
    def explode(user):
        raise RuntimeError("boom")

    headers = register(TestClient(main.app))
    monkeypatch.setattr(main, "populate_cart", explode)
    client = TestClient(main.app, raise_server_exceptions=False)
    res = client.get("/api/cart", headers=headers)
    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Server Error"}


def test_login_and_me(client):
    register(client, email="me@example.com", password="hunter22")
    res = client.post("/api/auth/login", json={"email": "me@example.com", "password": "hunter22"})
    assert res.status_code == 200
    token = res.json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "me@example.com"


def test_login_with_wrong_password(client):
    register(client, email="me@example.com", password="hunter22")
    res = client.post("/api/auth/login", json={"email": "me@example.com", "password": "wrong-pass"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid email or password"


def test_me_requires_token(client):
    res = client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["success"] is False


def test_me_rejects_garbage_and_expired_tokens(client, mongo):
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401

    register(client, email="old@example.com")
    uid = str(mongo["user"].find_one({"email": "old@example.com"})["_id"])
    expired = main.create_access_token({"sub": uid}, expires_delta=timedelta(minutes=-1))
    assert client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"}).status_code == 401


def test_token_for_deleted_user_is_rejected(client, mongo):
    headers = register(client, email="gone@example.com")
    mongo["user"].delete_one({"email": "gone@example.com"})
    assert client.get("/api/auth/me", headers=headers).status_code == 401


def test_database_unavailable(client, monkeypatch):
    monkeypatch.setattr(main, "db", None)
    res = client.post("/api/auth/login", json={"email": "x@example.com", "password": "whatever"})
    assert res.status_code == 503
    assert res.json()["message"] == "Database not available"


def test_health_and_unknown_route(client):
    res = client.get("/api/health")
    assert res.json() == {"success": True, "message": "API is running", "database": "connected"}
    missing = client.get("/api/nope")
    assert missing.status_code == 404
    assert missing.json()["success"] is False


def test_seed_admin_promotes_existing_user(client, mongo, monkeypatch):
    register(client, email="boss@example.com")
    monkeypatch.setattr(main, "ADMIN_EMAIL", "boss@example.com")
    monkeypatch.setattr(main, "ADMIN_PASSWORD", "whatever1")
    main.seed_admin()
    assert mongo["user"].find_one({"email": "boss@example.com"})["role"] == "admin"


def test_seed_admin_creates_account(client, mongo, monkeypatch):
    monkeypatch.setattr(main, "ADMIN_EMAIL", "Root@Example.com")
    monkeypatch.setattr(main, "ADMIN_PASSWORD", "rootpass1")
    main.seed_admin()
    res = client.post("/api/auth/login", json={"email": "root@example.com", "password": "rootpass1"})
    assert res.status_code == 200
    assert res.json()["user"]["role"] == "admin"
