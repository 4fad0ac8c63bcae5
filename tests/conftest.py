from datetime import datetime, timezone

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from passlib.context import CryptContext

import database
import main


@pytest.fixture
def mongo(monkeypatch):
    mock_db = mongomock.MongoClient()["shopkart_test"]
    monkeypatch.setattr(database, "db", mock_db)
    monkeypatch.setattr(main, "db", mock_db)
    # low bcrypt cost keeps the suite fast
    monkeypatch.setattr(main, "pwd_context", CryptContext(schemes=["bcrypt"], bcrypt__rounds=4))
    return mock_db


@pytest.fixture
def client(mongo):
    return TestClient(main.app)


def register(client, email="shopper@example.com", password="secret123", name="Shopper"):
    res = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert res.status_code == 201, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def auth(client):
    return register(client)


@pytest.fixture
def admin_auth(client, mongo):
    headers = register(client, email="admin@example.com", name="Admin")
    mongo["user"].update_one({"email": "admin@example.com"}, {"$set": {"role": "admin"}})
    return headers


@pytest.fixture
def make_product(mongo):
    def _make(**overrides):
        doc = {
            "name": "Smart Watch Pro",
            "description": "Feature-rich smartwatch",
            "price": 299.99,
            "image": None,
            "category": "Electronics",
            "stock": 10,
            "rating": 4.8,
            "num_reviews": 256,
            "created_at": datetime.now(timezone.utc),
            "updated_at": datetime.now(timezone.utc),
        }
        doc.update(overrides)
        return str(mongo["product"].insert_one(doc).inserted_id)
    return _make


def stock_of(mongo, product_id):
    return mongo["product"].find_one({"_id": ObjectId(product_id)})["stock"]
