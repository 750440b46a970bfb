"""Shared fixtures: in-memory SQLite database, record store and API client."""

import os

# Must be set before config/database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine, init_db
from models.users import User
from utils.catalog import create_product
from utils.hashing import get_password_hash
from utils.record_store import RecordStore


@pytest.fixture(autouse=True)
def fresh_schema():
    init_db()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return RecordStore(db)


@pytest.fixture
def make_product(store):
    def _make(**overrides):
        fields = {
            "name": "Remera Nike Dri-FIT",
            "category": "Remeras",
            "size": "M",
            "color": "Negro",
            "cost_price": 10.0,
            "sale_price": 15.0,
            "stock": 10,
        }
        fields.update(overrides)
        return create_product(store, fields)
    return _make


@pytest.fixture
def client():
    from main import app
    with TestClient(app) as c:
        yield c


def _add_user(db, email, role):
    user = User(email=email, password_hash=get_password_hash("secret123"), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _token(client, email):
    res = client.post("/login", json={"email": email, "password": "secret123"})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def admin_headers(client, db):
    _add_user(db, "admin@tienda.com.ar", "admin")
    return _token(client, "admin@tienda.com.ar")


@pytest.fixture
def user_headers(client, db):
    _add_user(db, "vendedor@tienda.com.ar", "user")
    return _token(client, "vendedor@tienda.com.ar")
