"""Shared fixtures.

Environment variables are set before the application is imported because
``toolshelf.config`` validates settings at import time.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-bytes-for-hs256-signing")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from toolshelf.database import Base, get_db
from toolshelf.main import app
from toolshelf.models import Tool, User
from toolshelf.utils.auth import get_password_hash

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "p4ssword!"


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    # https so Secure cookies are sent back when the production policy is on
    with TestClient(app, base_url="https://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(email="user@example.com", full_name="Test User", password=PASSWORD, **flags):
        user = User(
            email=email,
            full_name=full_name,
            hashed_password=get_password_hash(password),
            **flags,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_tool(db_session):
    def _make_tool(name="Hammer", category="hardware", **fields):
        tool = Tool(name=name, category=category, **fields)
        db_session.add(tool)
        db_session.commit()
        db_session.refresh(tool)
        return tool

    return _make_tool


@pytest.fixture
def login(client):
    """Log ``email`` in on the shared client; the session cookie stays in its jar."""
    def _login(email, password=PASSWORD):
        client.cookies.clear()
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp

    return _login
