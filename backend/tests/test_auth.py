import pytest

from toolshelf.config import settings
from toolshelf.models import User

from .conftest import PASSWORD


def _assert_no_password(user_json):
    assert "password" not in user_json
    assert "hashedPassword" not in user_json
    assert "hashed_password" not in user_json


def test_signup_creates_user(client, db_session):
    resp = client.post(
        "/api/auth/signup",
        json={"fullName": "A", "email": "a@x.com", "password": "p1"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["statusCode"] == 201
    assert body["success"] is True
    assert body["message"] == "Signup successful"
    assert body["data"]["email"] == "a@x.com"
    assert body["data"]["fullName"] == "A"
    assert body["data"]["isAdmin"] is False
    assert body["data"]["favoriteTools"] == []
    _assert_no_password(body["data"])

    stored = db_session.query(User).filter(User.email == "a@x.com").one()
    assert stored.hashed_password != "p1"


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@x.com", "password": "p1"},
        {"fullName": "A", "password": "p1"},
        {"fullName": "A", "email": "a@x.com"},
        {"fullName": "", "email": "a@x.com", "password": "p1"},
        {"fullName": "A", "email": "", "password": "p1"},
        {"fullName": "A", "email": "a@x.com", "password": ""},
        {},
    ],
)
def test_signup_requires_all_fields(client, db_session, payload):
    resp = client.post("/api/auth/signup", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"statusCode": 400, "message": "all fields are required", "success": False}
    assert db_session.query(User).count() == 0


def test_signup_duplicate_email_conflicts(client, db_session):
    payload = {"fullName": "A", "email": "a@x.com", "password": "p1"}
    assert client.post("/api/auth/signup", json=payload).status_code == 201

    resp = client.post("/api/auth/signup", json=payload)
    assert resp.status_code == 409
    assert resp.json()["success"] is False
    assert resp.json()["message"] == "User already exists"
    assert db_session.query(User).count() == 1


def test_login_sets_http_only_cookie(client, make_user):
    make_user(email="a@x.com")
    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": PASSWORD})

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["data"]["email"] == "a@x.com"
    _assert_no_password(body["data"])

    cookie_header = resp.headers["set-cookie"]
    assert cookie_header.startswith(f"{settings.cookie_name}=")
    assert "HttpOnly" in cookie_header
    assert client.cookies.get(settings.cookie_name)


def test_login_wrong_password(client, make_user):
    make_user(email="a@x.com")
    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid password"
    assert "set-cookie" not in resp.headers


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "p1"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "user not found"


def test_login_requires_fields(client):
    resp = client.post("/api/auth/login", json={"email": "a@x.com"})
    assert resp.status_code == 400


def test_signout_without_session(client):
    resp = client.post("/api/auth/signout")
    assert resp.status_code == 200
    assert resp.json() == {
        "statusCode": 200,
        "data": {},
        "message": "Signout successful",
        "success": True,
    }
    assert "Max-Age=0" in resp.headers["set-cookie"]


def test_signout_ends_session(client, make_user, login):
    make_user(email="a@x.com")
    login("a@x.com")
    assert client.get("/api/users/profile").status_code == 200

    resp = client.post("/api/auth/signout")
    assert resp.status_code == 200
    assert client.get("/api/users/profile").status_code == 401


def test_google_creates_new_user(client, db_session):
    resp = client.post("/api/auth/google", json={"email": "g@x.com", "fullName": "G"})

    assert resp.status_code == 201
    body = resp.json()
    assert body["statusCode"] == 201
    assert body["message"] == "User created and logged in"
    assert body["data"]["avatar"] == settings.default_avatar_url
    _assert_no_password(body["data"])
    assert client.cookies.get(settings.cookie_name)

    stored = db_session.query(User).filter(User.email == "g@x.com").one()
    assert stored.hashed_password


def test_google_keeps_given_avatar(client):
    resp = client.post(
        "/api/auth/google",
        json={"email": "g@x.com", "fullName": "G", "avatar": "https://img.example/me.png"},
    )
    assert resp.json()["data"]["avatar"] == "https://img.example/me.png"


def test_google_logs_in_existing_user_without_password(client, make_user, db_session):
    user = make_user(email="g@x.com", full_name="Existing")
    resp = client.post("/api/auth/google", json={"email": "g@x.com", "fullName": "Other Name"})

    assert resp.status_code == 200
    assert resp.json()["message"] == "Login successful"
    assert resp.json()["data"]["id"] == user.id
    assert resp.json()["data"]["fullName"] == "Existing"
    assert db_session.query(User).count() == 1
    assert client.get("/api/users/profile").json()["data"]["email"] == "g@x.com"


@pytest.mark.parametrize("payload", [{"email": "g@x.com"}, {"fullName": "G"}])
def test_google_requires_email_and_name(client, payload):
    resp = client.post("/api/auth/google", json=payload)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email and full name are required"


def test_bearer_header_is_accepted(client, make_user):
    make_user(email="a@x.com")
    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": PASSWORD})
    token = client.cookies.get(settings.cookie_name)
    client.cookies.clear()

    resp = client.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200


def test_garbage_token_is_rejected(client):
    resp = client.get("/api/users/profile", headers={"Cookie": f"{settings.cookie_name}=not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid access token"


def test_production_cookies_are_secure_on_every_login_path(client, make_user, monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(settings, "cookie_secure", None)
    make_user(email="a@x.com")

    login = client.post("/api/auth/login", json={"email": "a@x.com", "password": PASSWORD})
    existing = client.post("/api/auth/google", json={"email": "a@x.com", "fullName": "A"})
    created = client.post("/api/auth/google", json={"email": "new@x.com", "fullName": "N"})

    assert [login.status_code, existing.status_code, created.status_code] == [200, 200, 201]
    for resp in (login, existing, created):
        cookie_header = resp.headers["set-cookie"]
        assert cookie_header.startswith(f"{settings.cookie_name}=")
        assert "HttpOnly" in cookie_header
        assert "Secure" in cookie_header


def test_development_cookies_are_not_secure(client, make_user, monkeypatch):
    monkeypatch.setattr(settings, "environment", "development")
    monkeypatch.setattr(settings, "cookie_secure", None)
    make_user(email="a@x.com")

    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": PASSWORD})
    assert "Secure" not in resp.headers["set-cookie"]
