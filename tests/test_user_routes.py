import logging
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from userhub.core.app_factory import create_application
from userhub.core.config import Settings
from userhub.domain.models import utcnow
from userhub.infrastructure.security.tokens import JwtTokenService


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_list_users_starts_empty(client):
    res = client.get("/api/users")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": {"users": [], "count": 0}}


def test_create_and_fetch_user(client):
    res = client.post("/api/users", json={"name": "Bob", "email": "B@x.com"})
    assert res.status_code == 201
    user = res.json()["data"]["user"]
    assert user["email"] == "b@x.com"
    assert "password" not in user

    fetched = client.get(f"/api/users/{user['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["user"] == user

    listed = client.get("/api/users").json()["data"]
    assert listed["count"] == 1
    assert listed["users"] == [user]


def test_created_user_can_log_in_with_default_password(client):
    client.post("/api/users", json={"name": "Bob", "email": "b@x.com"})
    res = client.post("/api/auth/login", json={"email": "b@x.com", "password": "defaultPassword123"})
    assert res.status_code == 200


def test_create_user_duplicate_email(client, register_user):
    register_user()
    res = client.post("/api/users", json={"name": "Ann", "email": "A@X.COM"})
    assert res.status_code == 400
    assert res.json()["message"] == "Email already exists"


def test_get_unknown_user(client):
    res = client.get("/api/users/99")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "User not found"}


def test_non_numeric_user_id_is_a_validation_error(client):
    res = client.get("/api/users/abc")
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "user_id"


def test_update_requires_authentication(client, register_user):
    data = register_user()
    res = client.put(f"/api/users/{data['user']['id']}", json={"name": "Annie"})
    assert res.status_code == 401


def test_update_applies_partial_changes(client, register_user):
    data = register_user()
    res = client.put(
        f"/api/users/{data['user']['id']}",
        json={"name": "Annie"},
        headers=bearer(data["token"]),
    )
    assert res.status_code == 200
    user = res.json()["data"]["user"]
    assert (user["name"], user["email"]) == ("Annie", "a@x.com")


def test_update_password_allows_new_login(client, register_user):
    data = register_user()
    client.put(
        f"/api/users/{data['user']['id']}",
        json={"password": "brand-new"},
        headers=bearer(data["token"]),
    )
    assert client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"}).status_code == 401
    assert client.post("/api/auth/login", json={"email": "a@x.com", "password": "brand-new"}).status_code == 200


def test_update_rejects_taken_email(client, register_user):
    ann = register_user()
    register_user(name="Bob", email="b@x.com")
    res = client.put(
        f"/api/users/{ann['user']['id']}",
        json={"email": "B@X.com"},
        headers=bearer(ann["token"]),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Email already exists"


def test_update_validates_optional_fields(client, register_user):
    data = register_user()
    res = client.put(
        f"/api/users/{data['user']['id']}",
        json={"password": "123"},
        headers=bearer(data["token"]),
    )
    assert res.status_code == 400
    assert res.json()["errors"] == [
        {"field": "password", "message": "Password must be at least 6 characters long"}
    ]


def test_update_unknown_user(client, register_user):
    data = register_user()
    res = client.put("/api/users/99", json={"name": "Nobody"}, headers=bearer(data["token"]))
    assert res.status_code == 404


def test_delete_user_and_ids_are_not_reused(client, register_user):
    ann = register_user()
    bob = register_user(name="Bob", email="b@x.com")

    assert client.delete(f"/api/users/{bob['user']['id']}").status_code == 401
    res = client.delete(f"/api/users/{bob['user']['id']}", headers=bearer(ann["token"]))
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "User deleted successfully"}

    again = client.delete(f"/api/users/{bob['user']['id']}", headers=bearer(ann["token"]))
    assert again.status_code == 404

    cid = register_user(name="Cid", email="c@x.com")
    assert cid["user"]["id"] > bob["user"]["id"]


def test_list_users_ignores_bad_tokens(client, register_user, caplog):
    register_user()
    with caplog.at_level(logging.WARNING):
        res = client.get("/api/users", headers=bearer("not-a-jwt"))
    assert res.status_code == 200
    assert res.json()["data"]["count"] == 1
    assert "access_guard.optional_rejected" in caplog.text


def test_unknown_route(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Route not found - /api/nope"}


def test_health_and_welcome(client):
    health = client.get("/health").json()
    assert health["success"] is True
    assert health["message"] == "Server is running"
    assert "timestamp" in health

    welcome = client.get("/").json()
    assert welcome["endpoints"]["users"] == "/api/users"


def _boom_app(settings: Settings):
    app = create_application(settings)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return app


def test_unhandled_errors_include_stack_outside_production(settings):
    with TestClient(_boom_app(settings), raise_server_exceptions=False) as client:
        res = client.get("/boom")
    assert res.status_code == 500
    body = res.json()
    assert body["message"] == "Internal server error"
    assert "kaboom" in body["stack"]


def test_unhandled_errors_hide_stack_in_production(settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    with TestClient(_boom_app(Settings()), raise_server_exceptions=False) as client:
        res = client.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Internal server error"}


@pytest.mark.parametrize("case", ["expired", "deleted"])
def test_list_users_treats_stale_tokens_as_anonymous(client, container, settings, register_user, caplog, case):
    ann = register_user()
    bob = register_user(name="Bob", email="b@x.com")
    if case == "expired":
        stale = JwtTokenService(
            settings.jwt_secret,
            expires_in_seconds=60,
            clock=lambda: utcnow() - timedelta(days=2),
        )
        token = stale.issue(ann["user"]["id"], ann["user"]["email"], ann["user"]["name"])
    else:
        token = bob["token"]
        container.user_store.delete(bob["user"]["id"])

    with caplog.at_level(logging.WARNING):
        res = client.get("/api/users", headers=bearer(token))
    assert res.status_code == 200
    assert res.json()["data"]["count"] == (2 if case == "expired" else 1)
    assert "access_guard.optional_rejected" in caplog.text
