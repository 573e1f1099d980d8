"""
Tests for registration, login and bearer-token resolution.

These go through the real get_current_user_id dependency backed by the
fake Supabase Auth on the test database.
"""

import pytest
from fastapi import HTTPException

from precision_health.config.settings import settings
from precision_health.modules.auth import service as auth_service


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


def _login(anon_client, email, password):
    response = anon_client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


# ============================================================================
# Register / login
# ============================================================================

def test_register_creates_profile(anon_client, db):
    response = anon_client.post("/api/v1/auth/register", json={
        "email": "rex@example.com", "password": "secret123", "full_name": "Rex",
        "species_type": "pet", "pet_species": "dog",
    })
    assert response.status_code == 201
    user_id = response.json()["user_id"]

    profile = db.rows("profiles")[0]
    assert profile["id"] == user_id
    assert profile["pet_species"] == "dog"


def test_pet_registration_without_species_creates_nothing(anon_client, db):
    """A rejected pet sign-up must not block a later, valid registration"""
    payload = {"email": "rex@example.com", "password": "secret123", "full_name": "Rex", "species_type": "pet"}
    response = anon_client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 422
    assert db.auth.users == {}
    assert db.rows("profiles") == []

    response = anon_client.post("/api/v1/auth/register", json={**payload, "pet_species": "dog"})
    assert response.status_code == 201
    assert db.rows("profiles")[0]["pet_species"] == "dog"


def test_register_duplicate_email_is_400(anon_client, db):
    db.auth.add_user("ada@example.com", "secret123")
    response = anon_client.post("/api/v1/auth/register", json={
        "email": "ada@example.com", "password": "other", "full_name": "Ada",
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "User already exists"


def test_login_success_and_failure(anon_client, db):
    user = db.auth.add_user("ada@example.com", "secret123")
    response = anon_client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert response.status_code == 200
    assert response.json()["user_id"] == user.id
    assert response.json()["token_type"] == "bearer"

    response = anon_client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "wrong"})
    assert response.status_code == 401


# ============================================================================
# Bearer token
# ============================================================================

def test_me_returns_user_and_super_user_flag(anon_client, db):
    db.auth.add_user("root@example.com", "secret123", app_metadata={"type": "super_user"})
    token = _login(anon_client, "root@example.com", "secret123")

    body = anon_client.get("/api/v1/auth/me", headers=_bearer(token)).json()
    assert body["email"] == "root@example.com"
    assert body["is_super_user"] is True


def test_missing_token_is_rejected(anon_client):
    assert anon_client.get("/api/v1/auth/me").status_code in (401, 403)


def test_invalid_token_is_401(anon_client):
    response = anon_client.get("/api/v1/profiles/me", headers=_bearer("garbage"))
    assert response.status_code == 401


def test_token_lookups_are_cached(anon_client, db):
    db.auth.add_user("ada@example.com", "secret123")
    token = _login(anon_client, "ada@example.com", "secret123")

    for _ in range(3):
        assert anon_client.get("/api/v1/auth/me", headers=_bearer(token)).status_code == 200
    assert db.auth.get_user_calls == 1


def test_logout_drops_cached_token(anon_client, db):
    db.auth.add_user("ada@example.com", "secret123")
    token = _login(anon_client, "ada@example.com", "secret123")

    anon_client.get("/api/v1/auth/me", headers=_bearer(token))
    response = anon_client.post("/api/v1/auth/logout", headers=_bearer(token))
    assert response.status_code == 200

    anon_client.get("/api/v1/auth/me", headers=_bearer(token))
    assert db.auth.get_user_calls == 2


# ============================================================================
# Super users
# ============================================================================

def test_set_super_user_requires_super_user(anon_client, db):
    db.auth.add_user("ada@example.com", "secret123")
    token = _login(anon_client, "ada@example.com", "secret123")
    response = anon_client.post("/api/v1/auth/set-super-user", json={"user_id": "x"}, headers=_bearer(token))
    assert response.status_code == 403


def test_set_super_user_updates_app_metadata(anon_client, db, monkeypatch):
    db.auth.add_user("root@example.com", "secret123", app_metadata={"type": "super_user"})
    target = db.auth.add_user("ada@example.com", "secret123")
    monkeypatch.setattr(settings, "supabase_service_role_key", "service-key")
    monkeypatch.setattr(auth_service, "create_client", lambda url, key: db)

    token = _login(anon_client, "root@example.com", "secret123")
    response = anon_client.post(
        "/api/v1/auth/set-super-user", json={"user_id": target.id}, headers=_bearer(token)
    )
    assert response.status_code == 200
    assert target.app_metadata == {"type": "super_user"}


def test_set_super_user_without_service_key_is_500(monkeypatch, db):
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    with pytest.raises(HTTPException) as exc_info:
        auth_service.AuthService(db).set_super_user("someone")
    assert exc_info.value.status_code == 500
