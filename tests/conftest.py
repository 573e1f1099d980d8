"""Shared fixtures: an in-memory Supabase and a TestClient with auth overridden."""

import pytest
from fastapi.testclient import TestClient

from precision_health.main import app
from precision_health.core.dependencies import get_current_user_id
from precision_health.database.supabase_client import get_supabase, get_auth_client
from precision_health.modules.auth.service import clear_auth_cache
from tests.fakes import FakeSupabase

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def current_user():
    return {"id": USER_ID, "email": "user@example.com", "user_metadata": {}, "app_metadata": {}}


@pytest.fixture
def client(db, current_user):
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_auth_client] = lambda: db
    app.dependency_overrides[get_current_user_id] = lambda: current_user
    clear_auth_cache()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()


@pytest.fixture
def anon_client(db):
    """Client that goes through the real bearer-token dependency"""
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_auth_client] = lambda: db
    clear_auth_cache()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()


@pytest.fixture
def human_profile(db):
    return db.seed("profiles", [{"id": USER_ID, "full_name": "Ada", "species_type": "human"}])[0]


@pytest.fixture
def dog_profile(db):
    return db.seed("profiles", [{
        "id": USER_ID, "full_name": "Rex", "species_type": "pet", "pet_species": "dog",
    }])[0]
