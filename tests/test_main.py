"""
Tests for the application shell: health probes and response headers.
"""

import logging

from precision_health.config.settings import settings
from precision_health.database.supabase_client import check_service_role_key


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_ready_reports_missing_configuration(client, monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "")
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not ready"


def test_ready_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", "https://example.supabase.co")
    monkeypatch.setattr(settings, "supabase_key", "anon-key")
    assert client.get("/ready").json() == {"status": "ready"}


def test_api_responses_are_not_cached(client):
    response = client.get("/api/v1/recipes")
    assert response.headers["Cache-Control"] == "no-store"
    assert "Cache-Control" not in client.get("/health").headers


def test_missing_service_role_key_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    with caplog.at_level(logging.WARNING):
        assert check_service_role_key() is False
    assert "SUPABASE_SERVICE_ROLE_KEY is not set" in caplog.text


def test_service_role_key_present(monkeypatch, caplog):
    monkeypatch.setattr(settings, "supabase_service_role_key", "service-key")
    with caplog.at_level(logging.WARNING):
        assert check_service_role_key() is True
    assert caplog.text == ""
