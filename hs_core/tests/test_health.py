import pytest
from django.db import DatabaseError

from hs_core.common import views as common_views

pytestmark = pytest.mark.django_db


def test_health_connected(api_client):
    r = api_client.get("/api/health")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "db": "connected"}


def test_health_without_database_configured(api_client, settings):
    settings.HS_DB_CONFIGURED = False

    r = api_client.get("/api/v1/health/")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "db": "not-configured"}


def test_health_reports_database_failure(api_client, monkeypatch):
    class _DeadConnection:
        def cursor(self):
            raise DatabaseError("server closed the connection")

    monkeypatch.setattr(common_views, "connection", _DeadConnection())

    r = api_client.get("/api/health")

    assert r.status_code == 500
    assert r.json() == {"status": "error", "message": "DB connection failed"}
