"""
Tests for the admin-gated ingestion triggers
"""

import pytest
from werkzeug.security import generate_password_hash

from app import create_app, validate_admin_login
from config import Config, ConfigurationError
from conftest import StaticSource, pubmed_candidate
from database import StoreError, open_store
from models import Peptide
from seed_data import SEED_CATALOG


class AdminConfig(Config):
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "s3cret"
    ADMIN_PASSWORD_HASH = ""
    SECRET_KEY = "test-secret"


class HashedAdminConfig(AdminConfig):
    ADMIN_PASSWORD = ""
    ADMIN_PASSWORD_HASH = generate_password_hash("hashed-s3cret")


class NoAdminConfig(AdminConfig):
    ADMIN_PASSWORD = ""
    ADMIN_PASSWORD_HASH = ""


@pytest.fixture
def sources():
    return [StaticSource("pubmed", {"SEMAGLUTIDE": [pubmed_candidate("321")]})]


@pytest.fixture
def client(db_url, sources):
    app = create_app(config=AdminConfig, store_factory=lambda: open_store(db_url), refresh_sources=sources)
    app.config["TESTING"] = True
    return app.test_client()


def login(client, password="s3cret"):
    return client.post("/admin/login", json={"username": "admin", "password": password})


def test_validate_admin_login():
    assert validate_admin_login("admin", "s3cret", AdminConfig)
    assert not validate_admin_login("admin", "wrong", AdminConfig)
    assert not validate_admin_login("root", "s3cret", AdminConfig)
    assert not validate_admin_login("admin", "", AdminConfig)
    assert validate_admin_login("admin", "hashed-s3cret", HashedAdminConfig)
    assert not validate_admin_login("admin", "s3cret", HashedAdminConfig)
    assert not validate_admin_login("admin", "anything", NoAdminConfig)


def test_login_unconfigured_is_503(db_url):
    client = create_app(config=NoAdminConfig, store_factory=lambda: open_store(db_url)).test_client()
    response = login(client)
    assert response.status_code == 503
    assert response.get_json()["success"] is False


def test_login_bad_credentials_is_401(client):
    response = login(client, password="nope")
    assert response.status_code == 401
    assert response.get_json() == {"success": False, "error": "Invalid credentials."}


def test_triggers_require_admin_session(client):
    for path in ("/admin/ingest/seed", "/admin/ingest/live-refresh"):
        response = client.post(path)
        assert response.status_code == 401
        assert response.get_json()["error"] == "Unauthorized admin action."


def test_logout_revokes_session(client):
    assert login(client).status_code == 200
    client.post("/admin/logout")
    assert client.post("/admin/ingest/seed").status_code == 401


def test_seed_trigger(client, store):
    assert login(client).get_json() == {"success": True}

    response = client.post("/admin/ingest/seed")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "processed": len(SEED_CATALOG), "total": len(SEED_CATALOG)}
    assert len(store.select(Peptide)) == len(SEED_CATALOG)


def test_live_refresh_trigger(client, add_peptide, sources):
    add_peptide("semaglutide")
    add_peptide("tirzepatide")
    login(client)

    response = client.post("/admin/ingest/live-refresh", json={"batchSize": "1", "sourcesPerPeptide": 1})

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["peptidesScanned"] == 1
    assert body["claimsUpserted"] == 1
    assert body["failures"] == 0
    assert sources[0].calls == [("SEMAGLUTIDE", 1)]


def test_live_refresh_trigger_form_defaults(client, add_peptide, sources):
    add_peptide("semaglutide")
    login(client)

    response = client.post("/admin/ingest/live-refresh", data={"batchSize": "not-a-number"})

    assert response.status_code == 200
    assert response.get_json()["peptidesScanned"] == 1


def test_trigger_reports_configuration_error():
    def missing_database():
        raise ConfigurationError("DATABASE_URL is not configured.")

    client = create_app(config=AdminConfig, store_factory=missing_database).test_client()
    login(client)

    response = client.post("/admin/ingest/seed")

    assert response.status_code == 500
    assert "DATABASE_URL" in response.get_json()["error"]


def test_trigger_reports_store_error():
    def broken_database():
        raise StoreError("schema", "disk I/O error")

    client = create_app(config=AdminConfig, store_factory=broken_database).test_client()
    login(client)

    for path in ("/admin/ingest/seed", "/admin/ingest/live-refresh"):
        response = client.post(path)
        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "schema: disk I/O error"}
