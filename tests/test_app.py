from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from claimdesk.main import app
from claimdesk.models.repository import CaseRepository


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unmatched_path_serves_client_entry(client):
    res = client.get("/status")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert '<div id="root">' in res.text


def test_unknown_api_path_is_json_404(client):
    res = client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json() == {"error": "Not found"}


def test_storage_error_becomes_generic_500(client, claim_payload):
    failure = OperationalError("INSERT", {}, Exception("database is locked"))
    with mock.patch.object(CaseRepository, "create", side_effect=failure):
        res = client.post("/api/claims", json=claim_payload)
    assert res.status_code == 500
    assert res.json() == {"error": "An error occurred while creating the claim"}


def test_unexpected_error_becomes_500():
    with mock.patch.object(CaseRepository, "find_many", side_effect=RuntimeError("boom")):
        res = TestClient(app, raise_server_exceptions=False).get("/api/returns")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
