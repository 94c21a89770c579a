from datetime import datetime, timedelta, timezone

import httpx
import pytest

from claimdesk.client.messages import format_timestamp, status_label, translate
from claimdesk.client.status import StatusViewer


def test_status_label_mapping():
    assert status_label("InReview") == "In review"
    assert status_label("Resolved", "de") == "Erledigt"
    # Unknown values are shown as-is
    assert status_label("OnHold") == "OnHold"
    assert status_label(None) == ""


def test_translate_falls_back_to_english_then_key():
    assert translate("submit", "fr") == "Submit"
    assert translate("no.such.key") == "no.such.key"


def test_format_timestamp_uses_local_time():
    stored = datetime(2026, 3, 5, 14, 7, 9, tzinfo=timezone.utc)
    local = stored.astimezone()
    # Naive values are stored UTC
    assert format_timestamp("2026-03-05T14:07:09", "de") == local.strftime("%d.%m.%Y, %H:%M:%S")
    assert format_timestamp(datetime(2026, 3, 5, 14, 7, 9)) == local.strftime("%m/%d/%Y, %I:%M:%S %p")
    assert format_timestamp("2026-03-05T14:07:09Z", "de") == local.strftime("%d.%m.%Y, %H:%M:%S")
    assert format_timestamp("garbage") == "garbage"
    assert format_timestamp(None) == ""


def test_format_timestamp_converts_other_offsets():
    stored = datetime(2026, 3, 5, 14, 7, 9, tzinfo=timezone(timedelta(hours=2)))
    expected = stored.astimezone().strftime("%d.%m.%Y, %H:%M:%S")
    assert format_timestamp(stored.isoformat(), "de") == expected


@pytest.mark.anyio
async def test_open_with_known_id(api, claim_payload):
    created = (await api.post("/api/claims", json=claim_payload)).json()
    viewer = StatusViewer(api)
    claim = await viewer.open(created["id"])
    assert claim["id"] == created["id"]
    assert viewer.error is None
    labels = dict(viewer.rendered())
    assert labels["Order number"] == "A1"
    assert labels["Name"] == "Jane Doe"
    assert labels["Status"] == "Pending"
    assert labels["Submission date"]


@pytest.mark.anyio
async def test_open_unknown_id_shows_error(api):
    viewer = StatusViewer(api)
    assert await viewer.open("missing") is None
    assert viewer.error == "An error occurred while fetching the claim."
    assert viewer.rendered() is None


@pytest.mark.anyio
async def test_lookup_by_order_and_email(api, claim_payload):
    await api.post("/api/claims", json={**claim_payload, "orderNumber": "OTHER"})
    created = (await api.post("/api/claims", json=claim_payload)).json()
    await api.patch(f"/api/claims/{created['id']}", json={"status": "InReview"})

    viewer = StatusViewer(api, locale="de")
    claim = await viewer.lookup("A1", "x@y.com")
    assert claim["id"] == created["id"]
    assert dict(viewer.rendered())["Status"] == "In Prüfung"


@pytest.mark.anyio
async def test_lookup_without_match(api, claim_payload):
    await api.post("/api/claims", json=claim_payload)
    viewer = StatusViewer(api)
    assert await viewer.lookup("A1", "wrong@y.com") is None
    assert viewer.error == "No claim found for this order number and email."


@pytest.mark.anyio
async def test_lookup_server_error():
    def handler(request):
        return httpx.Response(500, json={"error": "An error occurred while fetching claims"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as c:
        viewer = StatusViewer(c)
        assert await viewer.lookup("A1", "x@y.com") is None
    assert viewer.error == "An error occurred while fetching the claim."


@pytest.mark.anyio
async def test_lookup_with_mixed_case_email(api, claim_payload):
    created = (await api.post("/api/claims", json={**claim_payload, "email": "Jane@Example.COM"})).json()
    viewer = StatusViewer(api)
    claim = await viewer.lookup("A1", "Jane@Example.COM")
    assert viewer.error is None
    assert claim["id"] == created["id"]


@pytest.mark.anyio
async def test_non_json_body_shows_fetch_error():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as c:
        viewer = StatusViewer(c)
        assert await viewer.open("abc") is None
        assert viewer.error == "An error occurred while fetching the claim."
        assert await viewer.lookup("A1", "x@y.com") is None
        assert viewer.error == "An error occurred while fetching the claim."
