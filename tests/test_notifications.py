import logging

from claimdesk.utils import email as email_module
from claimdesk.utils.email_templates import claim_status_update, claim_submission
from claimdesk.utils.notifications import NotificationDispatcher

RECORD = {"id": "abc123", "orderNumber": "A1", "name": "Jane", "status": "Resolved"}


def test_submission_template():
    tpl = claim_submission("abc123", "A1", "Jane")
    assert tpl["subject"] == "Warranty claim received for order A1"
    assert tpl["body"].startswith("Hi Jane,")
    assert "Claim ID: abc123" in tpl["body"]


def test_status_update_template_uses_readable_status():
    tpl = claim_status_update("abc123", "A1", "InReview")
    assert "Hi there," in tpl["body"]
    assert "status is now: in review" in tpl["body"]


def test_dispatcher_sends_status_change(sender):
    dispatcher = NotificationDispatcher(sender=sender, enabled=True, max_attempts=1)
    assert dispatcher.send_status_change_notice("x@y.com", RECORD) is True
    assert sender.sent[0]["to"] == "x@y.com"
    assert "resolved" in sender.sent[0]["body"]


def test_dispatcher_retries_then_succeeds(sender):
    sender.fail_times = 2
    dispatcher = NotificationDispatcher(sender=sender, enabled=True, max_attempts=3)
    assert dispatcher.send_submission_notice("x@y.com", RECORD) is True
    assert sender.calls == 3
    assert len(sender.sent) == 1


def test_dispatcher_gives_up_without_raising(sender, caplog):
    sender.fail_times = 10
    dispatcher = NotificationDispatcher(sender=sender, enabled=True, max_attempts=2)
    with caplog.at_level(logging.ERROR, logger="claimdesk.utils.notifications"):
        assert dispatcher.send_submission_notice("x@y.com", RECORD) is False
    assert sender.calls == 2
    assert "Giving up" in caplog.text


def test_dispatcher_disabled(sender):
    dispatcher = NotificationDispatcher(sender=sender, enabled=False)
    assert dispatcher.send_submission_notice("x@y.com", RECORD) is False
    assert sender.calls == 0


def test_console_backend_logs_message(caplog):
    with caplog.at_level(logging.INFO, logger="claimdesk.utils.email"):
        assert email_module.send_email("x@y.com", "Hello", "Body text") is True
    assert "[EMAIL:console] To=x@y.com Subject=Hello" in caplog.text


def test_disabled_notifications_still_create_claim(client, claim_payload, sender):
    from claimdesk.main import app
    from claimdesk.utils.notifications import get_notifier

    app.dependency_overrides[get_notifier] = lambda: NotificationDispatcher(sender=sender, enabled=False)
    res = client.post("/api/claims", json=claim_payload)
    assert res.status_code == 201
    assert sender.calls == 0
