import logging
from typing import Any, Callable, Mapping, Optional

from claimdesk.config import get_settings
from claimdesk.utils.email import send_email
from claimdesk.utils.email_templates import claim_status_update, claim_submission

logger = logging.getLogger(__name__)

Sender = Callable[[str, str, str], bool]


class NotificationDispatcher:
    """Sends claim notices by email, best effort.

    Meant to run as a background task after the record is committed: every
    failure is logged and retried up to ``max_attempts`` times, never raised.
    """

    def __init__(self, sender: Sender = send_email, enabled: Optional[bool] = None, max_attempts: Optional[int] = None):
        settings = get_settings()
        self.sender = sender
        self.enabled = settings.ENABLE_EMAIL_NOTIFICATIONS if enabled is None else enabled
        self.max_attempts = max(1, max_attempts or settings.NOTIFY_MAX_ATTEMPTS)

    def send_submission_notice(self, recipient: str, record: Mapping[str, Any]) -> bool:
        tpl = claim_submission(record["id"], record["orderNumber"], record.get("name"))
        return self._deliver("submission", recipient, record, tpl)

    def send_status_change_notice(self, recipient: str, record: Mapping[str, Any]) -> bool:
        tpl = claim_status_update(record["id"], record["orderNumber"], record["status"], record.get("name"))
        return self._deliver("status_change", recipient, record, tpl)

    def _deliver(self, kind: str, recipient: str, record: Mapping[str, Any], tpl: Mapping[str, str]) -> bool:
        if not self.enabled:
            logger.info("Notifications disabled; skipping %s notice for %s", kind, record.get("id"))
            return False
        if not recipient:
            logger.warning("No recipient for %s notice on %s", kind, record.get("id"))
            return False

        for attempt in range(1, self.max_attempts + 1):
            try:
                if self.sender(recipient, tpl["subject"], tpl["body"]) is not False:
                    logger.info("Sent %s notice for %s to %s", kind, record.get("id"), recipient)
                    return True
                logger.warning("%s notice for %s not accepted (attempt %s/%s)", kind, record.get("id"), attempt, self.max_attempts)
            except Exception as e:
                logger.warning(
                    "%s notice for %s failed (attempt %s/%s): %s",
                    kind, record.get("id"), attempt, self.max_attempts, e,
                )
        logger.error("Giving up on %s notice for %s to %s", kind, record.get("id"), recipient)
        return False


def get_notifier() -> NotificationDispatcher:
    return NotificationDispatcher()
