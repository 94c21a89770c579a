import logging
import smtplib
from email.mime.text import MIMEText

from claimdesk.config import get_settings

logger = logging.getLogger(__name__)


def _send_email_console(to_email: str, subject: str, body: str):
    # Development helper: logs the email content instead of sending
    logger.info("[EMAIL:console] To=%s Subject=%s Body=%s", to_email, subject, body)


def send_email(to_email: str, subject: str, body: str) -> bool:
    """Send an email using the configured backend.

    With EMAIL_BACKEND=console (the default) the message is logged instead of sent.
    SMTP failures propagate so callers can decide whether to retry.
    """
    settings = get_settings()
    backend = (settings.EMAIL_BACKEND or "console").lower()
    sender = settings.MAIL_FROM
    password = settings.MAIL_PASSWORD

    if backend != "smtp" or not sender or not password:
        if backend == "smtp":
            logger.warning(
                "EMAIL_BACKEND=smtp but credentials missing (MAIL_FROM set=%s, password length=%s). Falling back to console.",
                bool(sender), len(password or "")
            )
        _send_email_console(to_email, subject, body)
        return True

    msg = MIMEText(body)
    msg["Subject"] = subject
    msg["From"] = sender
    msg["To"] = to_email

    logger.debug("Attempting SMTP connection to %s:%s", settings.SMTP_SERVER, settings.SMTP_PORT)
    with smtplib.SMTP(settings.SMTP_SERVER, settings.SMTP_PORT, timeout=settings.SMTP_TIMEOUT) as server:
        server.starttls()
        server.login(sender, password)
        server.send_message(msg)
    logger.info("Email sent via SMTP to %s", to_email)
    return True
