"""
Email delivery task.

Sends plain-text program emails over SMTP. Transport errors propagate so
the Retries middleware can re-deliver the message.
"""

import smtplib
from email.mime.text import MIMEText

import dramatiq
from loguru import logger

from affiliates.config.settings import settings
from affiliates.utils.security import mask_email
from jobs.broker import broker  # noqa: F401  (registers the broker)


def build_mime_message(recipient: str, subject: str, body: str) -> MIMEText:
    """Build the MIME message for a plain-text email."""
    message = MIMEText(body, "plain", _charset="utf-8")
    message["Subject"] = subject
    message["From"] = f"{settings.program_name} <{settings.mail_from}>"
    message["To"] = recipient
    return message


@dramatiq.actor(max_retries=3, time_limit=60_000)  # 1 min timeout
def deliver_email(recipient: str, subject: str, body: str) -> bool:
    """
    Deliver one email.

    Args:
        recipient: Destination address
        subject: Subject line
        body: Plain-text body

    Returns:
        True if handed to the SMTP server, False if SMTP is not configured
    """
    if not settings.smtp_host:
        logger.error("SMTP not configured; cannot send email")
        return False

    message = build_mime_message(recipient, subject, body)

    try:
        with smtplib.SMTP(
            settings.smtp_host,
            settings.smtp_port,
            timeout=settings.smtp_timeout,
        ) as server:
            if settings.smtp_use_tls:
                server.starttls()
            if settings.smtp_username:
                server.login(settings.smtp_username, settings.smtp_password or "")
            server.sendmail(settings.mail_from, [recipient], message.as_string())
    except (smtplib.SMTPException, OSError) as e:
        logger.error(
            "SMTP send failed",
            extra={"recipient": mask_email(recipient), "error": str(e)},
        )
        raise

    logger.info(
        "Email delivered",
        extra={"recipient": mask_email(recipient), "subject": subject},
    )
    return True
