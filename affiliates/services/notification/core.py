"""
Core notification service.

Hands outgoing emails to the background queue. Delivery is best-effort:
failures are logged and reported through the return value, never raised.
"""

import asyncio
from typing import Protocol

from loguru import logger

from affiliates.utils.security import mask_email
from jobs.tasks.email_delivery import deliver_email


class Notifier(Protocol):
    """Anything that can send a plain-text message to an address."""

    async def notify(self, recipient: str, subject: str, body: str) -> bool:
        ...


class NotificationService:
    """Queue-backed email notifier."""

    def __init__(self) -> None:
        """Initialize notification service."""
        self.logger = logger.bind(service=self.__class__.__name__)

    async def notify(self, recipient: str, subject: str, body: str) -> bool:
        """
        Enqueue an email for delivery.

        Args:
            recipient: Destination address
            subject: Subject line
            body: Plain-text body

        Returns:
            True if the message was queued
        """
        if not recipient:
            self.logger.warning(
                "Notification skipped: no recipient",
                extra={"subject": subject},
            )
            return False

        try:
            # Broker enqueue is a blocking Redis call
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(
                None, deliver_email.send, recipient, subject, body
            )
        except Exception as e:
            self.logger.error(
                "Failed to enqueue email",
                extra={
                    "recipient": mask_email(recipient),
                    "subject": subject,
                    "error": str(e),
                },
            )
            return False

        self.logger.info(
            "Email queued",
            extra={"recipient": mask_email(recipient), "subject": subject},
        )
        return True
