"""
Notification service module.

Structure:
- core.py: Notifier protocol and the queue-backed NotificationService
- messages.py: Subject/body builders for program emails

Usage:
    from affiliates.services.notification import NotificationService

    notifier = NotificationService()
    await notifier.notify("admin@example.com", "Subject", "Body")
"""

from affiliates.services.notification.core import NotificationService, Notifier
from affiliates.services.notification.messages import (
    EmailMessage,
    build_application_email,
    build_tier_upgrade_email,
)

__all__ = [
    "EmailMessage",
    "NotificationService",
    "Notifier",
    "build_application_email",
    "build_tier_upgrade_email",
]
