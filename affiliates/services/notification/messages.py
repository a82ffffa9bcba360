"""
Email message builders.

Plain-text bodies for the admin application notice and the tier upgrade
congratulation.
"""

from decimal import Decimal
from typing import NamedTuple

from affiliates.config.settings import settings


class EmailMessage(NamedTuple):
    """Subject and plain-text body."""

    subject: str
    body: str


def format_rate(rate_percent: Decimal) -> str:
    """Format a percentage without trailing zeros: 25.00 -> '25'."""
    return format(rate_percent.normalize(), "f")


def build_application_email(
    affiliate_id: str, name: str, email: str
) -> EmailMessage:
    """Build the admin notice for a new affiliate application."""
    body = (
        "New affiliate registered:\n\n"
        f"ID: {affiliate_id}\n"
        f"Name: {name}\n"
        f"Email: {email}\n\n"
        "Please review and approve this application."
    )
    return EmailMessage(subject="New Affiliate Application", body=body)


def build_tier_upgrade_email(
    name: str, tier: str, rate_percent: Decimal
) -> EmailMessage:
    """Build the congratulation sent to a promoted affiliate."""
    body = (
        f"Hi {name},\n\n"
        f"Great news! Your affiliate account has been upgraded to {tier} tier.\n"
        f"Your new commission rate is {format_rate(rate_percent)}%.\n\n"
        "Keep up the great work!\n\n"
        "Best regards,\n"
        f"{settings.program_name} Team"
    )
    return EmailMessage(
        subject=f"Congratulations! You've been upgraded to {tier} tier",
        body=body,
    )
