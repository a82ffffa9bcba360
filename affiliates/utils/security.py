"""
Security utilities for masking sensitive data in logs.

Provides functions to safely mask:
- Email addresses
- Session tokens
"""


def mask_email(email: str | None) -> str:
    """
    Mask email address for logging: jo***@example.com

    Examples:
        >>> mask_email("john.doe@example.com")
        'jo***@example.com'
        >>> mask_email("a@b.c")
        '***@b.c'
        >>> mask_email(None)
        '***'
    """
    if not email or "@" not in email:
        return "***"
    local, _, domain = email.partition("@")
    if len(local) <= 2:
        return f"***@{domain}"
    return f"{local[:2]}***@{domain}"


def mask_token(token: str | None) -> str:
    """
    Mask session token for logging.

    Args:
        token: Hex session token

    Returns:
        Masked token showing first 6 and last 4 characters
    """
    if not token or len(token) < 16:
        return "***"
    return f"{token[:6]}...{token[-4:]}"
