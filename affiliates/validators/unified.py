"""
Input validators.

Each validator returns a tuple whose first element is the verdict and
whose last element is the error message (None when valid).
"""

import re
from decimal import Decimal, InvalidOperation

from affiliates.config.constants import PASSWORD_MIN_LENGTH

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(email: str) -> tuple[bool, str | None]:
    """
    Validate email address.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_email("user@example.com")
        (True, None)
        >>> validate_email("invalid")
        (False, "Email must contain '@'")
    """
    if not email or not isinstance(email, str):
        return False, "Email is empty"

    email = email.strip()

    if not email:
        return False, "Email is empty"

    if len(email) > 255:
        return False, "Email is too long (maximum 255 characters)"

    if "@" not in email:
        return False, "Email must contain '@'"

    parts = email.split("@")
    if len(parts) != 2:
        return False, "Email must contain exactly one '@'"

    local, domain = parts

    if not local or len(local) > 64:
        return False, "Email local part must be 1-64 characters"

    if "." not in domain:
        return False, "Email domain must contain a dot (.)"

    if any(not part for part in domain.split(".")):
        return False, "Email domain has invalid structure"

    if not EMAIL_PATTERN.match(email):
        return False, "Invalid email format"

    return True, None


def validate_name(name: str) -> tuple[bool, str | None]:
    """Validate affiliate display name: non-empty, at most 255 characters."""
    if not name or not isinstance(name, str) or not name.strip():
        return False, "Name is empty"
    if len(name.strip()) > 255:
        return False, "Name is too long (maximum 255 characters)"
    return True, None


def validate_password(password: str) -> tuple[bool, str | None]:
    """
    Validate password strength.

    Only length is enforced. bcrypt ignores bytes past 72.
    """
    if not password or not isinstance(password, str):
        return False, "Password is empty"
    if len(password) < PASSWORD_MIN_LENGTH:
        return (
            False,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        )
    if len(password.encode("utf-8")) > 72:
        return False, "Password is too long (maximum 72 bytes)"
    return True, None


def validate_amount(
    amount: Decimal | int | float | str,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal | None = None,
) -> tuple[bool, Decimal | None, str | None]:
    """
    Validate a strictly positive monetary amount.

    Args:
        amount: Amount to validate
        min_val: Amount must be greater than this
        max_val: Maximum allowed value (optional)

    Returns:
        Tuple of (is_valid, parsed_value, error_message)

    Examples:
        >>> validate_amount("100.50")
        (True, Decimal('100.50'), None)
        >>> validate_amount("-10")
        (False, None, "Amount must be > 0")
    """
    if amount is None or isinstance(amount, bool):
        return False, None, "Amount is empty"

    if isinstance(amount, str):
        amount = amount.strip().replace(",", ".")
        if not amount:
            return False, None, "Amount is empty"

    try:
        # str() keeps floats at their shortest repr
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        return False, None, "Invalid amount format"

    if not value.is_finite():
        return False, None, "Amount must be a finite number"

    if value <= min_val:
        return False, None, f"Amount must be > {min_val}"

    if max_val is not None and value > max_val:
        return False, None, f"Amount must be <= {max_val}"

    if value.as_tuple().exponent < -8:
        return False, None, "Amount has too many decimal places (maximum 8)"

    return True, value, None
