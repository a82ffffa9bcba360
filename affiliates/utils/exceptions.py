"""
Domain exceptions.

Every failure a caller can observe is an AffiliateError subclass with a
stable machine-readable code.
"""


class AffiliateError(Exception):
    """Base class for affiliate program errors."""

    code = "affiliate_error"
    default_message = "Affiliate program error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(AffiliateError):
    """Unknown email or wrong password."""

    code = "invalid_credentials"
    default_message = "Invalid email or password"


class AccountNotActive(AffiliateError):
    """Affiliate exists but is pending or suspended."""

    code = "account_not_active"
    default_message = "Account is not active"


class SessionInvalidOrExpired(AffiliateError):
    """Token unknown or past expiry. Both cases are reported identically."""

    code = "session_invalid"
    default_message = "Invalid or expired session"


class DuplicateEmail(AffiliateError):
    """Email already registered."""

    code = "duplicate_email"
    default_message = "Email already registered"


class NotFound(AffiliateError):
    """Referenced affiliate does not exist."""

    code = "not_found"
    default_message = "Affiliate not found"


class PersistenceFailure(AffiliateError):
    """Storage failed; the unit of work was rolled back."""

    code = "persistence_failure"
    default_message = "Storage operation failed"


class ValidationFailure(AffiliateError):
    """Input rejected before touching storage."""

    code = "validation_failed"
    default_message = "Invalid input"
