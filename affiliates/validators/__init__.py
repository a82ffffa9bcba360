"""
Validators package.

Provides validation functions for affiliate input.
"""

from affiliates.validators.unified import (
    validate_amount,
    validate_email,
    validate_name,
    validate_password,
)

__all__ = [
    "validate_amount",
    "validate_email",
    "validate_name",
    "validate_password",
]
