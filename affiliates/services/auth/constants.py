"""
Auth Service - Constants.

Configuration constants for affiliate authentication.
"""

# bcrypt cost factor
BCRYPT_ROUNDS = 12

# Shown for unknown email and wrong password alike
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"

REGISTRATION_SUCCESS_MESSAGE = (
    "Application submitted successfully. You will be notified when approved."
)
