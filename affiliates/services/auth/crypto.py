"""
Auth Service - Cryptographic Utilities.

This module provides utilities for:
- Password hashing and verification
- Session token generation
- Affiliate ID generation
"""

import random
import secrets

import bcrypt

from affiliates.config.constants import (
    AFFILIATE_ID_DIGITS,
    AFFILIATE_ID_MAX,
    AFFILIATE_ID_MIN,
    AFFILIATE_ID_PREFIX,
    SESSION_TOKEN_BYTES,
)

from .constants import BCRYPT_ROUNDS


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt.

    Args:
        password: Plain password

    Returns:
        Hashed password
    """
    return bcrypt.hashpw(
        password.encode(), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    ).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Args:
        plain_password: Plain password
        hashed_password: Stored bcrypt hash

    Returns:
        True if match; False on mismatch or malformed hash
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode(), hashed_password.encode()
        )
    except ValueError:
        return False


def generate_session_token() -> str:
    """
    Generate random session token.

    Returns:
        Hex-encoded 256-bit token (64 characters)
    """
    return secrets.token_hex(SESSION_TOKEN_BYTES)


def generate_affiliate_id(rng: random.Random | None = None) -> str:
    """
    Generate a candidate affiliate ID such as AFF0042.

    Uniqueness is checked by the caller.

    Args:
        rng: Random source (defaults to the module-level generator)
    """
    number = (rng or random).randint(AFFILIATE_ID_MIN, AFFILIATE_ID_MAX)
    return f"{AFFILIATE_ID_PREFIX}{number:0{AFFILIATE_ID_DIGITS}d}"
