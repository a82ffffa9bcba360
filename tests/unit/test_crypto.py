"""Unit tests for password hashing, tokens and affiliate IDs."""

import random
import re

from affiliates.services.auth.crypto import (
    generate_affiliate_id,
    generate_session_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Test bcrypt hashing."""

    def test_hash_verifies(self):
        """Correct password verifies against its hash."""
        hashed = hash_password("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed) is True

    def test_wrong_password(self):
        """Wrong password is rejected."""
        hashed = hash_password("s3cret-pass")
        assert verify_password("other-pass", hashed) is False

    def test_salted(self):
        """Same password hashes differently each time."""
        assert hash_password("s3cret-pass") != hash_password("s3cret-pass")

    def test_malformed_hash(self):
        """A corrupt stored hash fails closed."""
        assert verify_password("s3cret-pass", "not-a-bcrypt-hash") is False


class TestSessionToken:
    """Test session token generation."""

    def test_format(self):
        """64 lowercase hex characters (256 bits)."""
        token = generate_session_token()
        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_unique(self):
        """Tokens do not repeat."""
        tokens = {generate_session_token() for _ in range(100)}
        assert len(tokens) == 100


class TestAffiliateId:
    """Test affiliate ID generation."""

    def test_format(self):
        """AFF followed by four digits."""
        for _ in range(200):
            assert re.fullmatch(r"AFF\d{4}", generate_affiliate_id())

    def test_zero_padded(self):
        """Small numbers are zero padded."""
        rng = random.Random()
        rng.randint = lambda a, b: 42
        assert generate_affiliate_id(rng) == "AFF0042"

    def test_never_zero(self):
        """AFF0000 is never produced."""
        rng = random.Random()
        rng.randint = lambda a, b: a
        assert generate_affiliate_id(rng) == "AFF0001"

    def test_seeded_rng_reproducible(self):
        """Same seed yields the same sequence."""
        first = [generate_affiliate_id(random.Random(1)) for _ in range(3)]
        second = [generate_affiliate_id(random.Random(1)) for _ in range(3)]
        assert first == second
