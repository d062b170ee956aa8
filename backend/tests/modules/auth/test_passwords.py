"""Tests for modules/auth/passwords.py."""

from unittest.mock import patch

from modules.auth.passwords import dummy_verify, hash_password, verify_password


class TestPasswords:
    def test_hash_is_salted(self):
        """Hashing the same password twice should give different hashes."""
        assert hash_password("sunny", rounds=4) != hash_password("sunny", rounds=4)

    def test_hash_uses_cost_factor(self):
        """The cost factor should be encoded in the hash."""
        assert hash_password("sunny", rounds=5).startswith("$2b$05$")

    def test_verify_correct_password(self):
        hashed = hash_password("sunny", rounds=4)
        assert verify_password("sunny", hashed) is True

    def test_verify_wrong_password(self):
        hashed = hash_password("sunny", rounds=4)
        assert verify_password("merry", hashed) is False

    def test_verify_corrupt_hash(self):
        """A malformed stored hash should fail verification, not raise."""
        assert verify_password("sunny", "not-a-bcrypt-hash") is False

    def test_long_password(self):
        """Passwords beyond bcrypt's 72-byte limit should still hash and verify."""
        password = "x" * 100
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True

    def test_dummy_verify_returns_nothing(self):
        assert dummy_verify("sunny", rounds=4) is None

    def test_dummy_verify_hashes_once_per_cost(self):
        """The placeholder hash is built once, then only checked."""
        dummy_verify("sunny", rounds=4)
        with patch("modules.auth.passwords.hash_password") as mock_hash:
            dummy_verify("merry", rounds=4)
        mock_hash.assert_not_called()
