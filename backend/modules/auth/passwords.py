"""
bcrypt password hashing.
"""

from functools import lru_cache

import bcrypt

# bcrypt only consumes the first 72 bytes of the password.
_BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison of a password against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode())
    except ValueError:
        # Corrupt or foreign hash format
        return False


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("grandline-placeholder", rounds)


def dummy_verify(plain: str, rounds: int = 10) -> None:
    """Spend one bcrypt check on a placeholder hash; the result is ignored.

    Keeps a lookup for an unknown username as slow as a wrong password.
    """
    verify_password(plain, _dummy_hash(rounds))
