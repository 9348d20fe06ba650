"""Password hashing: bcrypt over a base64 SHA-256 digest of the password.

Bcrypt only reads the first 72 bytes of its input, so the password is
digested first; two long passwords sharing a 72-byte prefix still hash
differently. All functions are CPU-bound; call them via asyncio.to_thread.
"""

import base64
import hashlib
from functools import lru_cache

import bcrypt

BCRYPT_ROUNDS = 12


def _bcrypt_input(password: str) -> bytes:
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def get_password_hash(password: str) -> str:
    """Return the bcrypt hash (with embedded salt) to store for password."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("ascii")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password; False for a malformed hash."""
    try:
        return bcrypt.checkpw(_bcrypt_input(plain_password), hashed_password.encode("ascii"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def get_dummy_hash() -> str:
    """Hash compared against when a login email is unknown, so both paths cost one bcrypt check."""
    return get_password_hash("unused-login-placeholder")
