"""Password hashing for users.password (bcrypt over a SHA-256 digest).

The digest is base64-encoded before bcrypt so passwords longer than bcrypt's
72-byte input limit still hash every byte.
"""

import base64
import hashlib

import bcrypt


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return the bcrypt hash stored in users.password."""
    return bcrypt.hashpw(_digest(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches a hash from get_password_hash."""
    try:
        return bcrypt.checkpw(_digest(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False
