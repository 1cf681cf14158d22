"""
Password hashing and avatar derivation for new accounts.
"""

import hashlib
from urllib.parse import urlencode
import bcrypt

from .models import MAX_PASSWORD_BYTES

GRAVATAR_URL = "https://www.gravatar.com/avatar"


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with a random salt at the given bcrypt cost."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """
    Build the Gravatar image URL for an email address.

    Gravatar keys images by the MD5 of the trimmed, lower-cased address.
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_URL}/{digest}?{query}"
