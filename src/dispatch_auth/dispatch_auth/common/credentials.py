"""Password hashing and session token generation.

Hashing and verification are CPU-bound; callers on the event loop should run
them in a worker pool.
"""

from __future__ import annotations

import secrets
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import DEFAULT_PASSWORD_HASH_METHOD, DEFAULT_SESSION_TOKEN_BYTES


def hash_password(password: str, method: Optional[str] = None) -> str:
    return generate_password_hash(password, method=method or DEFAULT_PASSWORD_HASH_METHOD)


def verify_password(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except Exception:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


def generate_session_token(nbytes: int = DEFAULT_SESSION_TOKEN_BYTES) -> str:
    """Opaque URL-safe token with ``nbytes`` of randomness."""
    return secrets.token_urlsafe(nbytes)
