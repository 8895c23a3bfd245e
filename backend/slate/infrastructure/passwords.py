"""Password Hashing — passlib CryptContext (PBKDF2-SHA256, no native backend needed).

Invariants:
    - Only hashes are stored; verify() never raises on malformed hashes
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        logger.warning(f"Unrecognized password hash format: {e}")
        return False
