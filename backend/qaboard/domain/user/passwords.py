"""Password hashing.

New hashes are bcrypt. Older user documents hold an unsalted hex SHA-256
digest; those still verify so existing accounts keep working.
"""
from __future__ import annotations
import hashlib
import hmac
import re

import bcrypt

_SHA256_HEX = re.compile(r"^[0-9a-f]{64}$")


def hash_password(password: str) -> str:
    pwd_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pwd_bytes, salt)
    return hashed.decode("utf-8")


def legacy_digest(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    if _SHA256_HEX.match(hashed_password):
        return hmac.compare_digest(legacy_digest(plain_password), hashed_password)
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # not a bcrypt hash either
        return False
