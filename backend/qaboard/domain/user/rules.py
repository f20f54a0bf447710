"""Signup rules: username shape and password length."""
from __future__ import annotations
import re

from qaboard.domain.common.result import Result, INVALID

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]{3,32}$")
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes and refuses longer input
MAX_PASSWORD_BYTES = 72


def validate_credentials(username: str, password: str) -> Result[tuple]:
    username = (username or "").strip()
    if not USERNAME_PATTERN.match(username):
        return Result.fail(
            "username must be 3-32 characters of letters, digits, '.', '_' or '-'",
            kind=INVALID,
        )
    if len(password or "") < MIN_PASSWORD_LENGTH:
        return Result.fail(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters",
            kind=INVALID,
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return Result.fail(
            f"password must be at most {MAX_PASSWORD_BYTES} bytes",
            kind=INVALID,
        )
    return Result.ok((username, password))


def validate_login(username: str, password: str) -> Result[tuple]:
    if not (username or "").strip() or not password:
        return Result.fail("username and password required", kind=INVALID)
    return Result.ok((username.strip(), password))


def username_key(username: str) -> str:
    """Usernames are unique case-insensitively."""
    return (username or "").strip().lower()
