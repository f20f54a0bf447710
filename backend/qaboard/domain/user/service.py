"""Domain service: signup and login against the users collection."""
from __future__ import annotations
from typing import List, Optional

from qaboard.domain.common.ids import now_iso
from qaboard.domain.common.result import Result, CONFLICT, NOT_FOUND, UNAUTHORIZED
from qaboard.domain.user.models import User
from qaboard.domain.user.passwords import hash_password, verify_password
from qaboard.domain.user.rules import username_key, validate_credentials, validate_login


def find_user(username: str, users: List[User]) -> Optional[User]:
    key = username_key(username)
    if not key:
        return None
    return next((u for u in users if username_key(u.username) == key), None)


class UserDomainService:

    def signup(self, username: str, password: str, users: List[User]) -> Result[User]:
        validation = validate_credentials(username, password)
        if not validation.is_success:
            return Result.fail(validation.error, kind=validation.kind)

        username, password = validation.value
        if find_user(username, users) is not None:
            return Result.fail("username already taken", kind=CONFLICT)

        return Result.ok(User(
            username=username,
            password_hash=hash_password(password),
            created_at=now_iso(),
        ))

    def login(self, username: str, password: str, users: List[User]) -> Result[User]:
        validation = validate_login(username, password)
        if not validation.is_success:
            return Result.fail(validation.error, kind=validation.kind)

        user = find_user(username, users)
        if user is None:
            return Result.fail("user not found", kind=NOT_FOUND)
        if not verify_password(password or "", user.password_hash):
            return Result.fail("invalid credentials", kind=UNAUTHORIZED)
        return Result.ok(user)
