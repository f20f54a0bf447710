"""Application service for signup, login and caller lookup."""
from __future__ import annotations
from typing import List, Optional

from qaboard.domain.common.result import Result
from qaboard.domain.user.models import User
from qaboard.domain.user.service import UserDomainService, find_user
from qaboard.persistence.interfaces.forum_repository import UserRepository


class AuthAppService:
    def __init__(self, repo: UserRepository):
        self._repo = repo
        self._domain = UserDomainService()

    @property
    def served_by(self) -> List[str]:
        return self._repo.served_by

    def signup(self, username: str, password: str) -> Result[User]:
        users = self._repo.list_users()
        result = self._domain.signup(username, password, users)
        if not result.is_success:
            return result
        users.append(result.value)
        self._repo.save_users(users)
        return Result.ok(result.value)

    def login(self, username: str, password: str) -> Result[User]:
        return self._domain.login(username, password, self._repo.list_users())

    def find_user(self, username: str) -> Optional[User]:
        return find_user(username, self._repo.list_users())
