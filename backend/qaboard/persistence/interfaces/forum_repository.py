"""Abstract repository interfaces for the question, answer and user collections."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from qaboard.domain.forum.models import Answer, Question
from qaboard.domain.user.models import User


class ForumRepository(ABC):

    @abstractmethod
    def list_questions(self) -> List[Question]:
        """Return every question in insertion order (oldest first)."""
        ...

    @abstractmethod
    def save_questions(self, questions: List[Question]) -> None:
        """Replace the whole questions collection."""
        ...

    @abstractmethod
    def list_answers(self) -> List[Answer]:
        """Return every answer in insertion order."""
        ...

    @abstractmethod
    def save_answers(self, answers: List[Answer]) -> None:
        """Replace the whole answers collection."""
        ...

    @property
    @abstractmethod
    def served_by(self) -> List[str]:
        """Labels of the storage backends that served this repository's calls, in order."""
        ...


class UserRepository(ABC):

    @abstractmethod
    def list_users(self) -> List[User]:
        ...

    @abstractmethod
    def save_users(self, users: List[User]) -> None:
        ...

    @property
    @abstractmethod
    def served_by(self) -> List[str]:
        ...
