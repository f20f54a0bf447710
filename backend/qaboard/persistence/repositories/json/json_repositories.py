"""JSON-document implementations of ForumRepository and UserRepository."""
from __future__ import annotations
from typing import Callable, List, Optional, TypeVar

from qaboard.domain.forum.models import Answer, Question
from qaboard.domain.user.models import User
from qaboard.persistence.interfaces.document_store import DocumentStore
from qaboard.persistence.interfaces.forum_repository import ForumRepository, UserRepository
from qaboard.persistence.repositories.json.records import (
    answer_from_record,
    answer_to_record,
    question_from_record,
    question_to_record,
    unwrap_collection,
    user_from_record,
    user_to_record,
)

T = TypeVar("T")

QUESTIONS_KEY = "questions.json"
ANSWERS_KEY = "answers.json"
USERS_KEY = "users.json"
COLLECTION_KEYS = (QUESTIONS_KEY, ANSWERS_KEY, USERS_KEY)


class _JsonCollections:
    """Loads and rewrites whole collections, remembering which backend served each call."""

    def __init__(self, store: DocumentStore):
        self._store = store
        self._served_by: List[str] = []

    @property
    def served_by(self) -> List[str]:
        return list(self._served_by)

    def _load(self, key: str, name: str, from_record: Callable[[dict], Optional[T]]) -> List[T]:
        doc = self._store.get(key)
        self._served_by.append(doc.served_by)
        items = []
        for record in unwrap_collection(doc.data, name):
            item = from_record(record)
            if item is not None:
                items.append(item)
        return items

    def _save(self, key: str, records: List[dict]) -> None:
        self._served_by.append(self._store.put(key, records))


class JsonForumRepository(_JsonCollections, ForumRepository):

    def list_questions(self) -> List[Question]:
        return self._load(QUESTIONS_KEY, "questions", question_from_record)

    def save_questions(self, questions: List[Question]) -> None:
        self._save(QUESTIONS_KEY, [question_to_record(q) for q in questions])

    def list_answers(self) -> List[Answer]:
        return self._load(ANSWERS_KEY, "answers", answer_from_record)

    def save_answers(self, answers: List[Answer]) -> None:
        self._save(ANSWERS_KEY, [answer_to_record(a) for a in answers])


class JsonUserRepository(_JsonCollections, UserRepository):

    def list_users(self) -> List[User]:
        return self._load(USERS_KEY, "users", user_from_record)

    def save_users(self, users: List[User]) -> None:
        self._save(USERS_KEY, [user_to_record(u) for u in users])
