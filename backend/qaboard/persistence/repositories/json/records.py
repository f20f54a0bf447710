"""
Mapping between stored JSON records and domain models.

Stored documents were written by several generations of the service, so
reads accept legacy spellings (qid / question_id for the answer's question
reference, createdBy for the author, a {"questions": [...]} wrapper around
the array). Writes always use the canonical names below.
"""
from __future__ import annotations
import logging
from typing import Any, List, Optional

from qaboard.domain.forum.models import Answer, Question
from qaboard.domain.forum.rules import ANONYMOUS
from qaboard.domain.user.models import User

logger = logging.getLogger(__name__)

QUESTION_REF_ALIASES = ("questionId", "qid", "question_id")


def unwrap_collection(data: Any, name: str) -> List[dict]:
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get(name), list):
        items = data[name]
    else:
        if data:
            logger.warning("Unrecognised %s document shape (%s); treating as empty", name, type(data).__name__)
        return []
    return [item for item in items if isinstance(item, dict)]


def pick_question_ref(record: dict) -> Optional[str]:
    for field_name in QUESTION_REF_ALIASES:
        value = record.get(field_name)
        if value is not None and value != "":
            return str(value)
    return None


def _author(record: dict) -> str:
    return str(record.get("author") or record.get("createdBy") or ANONYMOUS)


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


def question_from_record(record: dict) -> Optional[Question]:
    question_id = record.get("questionId")
    if not question_id:
        logger.debug("Skipping question record without questionId: %r", record)
        return None
    return Question(
        question_id=str(question_id),
        title=str(record.get("title") or ""),
        body=str(record.get("body") or ""),
        author=_author(record),
        created_at=str(record.get("createdAt") or ""),
        topics=_str_list(record.get("topics")),
        locations=_str_list(record.get("locations")),
    )


def question_to_record(question: Question) -> dict:
    return {
        "questionId": question.question_id,
        "title": question.title,
        "body": question.body,
        "author": question.author,
        "createdAt": question.created_at,
        "topics": list(question.topics),
        "locations": list(question.locations),
    }


def answer_from_record(record: dict) -> Optional[Answer]:
    answer_id = record.get("answerId")
    if not answer_id:
        logger.debug("Skipping answer record without answerId: %r", record)
        return None
    return Answer(
        answer_id=str(answer_id),
        question_id=pick_question_ref(record) or "",
        body=str(record.get("body") or ""),
        author=_author(record),
        created_at=str(record.get("createdAt") or ""),
    )


def answer_to_record(answer: Answer) -> dict:
    return {
        "answerId": answer.answer_id,
        "questionId": answer.question_id,
        "body": answer.body,
        "author": answer.author,
        "createdAt": answer.created_at,
    }


def user_from_record(record: dict) -> Optional[User]:
    username = record.get("username")
    if not username:
        return None
    return User(
        username=str(username),
        password_hash=str(record.get("passwordHash") or ""),
        created_at=str(record.get("createdAt") or ""),
    )


def user_to_record(user: User) -> dict:
    return {
        "username": user.username,
        "passwordHash": user.password_hash,
        "createdAt": user.created_at,
    }
