"""Validation rules for questions and answers."""
from __future__ import annotations
from typing import Optional

from qaboard.domain.common.result import Result, INVALID

ANONYMOUS = "anon"


def validate_question_content(data: dict) -> Result[dict]:
    """A question needs a title that is not blank once trimmed."""
    title = data.get("title")
    if title is None or not str(title).strip():
        return Result.fail("title required", kind=INVALID)
    return Result.ok(data)


def validate_answer_content(question_id: Optional[str], data: dict) -> Result[dict]:
    body = data.get("body")
    if not question_id or not str(question_id).strip():
        return Result.fail("bad input", kind=INVALID)
    if body is None or not str(body).strip():
        return Result.fail("bad input", kind=INVALID)
    return Result.ok(data)


def normalize_question_ref(value: Optional[str]) -> str:
    """Comparison key for loosely-typed question references (query filters)."""
    return str(value or "").strip().lower()


def caller_or_anonymous(caller: Optional[str]) -> str:
    caller = (caller or "").strip()
    return caller or ANONYMOUS
