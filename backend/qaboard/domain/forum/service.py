"""Domain service: pure forum logic over in-memory collections."""
from __future__ import annotations
from typing import Dict, List, Optional

from qaboard.domain.common.ids import new_id, now_iso
from qaboard.domain.common.result import Result, NOT_FOUND
from qaboard.domain.forum.models import Answer, Question, QuestionDetail, QuestionSummary
from qaboard.domain.forum.rules import (
    caller_or_anonymous,
    normalize_question_ref,
    validate_answer_content,
    validate_question_content,
)


class ForumDomainService:
    """
    Pure domain operations: no I/O. Callers load the collections, hand
    them in, and persist whatever comes back.
    """

    def create_question(self, author: Optional[str], data: dict) -> Result[Question]:
        validation = validate_question_content(data)
        if not validation.is_success:
            return Result.fail(validation.error, kind=validation.kind)

        question = Question(
            question_id=new_id("q"),
            title=str(data["title"]).strip(),
            body=str(data.get("body") or ""),
            author=caller_or_anonymous(author),
            created_at=now_iso(),
        )
        return Result.ok(question)

    def create_answer(
        self,
        question_id: str,
        author: Optional[str],
        data: dict,
        questions: List[Question],
    ) -> Result[Answer]:
        """Answers are only accepted for questions that exist."""
        validation = validate_answer_content(question_id, data)
        if not validation.is_success:
            return Result.fail(validation.error, kind=validation.kind)

        if not any(q.question_id == question_id for q in questions):
            return Result.fail("question not found", kind=NOT_FOUND)

        answer = Answer(
            answer_id=new_id("a"),
            question_id=question_id,
            body=str(data["body"]),
            author=caller_or_anonymous(author),
            created_at=now_iso(),
        )
        return Result.ok(answer)

    def summarize(self, questions: List[Question], answers: List[Answer]) -> List[QuestionSummary]:
        """Questions newest first, each with the number of answers pointing at it."""
        counts: Dict[str, int] = {}
        for answer in answers:
            if answer.question_id:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return [
            QuestionSummary(question=q, answers_count=counts.get(q.question_id, 0))
            for q in reversed(questions)
        ]

    def detail(
        self,
        question_id: str,
        questions: List[Question],
        answers: List[Answer],
    ) -> Result[QuestionDetail]:
        question = next((q for q in questions if q.question_id == question_id), None)
        if question is None:
            return Result.fail("not found", kind=NOT_FOUND)
        return Result.ok(QuestionDetail(question=question, answers=self.answers_for(question_id, answers)))

    def answers_for(self, question_id: str, answers: List[Answer]) -> List[Answer]:
        return [a for a in answers if a.question_id == question_id]

    def filter_answers(self, question_ref: Optional[str], answers: List[Answer]) -> List[Answer]:
        """Loose match used by query-string filters; no reference means everything."""
        key = normalize_question_ref(question_ref)
        if not key:
            return list(answers)
        return [a for a in answers if normalize_question_ref(a.question_id) == key]
