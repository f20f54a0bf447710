"""Application service: orchestrates load → domain op → persist for the forum."""
from __future__ import annotations
from typing import List, Optional

from qaboard.domain.common.result import Result
from qaboard.domain.forum.models import Answer, Question, QuestionDetail, QuestionSummary
from qaboard.domain.forum.rules import validate_answer_content
from qaboard.domain.forum.service import ForumDomainService
from qaboard.persistence.interfaces.forum_repository import ForumRepository


class ForumAppService:
    def __init__(self, repo: ForumRepository):
        self._repo = repo
        self._domain = ForumDomainService()

    @property
    def served_by(self) -> List[str]:
        return self._repo.served_by

    # ------------------------------------------------------------------
    # CREATE
    # ------------------------------------------------------------------
    def create_question(self, author: Optional[str], data: dict) -> Result[Question]:
        result = self._domain.create_question(author, data)
        if not result.is_success:
            return result
        questions = self._repo.list_questions()
        questions.append(result.value)
        self._repo.save_questions(questions)
        return Result.ok(result.value)

    def create_answer(self, question_id: str, author: Optional[str], data: dict) -> Result[Answer]:
        # bad input is rejected before any document is read
        validation = validate_answer_content(question_id, data)
        if not validation.is_success:
            return Result.fail(validation.error, kind=validation.kind)

        questions = self._repo.list_questions()
        result = self._domain.create_answer(question_id, author, data, questions)
        if not result.is_success:
            return result

        answers = self._repo.list_answers()
        answers.append(result.value)
        self._repo.save_answers(answers)
        return Result.ok(result.value)

    # ------------------------------------------------------------------
    # READ
    # ------------------------------------------------------------------
    def list_questions(self) -> List[QuestionSummary]:
        questions = self._repo.list_questions()
        answers = self._repo.list_answers()
        return self._domain.summarize(questions, answers)

    def search_questions(self, query: Optional[str] = None) -> List[QuestionSummary]:
        """The query is accepted but not applied; ranking is left to the client."""
        return self.list_questions()

    def get_question(self, question_id: str) -> Result[QuestionDetail]:
        questions = self._repo.list_questions()
        # answers.json is only read for questions that exist
        if not any(q.question_id == question_id for q in questions):
            return self._domain.detail(question_id, questions, [])
        answers = self._repo.list_answers()
        return self._domain.detail(question_id, questions, answers)

    def answers_for_question(self, question_id: str) -> List[Answer]:
        return self._domain.answers_for(question_id, self._repo.list_answers())

    def list_answers(self, question_ref: Optional[str] = None) -> List[Answer]:
        return self._domain.filter_answers(question_ref, self._repo.list_answers())
