"""Forum domain models: pure Python, no storage or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Question:
    question_id: str
    title: str
    body: str = ""
    author: str = "anon"
    created_at: str = ""
    topics: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)


@dataclass
class Answer:
    answer_id: str
    question_id: str
    body: str
    author: str = "anon"
    created_at: str = ""


@dataclass
class QuestionSummary:
    question: Question
    answers_count: int = 0


@dataclass
class QuestionDetail:
    question: Question
    answers: List[Answer] = field(default_factory=list)
