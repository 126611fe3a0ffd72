"""
GuessRight — Схеми сесії анкетування

Pydantic моделі для:
- SessionAnswer: одна відповідь у сесії
- SessionFeedback: підтвердження/спростування результату
- Session: стан сесії
"""

from datetime import datetime
from typing import Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator

from .profile import AnswerValue


class SessionStatus(str, Enum):
    """Статус сесії"""
    ACTIVE = "active"
    COMPLETED = "completed"


class SessionAnswer(BaseModel):
    """Відповідь користувача на одне питання"""
    question_id: str = Field(..., min_length=1)
    answer: AnswerValue
    sequence_num: int = Field(default=0, ge=0)
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_validator("answer", mode="before")
    @classmethod
    def validate_answer(cls, v):
        return AnswerValue.parse(v)


class SessionFeedback(BaseModel):
    """Зворотний зв'язок щодо результату"""
    is_correct: bool
    suggested_profile: Optional[str] = None
    comments: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)


class Session(BaseModel):
    """
    Сесія анкетування.

    answers зберігаються в порядку, в якому задавались питання.
    """
    session_id: str = Field(..., min_length=1)
    status: SessionStatus = SessionStatus.ACTIVE
    answers: List[SessionAnswer] = Field(default_factory=list)

    # Результат (після завершення)
    result: Optional[str] = None
    confidence: Optional[float] = None
    feedback: Optional[SessionFeedback] = None

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    def answer_map(self) -> Dict[str, AnswerValue]:
        """{question_id: answer} — формат, який приймає ядро"""
        return {a.question_id: a.answer for a in self.answers}

    def asked_question_ids(self) -> List[str]:
        return [a.question_id for a in self.answers]
