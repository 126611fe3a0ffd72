"""
GuessRight — API Models

Pydantic моделі для запитів та відповідей API.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from guess_right.schemas import AnswerValue, SessionStatus


# ============================================================
# Profile & Question Models
# ============================================================

class ProfileSummary(BaseModel):
    """Профіль для відображення (без лічильників навчання)"""
    id: str
    name: str
    description: str = ""
    attributes: Dict[str, Any] = {}
    marketing_recommendations: List[str] = []
    frequency: int = 0


class ProfileDetail(ProfileSummary):
    """Профіль разом з очікуваними відповідями"""
    answers: Dict[str, AnswerValue] = {}


class QuestionInfo(BaseModel):
    """Питання анкети"""
    id: str
    text: str
    order: int = 0
    asked_count: int = 0


class ProfileListResponse(BaseModel):
    profiles: List[ProfileSummary]
    total: int


class QuestionListResponse(BaseModel):
    questions: List[QuestionInfo]
    total: int


# ============================================================
# Session Models
# ============================================================

class CreateSessionResponse(BaseModel):
    session_id: str


class AnswerInfo(BaseModel):
    question_id: str
    answer: AnswerValue
    sequence_num: int


class SessionResponse(BaseModel):
    """Поточний стан сесії"""
    session_id: str
    status: SessionStatus
    answers: List[AnswerInfo]
    result: Optional[str] = None
    confidence: Optional[float] = None
    profile: Optional[ProfileSummary] = None   # якщо сесію завершено
    created_at: datetime
    completed_at: Optional[datetime] = None


class AnswerRequest(BaseModel):
    """Відповідь на питання"""
    session_id: str = Field(..., min_length=1)
    question_id: str = Field(..., min_length=1)
    answer: str = Field(..., description="yes / no / unsure")
    sequence_num: Optional[int] = Field(default=None, ge=0)


class SuccessResponse(BaseModel):
    success: bool = True


class NextQuestionResponse(BaseModel):
    """Наступне питання або сигнал завершення"""
    terminated: bool
    reason: Optional[str] = None
    question: Optional[QuestionInfo] = None
    question_count: Optional[int] = None


class CompleteRequest(BaseModel):
    session_id: str = Field(..., min_length=1)


class AlternativeInfo(BaseModel):
    profile: ProfileSummary
    score: float


class MatchResponse(BaseModel):
    """Результат підбору профілю"""
    profile: Optional[ProfileSummary] = None
    confidence: float
    confidence_percent: int
    alternatives: List[AlternativeInfo] = []


class FeedbackRequest(BaseModel):
    """Зворотний зв'язок"""
    session_id: str = Field(..., min_length=1)
    is_correct: bool
    suggested_profile: Optional[str] = None
    comments: Optional[str] = None


# ============================================================
# Health Models
# ============================================================

class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "healthy"
    version: str
    data_loaded: bool
    profiles: int
    questions: int
    sessions: int
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Відповідь з помилкою"""
    error: str
    detail: Optional[str] = None
