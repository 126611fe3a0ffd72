"""
GuessRight — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- profile.py: AnswerValue, Question, LearningRecord, Profile
- result.py: MatchResult, AlternativeMatch, ConfidenceLevel
- session.py: Session, SessionAnswer, SessionFeedback, SessionStatus

Приклад використання:
    from guess_right.schemas import Profile, AnswerValue

    profile = Profile.model_validate({
        "_id": "enterprise_it_buyer",
        "name": "Enterprise IT Buyer",
        "answers": {"q_large_company": "yes"},
    })

    assert profile.expected_answer("q_large_company") == AnswerValue.YES
"""

# Profile schemas
from .profile import (
    AnswerValue,
    Question,
    LearningRecord,
    Profile,
    parse_answers,
    coerce_profiles,
    coerce_questions,
)

# Result schemas
from .result import (
    ConfidenceLevel,
    AlternativeMatch,
    MatchResult,
)

# Session schemas
from .session import (
    SessionStatus,
    SessionAnswer,
    SessionFeedback,
    Session,
)


__all__ = [
    # Profile
    "AnswerValue",
    "Question",
    "LearningRecord",
    "Profile",
    "parse_answers",
    "coerce_profiles",
    "coerce_questions",

    # Result
    "ConfidenceLevel",
    "AlternativeMatch",
    "MatchResult",

    # Session
    "SessionStatus",
    "SessionAnswer",
    "SessionFeedback",
    "Session",
]
