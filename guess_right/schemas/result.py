"""
GuessRight — Схеми результату підбору

Pydantic моделі для:
- AlternativeMatch: профіль-альтернатива з сирим score
- MatchResult: найкращий профіль, confidence та альтернативи
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field

from .profile import Profile


class ConfidenceLevel(str, Enum):
    """Рівень впевненості"""
    HIGH = "high"           # >= 0.8
    MEDIUM = "medium"       # 0.5 - 0.8
    LOW = "low"             # < 0.5


class AlternativeMatch(BaseModel):
    """Профіль нижче за топ-1 разом з його score"""
    profile: Profile
    score: float = Field(..., ge=0.0)


class MatchResult(BaseModel):
    """
    Результат підбору профілю.

    confidence — евристика, а не ймовірність. Значення не обрізається
    до [0, 1]: при незвичних score (наприклад, answer_count менший за
    кількість врахованих відповідей) воно може вийти за 1.
    """
    profile: Optional[Profile] = None
    confidence: float = 0.0
    alternatives: List[AlternativeMatch] = Field(default_factory=list)

    @property
    def profile_id(self) -> Optional[str]:
        return self.profile.id if self.profile is not None else None

    @property
    def confidence_percent(self) -> int:
        """Confidence у відсотках (для відображення)"""
        return int(round(self.confidence * 100))

    @property
    def confidence_level(self) -> ConfidenceLevel:
        """Категорія впевненості"""
        if self.confidence >= 0.8:
            return ConfidenceLevel.HIGH
        elif self.confidence >= 0.5:
            return ConfidenceLevel.MEDIUM
        else:
            return ConfidenceLevel.LOW

    def __repr__(self) -> str:
        return (
            f"MatchResult(profile={self.profile_id!r}, "
            f"confidence={self.confidence:.3f}, "
            f"alternatives={len(self.alternatives)})"
        )
