"""
GuessRight — Profiles & Questions Routes

Каталог профілів та питань.
"""

from fastapi import APIRouter, Depends, HTTPException

from guess_right.quiz_engine import QuizEngine
from guess_right.schemas import Profile, Question

from ..dependencies import get_engine
from ..models import (
    ProfileSummary,
    ProfileDetail,
    ProfileListResponse,
    QuestionInfo,
    QuestionListResponse,
)

router = APIRouter(tags=["Catalog"])


def profile_to_summary(profile: Profile) -> ProfileSummary:
    """Конвертувати профіль у модель відповіді"""
    return ProfileSummary(
        id=profile.id,
        name=profile.name,
        description=profile.description,
        attributes=profile.attributes,
        marketing_recommendations=profile.marketing_recommendations,
        frequency=profile.frequency,
    )


def question_to_info(question: Question) -> QuestionInfo:
    return QuestionInfo(
        id=question.id,
        text=question.text,
        order=question.order,
        asked_count=question.asked_count,
    )


@router.get("/profiles", response_model=ProfileListResponse)
async def list_profiles(
    limit: int = 100,
    offset: int = 0,
    engine: QuizEngine = Depends(get_engine)
) -> ProfileListResponse:
    """Отримати список профілів"""
    profiles = engine.repository.list_profiles()
    return ProfileListResponse(
        profiles=[profile_to_summary(p) for p in profiles[offset:offset + limit]],
        total=len(profiles),
    )


@router.get("/profiles/{profile_id}", response_model=ProfileDetail)
async def get_profile(
    profile_id: str,
    engine: QuizEngine = Depends(get_engine)
) -> ProfileDetail:
    """Отримати профіль разом з очікуваними відповідями"""
    profile = engine.repository.get_profile(profile_id)

    if profile is None:
        raise HTTPException(
            status_code=404,
            detail=f"Profile '{profile_id}' not found"
        )

    return ProfileDetail(
        **profile_to_summary(profile).model_dump(),
        answers=profile.answers,
    )


@router.get("/questions", response_model=QuestionListResponse)
async def list_questions(
    engine: QuizEngine = Depends(get_engine)
) -> QuestionListResponse:
    """Всі питання в порядку order"""
    questions = engine.repository.list_questions()
    return QuestionListResponse(
        questions=[question_to_info(q) for q in questions],
        total=len(questions),
    )
