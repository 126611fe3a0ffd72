"""
GuessRight — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from guess_right import __version__
from guess_right.storage import PROFILES, QUESTIONS, SESSIONS

from ..dependencies import get_app_state, AppState
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    state: AppState = Depends(get_app_state)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Чи завантажені дані
    - Кількість профілів/питань/сесій
    """
    if state.engine is None:
        return HealthResponse(
            status="unhealthy",
            version=__version__,
            data_loaded=False,
            profiles=0,
            questions=0,
            sessions=0,
            error=state.error,
        )

    store = state.engine.repository.store
    return HealthResponse(
        status="healthy",
        version=__version__,
        data_loaded=state.is_loaded,
        profiles=store.count(PROFILES),
        questions=store.count(QUESTIONS),
        sessions=store.count(SESSIONS),
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "GuessRight API",
        "version": __version__,
        "description": "Адаптивна анкета для підбору профілю клієнта",
        "docs": "/docs",
        "health": "/health",
    }
