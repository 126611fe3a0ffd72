"""
GuessRight — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .profiles import router as profiles_router
from .sessions import router as sessions_router

__all__ = [
    'health_router',
    'profiles_router',
    'sessions_router',
]
