"""
GuessRight — REST API модуль

FastAPI REST API для адаптивної анкети.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Залежності та стан

Запуск:
    uvicorn guess_right.api.app:app --reload --port 8000

Або:
    python scripts/run_api.py

Endpoints:
    GET  /                              - Root info
    GET  /health                        - Health check

    POST /api/sessions                  - Почати сесію
    GET  /api/sessions/{id}             - Стан сесії
    POST /api/answers                   - Відповісти на питання
    GET  /api/questions/next?session_id= - Наступне питання
    POST /api/complete                  - Завершити сесію
    POST /api/feedback                  - Зворотний зв'язок

    GET  /api/profiles                  - Список профілів
    GET  /api/profiles/{id}             - Профіль
    GET  /api/questions                 - Список питань
"""

from .app import app
from .dependencies import app_state, get_engine


__all__ = [
    "app",
    "app_state",
    "get_engine",
]
