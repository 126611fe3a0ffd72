"""
GuessRight — Модуль сховища

Ядро не виконує I/O; цей модуль — зовнішній колаборатор для нього.

Компоненти:
- DocumentStore: інтерфейс get / put / increment
- InMemoryStore: потокобезпечна реалізація в пам'яті
- QuizRepository: профілі, питання, сесії
- seed_repository: завантаження data/*.json
"""

from .base import DocumentStore
from .memory import InMemoryStore
from .repository import QuizRepository, PROFILES, QUESTIONS, SESSIONS
from .seed import load_seed_file, seed_repository, seed_from_config


__all__ = [
    "DocumentStore",
    "InMemoryStore",
    "QuizRepository",
    "PROFILES",
    "QUESTIONS",
    "SESSIONS",
    "load_seed_file",
    "seed_repository",
    "seed_from_config",
]
