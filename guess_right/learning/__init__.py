"""
GuessRight — Модуль навчання профілів

Компоненти:
- learn: оновити профіль у сховищі за підтвердженим результатом
- apply_feedback: те саме без сховища (повертає оновлену копію)
- LearningOutcome: що саме змінилося
"""

from .learner import LearningOutcome, apply_feedback, learn


__all__ = [
    "LearningOutcome",
    "apply_feedback",
    "learn",
]
