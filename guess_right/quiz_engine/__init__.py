"""
GuessRight — Движок анкетування (Quiz Engine)

Об'єднує компоненти ядра зі сховищем:
- select_next_question — яке питання задати
- score_profiles + resolve_match — фінальний результат
- learn — навчання на підтверджених результатах

Приклад використання:
    from guess_right.quiz_engine import QuizEngine

    engine = QuizEngine.from_data_dir("data")
    session = engine.start_session()
    step = engine.next_question(session.session_id)
"""

from .engine import QuizEngine, NextQuestion


__all__ = [
    "QuizEngine",
    "NextQuestion",
]
