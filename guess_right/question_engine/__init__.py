"""
GuessRight — Модуль Question Engine

Обирає наступне питання так, щоб рівно розділити кандидатів,
які ще не виключені відповідями користувача.

split(q) = -((yes/n - 0.5)^2 + (no/n - 0.5)^2)

Компоненти:
- select_next_question: Вибір питання
- find_potential_matches: Кандидати без явних протиріч
- rank_questions: split score для кожного питання
- PotentialMatchCache: Кеш potential matches в межах сесії

Приклад використання:
    from guess_right.question_engine import select_next_question

    question = select_next_question(
        available_questions=remaining,
        answers={"q_large_company": "yes"},
        profiles=profiles
    )
    print(f"Питання: {question.text}")
"""

from .question_selector import (
    SplitResult,
    PotentialMatchCache,
    is_definite_mismatch,
    find_potential_matches,
    rank_questions,
    select_next_question,
)


__all__ = [
    "SplitResult",
    "PotentialMatchCache",
    "is_definite_mismatch",
    "find_potential_matches",
    "rank_questions",
    "select_next_question",
]
