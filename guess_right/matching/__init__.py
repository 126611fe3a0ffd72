"""
GuessRight — Модуль підбору профілю (matching)

Компоненти:
- score_profiles: score кожного кандидата для набору відповідей
- resolve_match: найкращий профіль, confidence, до 3 альтернатив
- match_profiles: обидва кроки разом

Приклад використання:
    from guess_right.matching import score_profiles, resolve_match

    answers = {"q1": "yes", "q2": "no"}
    scores = score_profiles(answers, profiles)
    result = resolve_match(scores, profiles, answer_count=len(answers))

    print(result.profile.name, result.confidence)
"""

from .scorer import answer_affinity, score_profiles
from .resolver import rank_scores, compute_confidence, resolve_match, match_profiles


__all__ = [
    "answer_affinity",
    "score_profiles",
    "rank_scores",
    "compute_confidence",
    "resolve_match",
    "match_profiles",
]
