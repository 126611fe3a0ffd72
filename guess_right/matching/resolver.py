"""
GuessRight — Вибір найкращого профілю

Ранжування кандидатів за score та оцінка confidence:

    separation = (top - runner_up) / max(top, eps)
    raw        = top / max(answer_count, 1)
    confidence = 0.7 * raw + 0.3 * separation

Якщо кандидат один: confidence = top / max(answer_count, 1).

Нічия за score розв'язується порядком кандидатів у вхідному списку.
Confidence НЕ обрізається до [0, 1].
"""

from typing import Dict, List, Mapping, Optional, Tuple, Union

from guess_right.config import MatchingConfig
from guess_right.schemas import (
    AlternativeMatch,
    AnswerValue,
    MatchResult,
    Profile,
    coerce_profiles,
)
from .scorer import score_profiles


def rank_scores(
    scores: Mapping[str, float],
    profiles: List[Profile]
) -> List[Tuple[Profile, float]]:
    """
    Відсортувати кандидатів за score (спадно).

    Порядок при рівних score — індекс кандидата в profiles.
    Кандидати без запису в scores не ранжуються.
    """
    index = {profile.id: i for i, profile in enumerate(profiles)}

    unknown = [pid for pid in scores if pid not in index]
    if unknown:
        raise ValueError(f"Scores reference unknown profiles: {unknown}")

    ranked = sorted(scores.items(), key=lambda item: (-item[1], index[item[0]]))
    return [(profiles[index[pid]], score) for pid, score in ranked]


def compute_confidence(
    top_score: float,
    runner_up_score: Optional[float],
    answer_count: int,
    config: Optional[MatchingConfig] = None
) -> float:
    """
    Confidence для топ-кандидата.

    Args:
        top_score: Score першого кандидата
        runner_up_score: Score другого (None якщо кандидат один)
        answer_count: Кількість відповідей у сесії
        config: Ваги формули

    Returns:
        Евристична впевненість (без обрізання)
    """
    config = config or MatchingConfig()
    raw_score = top_score / max(answer_count, 1)

    if runner_up_score is None:
        return raw_score

    separation = (top_score - runner_up_score) / max(top_score, config.separation_epsilon)
    return raw_score * config.raw_score_weight + separation * config.separation_weight


def resolve_match(
    scores: Mapping[str, float],
    profiles: List[Union[Profile, dict]],
    answer_count: int,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """
    Обрати найкращий профіль.

    Args:
        scores: {profile_id: score} від score_profiles
        profiles: Кандидати
        answer_count: Кількість відповідей
        config: Параметри формули

    Returns:
        MatchResult (profile=None та confidence=0 якщо кандидатів немає)

    Raises:
        ValueError: від'ємний answer_count або score невідомого профілю
    """
    config = config or MatchingConfig()

    if answer_count < 0:
        raise ValueError(f"answer_count must be >= 0, got {answer_count}")

    profiles = coerce_profiles(profiles)
    ranked = rank_scores(scores, profiles)

    if not ranked:
        return MatchResult(profile=None, confidence=0.0)

    top_profile, top_score = ranked[0]
    runner_up_score = ranked[1][1] if len(ranked) >= 2 else None

    confidence = compute_confidence(top_score, runner_up_score, answer_count, config)

    alternatives = [
        AlternativeMatch(profile=profile, score=score)
        for profile, score in ranked[1:1 + config.max_alternatives]
    ]

    return MatchResult(
        profile=top_profile,
        confidence=confidence,
        alternatives=alternatives,
    )


def match_profiles(
    answers: Mapping[str, Union[AnswerValue, str]],
    profiles: List[Union[Profile, dict]],
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """Скоринг + вибір найкращого профілю (answer_count = len(answers))"""
    scores = score_profiles(answers, profiles, config)
    return resolve_match(scores, profiles, len(answers), config)
