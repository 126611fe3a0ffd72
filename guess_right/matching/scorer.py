"""
GuessRight — Скоринг профілів

Score профілю = сума внесків по всіх питаннях, на які відповів користувач:

    відповіді співпали               -> +1
    одна зі сторін "unsure"          -> +0.5
    yes проти no                     -> 0
    профіль не визначає відповідь    -> питання пропускається

Чиста функція: без стану і без побічних ефектів.
"""

from typing import Dict, List, Mapping, Optional, Union

from guess_right.config import MatchingConfig
from guess_right.schemas import AnswerValue, Profile, parse_answers, coerce_profiles


def answer_affinity(
    user_answer: AnswerValue,
    expected_answer: AnswerValue,
    config: Optional[MatchingConfig] = None
) -> float:
    """
    Внесок однієї пари (відповідь користувача, очікувана відповідь профілю).

    Args:
        user_answer: Відповідь користувача
        expected_answer: Відповідь, яку очікує профіль
        config: Ваги (None = за замовчуванням)

    Returns:
        exact_match_weight, partial_match_weight або 0.0
    """
    config = config or MatchingConfig()

    if user_answer == expected_answer:
        return config.exact_match_weight
    if AnswerValue.UNSURE in (user_answer, expected_answer):
        return config.partial_match_weight
    return 0.0


def score_profiles(
    answers: Mapping[str, Union[AnswerValue, str]],
    profiles: List[Union[Profile, dict]],
    config: Optional[MatchingConfig] = None
) -> Dict[str, float]:
    """
    Порахувати score кожного профілю для набору відповідей.

    Args:
        answers: {question_id: answer}
        profiles: Кандидати (Profile або сирі записи)
        config: Ваги (None = за замовчуванням)

    Returns:
        {profile_id: score} — рівно один запис на кожного кандидата,
        в порядку кандидатів, score >= 0

    Raises:
        ValueError: невалідна відповідь, запис без id або дублікати id
    """
    config = config or MatchingConfig()
    answers = parse_answers(dict(answers))
    profiles = coerce_profiles(profiles)

    # Всі кандидати отримують запис, навіть без спільних питань
    scores = {profile.id: 0.0 for profile in profiles}

    for question_id, user_answer in answers.items():
        for profile in profiles:
            expected = profile.expected_answer(question_id)
            if expected is None:
                continue
            scores[profile.id] += answer_affinity(user_answer, expected, config)

    return scores
