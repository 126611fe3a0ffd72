"""
GuessRight — Онлайн-навчання профілів

Коли користувач підтверджує, що профіль підібрано правильно,
відповіді сесії потрапляють у лічильники профілю:

    learning[question] = {yes, no, unsure, total}

Коли total >= 5 і частка найчастішої відповіді >= 0.6,
очікувана відповідь профілю на це питання перезаписується.

Навчання змінює лише профіль, що підбирався. Всі оновлення профілю
записуються в сховище одним записом наприкінці проходу.
"""

from datetime import datetime
from typing import Dict, List, Mapping, Optional, Union
from dataclasses import dataclass, field

from guess_right.config import LearningConfig
from guess_right.schemas import AnswerValue, LearningRecord, Profile, parse_answers


@dataclass
class LearningOutcome:
    """Результат навчання на одній сесії"""
    profile: Profile
    updated_answers: Dict[str, AnswerValue] = field(default_factory=dict)  # змінені очікування
    recorded_questions: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"LearningOutcome(profile='{self.profile.id}', "
            f"recorded={len(self.recorded_questions)}, "
            f"updated={list(self.updated_answers)})"
        )


def apply_feedback(
    profile: Profile,
    answers: Mapping[str, Union[AnswerValue, str]],
    config: Optional[LearningConfig] = None
) -> LearningOutcome:
    """
    Врахувати підтверджені відповіді в копії профілю.

    Args:
        profile: Профіль, який підібрано правильно (не змінюється)
        answers: {question_id: answer} з сесії
        config: Пороги навчання

    Returns:
        LearningOutcome з оновленою копією профілю

    Raises:
        ValueError: невалідна відповідь (нічого не змінено)
    """
    config = config or LearningConfig()
    answers = parse_answers(dict(answers))

    updated = profile.model_copy(deep=True)
    outcome = LearningOutcome(profile=updated)

    for question_id, user_answer in answers.items():
        # Лічильники створюються при першому навчанні на питанні
        record = updated.learning.setdefault(question_id, LearningRecord())
        record.record(user_answer)
        outcome.recorded_questions.append(question_id)

        if record.total < config.min_samples:
            continue

        best_answer, _ = record.majority()
        if record.agreement() >= config.min_confidence:
            if updated.answers.get(question_id) != best_answer:
                outcome.updated_answers[question_id] = best_answer
            updated.answers[question_id] = best_answer

    updated.updated_at = datetime.now()
    return outcome


def learn(
    profile_id: str,
    answers: Mapping[str, Union[AnswerValue, str]],
    is_correct: bool,
    repository,
    config: Optional[LearningConfig] = None
) -> None:
    """
    Оновити профіль за підтвердженим результатом.

    Args:
        profile_id: Профіль, який підібрала сесія
        answers: Відповіді сесії
        is_correct: Чи підтвердив користувач результат
        repository: Сховище з get_profile / put_profile (QuizRepository)
        config: Пороги навчання

    Raises:
        ValueError: невалідна відповідь (нічого не записано)
    """
    # Вчимося тільки на правильних підборах
    if not is_correct:
        return

    answers = parse_answers(dict(answers))

    profile = repository.get_profile(profile_id)
    if profile is None:
        return

    outcome = apply_feedback(profile, answers, config)
    repository.put_profile(outcome.profile)
