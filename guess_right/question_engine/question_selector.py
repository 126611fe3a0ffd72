"""
GuessRight — Question Selector

Вибір наступного питання анкети.

Мета = розділити кандидатів, що ще не виключені (potential matches),
якомога рівніше на "yes" та "no":

    split(q) = -((yes/n - 0.5)^2 + (no/n - 0.5)^2)

де n — кількість potential matches. Це жадібна евристика на один крок,
а не повна мінімізація ентропії: розмір групи "unsure" в знаменник
окремо не входить.
"""

from typing import Dict, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass

import numpy as np

from guess_right.config import QuestionEngineConfig
from guess_right.schemas import (
    AnswerValue,
    Profile,
    Question,
    parse_answers,
    coerce_profiles,
    coerce_questions,
)


@dataclass
class SplitResult:
    """Як potential matches відповіли б на питання"""
    question: Question
    yes: int
    no: int
    unsure: int   # включно з профілями без визначеної відповіді
    score: float

    def __repr__(self) -> str:
        return (
            f"SplitResult(question='{self.question.id}', score={self.score:.4f}, "
            f"yes={self.yes}, no={self.no}, unsure={self.unsure})"
        )


def is_definite_mismatch(user_answer: AnswerValue, expected_answer: Optional[AnswerValue]) -> bool:
    """yes проти no (жодна сторона не "unsure")"""
    if expected_answer is None:
        return False
    if AnswerValue.UNSURE in (user_answer, expected_answer):
        return False
    return user_answer != expected_answer


def find_potential_matches(
    answers: Mapping[str, AnswerValue],
    profiles: List[Profile]
) -> List[Profile]:
    """
    Кандидати без жодного явного протиріччя з наданими відповідями.

    Профіль без очікуваної відповіді на питання цим питанням не виключається.
    """
    return [
        profile for profile in profiles
        if not any(
            is_definite_mismatch(user_answer, profile.expected_answer(question_id))
            for question_id, user_answer in answers.items()
        )
    ]


class PotentialMatchCache:
    """
    Кеш potential matches в межах сесії.

    Ключ — набір відповідей та ідентифікатори кандидатів, тому результат
    завжди збігається з обчисленням з нуля.
    """

    def __init__(self):
        self._cache: Dict[Tuple, List[Profile]] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(answers: Mapping[str, AnswerValue], profiles: List[Profile]) -> Tuple:
        answer_key = frozenset((qid, a.value) for qid, a in answers.items())
        profile_key = tuple(
            (p.id, tuple(sorted((qid, a.value) for qid, a in p.answers.items())))
            for p in profiles
        )
        return answer_key, profile_key

    def get(self, answers: Mapping[str, AnswerValue], profiles: List[Profile]) -> List[Profile]:
        key = self._key(answers, profiles)
        if key in self._cache:
            self.hits += 1
            return list(self._cache[key])

        self.misses += 1
        matches = find_potential_matches(answers, profiles)
        self._cache[key] = matches
        return list(matches)

    def clear(self):
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


def _tally(questions: List[Question], candidates: List[Profile]) -> np.ndarray:
    """Матриця [n_questions, 3] з кількістю yes / no / unsure"""
    counts = np.zeros((len(questions), 3), dtype=np.int64)
    column = {AnswerValue.YES: 0, AnswerValue.NO: 1, AnswerValue.UNSURE: 2}

    for i, question in enumerate(questions):
        for profile in candidates:
            expected = profile.expected_answer(question.id)
            # Невизначена відповідь рахується як "unsure"
            counts[i, column[expected or AnswerValue.UNSURE]] += 1

    return counts


def rank_questions(
    available_questions: List[Union[Question, dict]],
    candidates: List[Union[Profile, dict]],
    config: Optional[QuestionEngineConfig] = None
) -> List[SplitResult]:
    """
    Оцінити, наскільки кожне питання ділить кандидатів.

    Args:
        available_questions: Питання, яких ще не задавали
        candidates: Potential matches
        config: Параметри (target_ratio)

    Returns:
        Список SplitResult у порядку вхідних питань
    """
    config = config or QuestionEngineConfig()
    questions = coerce_questions(available_questions)
    candidates = coerce_profiles(candidates)

    if not questions or not candidates:
        return []

    counts = _tally(questions, candidates)
    n = float(len(candidates))

    yes_ratio = counts[:, 0] / n
    no_ratio = counts[:, 1] / n
    scores = -((yes_ratio - config.target_ratio) ** 2 + (no_ratio - config.target_ratio) ** 2)

    return [
        SplitResult(
            question=question,
            yes=int(counts[i, 0]),
            no=int(counts[i, 1]),
            unsure=int(counts[i, 2]),
            score=float(scores[i]),
        )
        for i, question in enumerate(questions)
    ]


def select_next_question(
    available_questions: List[Union[Question, dict]],
    answers: Mapping[str, Union[AnswerValue, str]],
    profiles: List[Union[Profile, dict]],
    config: Optional[QuestionEngineConfig] = None,
    cache: Optional[PotentialMatchCache] = None
) -> Question:
    """
    Обрати наступне питання.

    1. Відповідей ще немає -> питання з найменшим order.
    2. Залишився <= 1 potential match -> перше доступне питання.
    3. Інакше -> питання з найкращим split score (перше при нічиїй).

    Args:
        available_questions: Питання, яких ще не задавали (не змінюється)
        answers: {question_id: answer}
        profiles: Всі кандидати
        config: Параметри
        cache: Кеш potential matches (опціонально)

    Returns:
        Рівно одне питання

    Raises:
        ValueError: порожній список питань або невалідні дані
    """
    config = config or QuestionEngineConfig()
    questions = coerce_questions(available_questions)

    if not questions:
        raise ValueError("No available questions to select from")

    answers = parse_answers(dict(answers))
    profiles = coerce_profiles(profiles)

    # Перше питання — найзагальніше (min повертає перший мінімум)
    if not answers:
        return min(questions, key=lambda q: q.order)

    if cache is not None:
        potential = cache.get(answers, profiles)
    else:
        potential = find_potential_matches(answers, profiles)

    if len(potential) <= 1:
        return questions[0]

    splits = rank_questions(questions, potential, config)
    # argmax повертає перший максимум — порядок вхідного списку
    best = int(np.argmax([s.score for s in splits]))
    return splits[best].question
