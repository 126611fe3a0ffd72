"""
GuessRight — Аналіз зворотного зв'язку

Аналіз завершених сесій з feedback:
1. Ефективність питань: частка правильних підборів серед сесій,
   у яких питання задавалось
2. Неправильні підбори: які профілі помиляються частіше та які
   патерни відповідей їм передують
3. Пропозиції нових профілів: що користувачі вказують як правильний профіль
"""

import json
from collections import Counter, defaultdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
from dataclasses import dataclass, field, asdict

from guess_right.schemas import Question, Session


@dataclass
class QuestionStats:
    """Статистика одного питання"""
    question_id: str
    text: Optional[str] = None
    asked: int = 0
    correct_matches: int = 0
    incorrect_matches: int = 0
    effectiveness: float = 0.0


@dataclass
class MismatchPattern:
    """Патерн відповіді, що повторюється в неправильних підборах"""
    question_id: str
    answer: str
    count: int


@dataclass
class ProfileMismatches:
    """Неправильні підбори одного профілю"""
    profile_id: str
    incorrect_matches: int
    common_patterns: List[MismatchPattern] = field(default_factory=list)


@dataclass
class ProfileSuggestion:
    """Профіль, який користувачі пропонують замість підібраного"""
    name: str
    count: int
    recommend_new_profile: bool = False


@dataclass
class FeedbackReport:
    """Повний звіт аналізу"""
    sessions_analyzed: int
    questions: List[QuestionStats] = field(default_factory=list)
    most_effective: List[QuestionStats] = field(default_factory=list)
    least_effective: List[QuestionStats] = field(default_factory=list)
    incorrect_matches: List[ProfileMismatches] = field(default_factory=list)
    suggestions: List[ProfileSuggestion] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["generated_at"] = self.generated_at.isoformat()
        return data


def sessions_with_feedback(sessions: List[Session]) -> List[Session]:
    """Завершені сесії, для яких є feedback"""
    return [s for s in sessions if s.is_completed and s.feedback is not None]


def question_effectiveness(
    sessions: List[Session],
    questions: List[Question]
) -> List[QuestionStats]:
    """
    Статистика кожного питання.

    Returns:
        QuestionStats для кожного питання (у порядку questions)
    """
    stats = {q.id: QuestionStats(question_id=q.id, text=q.text) for q in questions}

    for session in sessions_with_feedback(sessions):
        is_correct = session.feedback.is_correct

        for answer in session.answers:
            entry = stats.get(answer.question_id)
            if entry is None:
                continue

            entry.asked += 1
            if is_correct:
                entry.correct_matches += 1
            else:
                entry.incorrect_matches += 1

    for entry in stats.values():
        if entry.asked > 0:
            entry.effectiveness = entry.correct_matches / entry.asked

    return list(stats.values())


def rank_effectiveness(
    stats: List[QuestionStats],
    min_asked: int = 5,
    top_n: int = 5
) -> tuple:
    """
    Найефективніші та найменш ефективні питання.

    Враховуються лише питання, які задавались щонайменше min_asked разів.

    Returns:
        (most_effective, least_effective), найгірше питання першим у least_effective
    """
    eligible = [s for s in stats if s.asked >= min_asked]

    # Стабільне сортування: при рівній ефективності зберігається порядок питань
    most = sorted(eligible, key=lambda s: -s.effectiveness)[:top_n]
    least = sorted(eligible, key=lambda s: s.effectiveness)[:top_n]
    return most, least


def incorrect_match_patterns(
    sessions: List[Session],
    min_count: int = 3,
    top_n: int = 3
) -> List[ProfileMismatches]:
    """
    Профілі з неправильними підборами та типові відповіді в таких сесіях.

    Returns:
        Відсортовано за кількістю неправильних підборів (спадно)
    """
    grouped: Dict[str, List[Session]] = defaultdict(list)

    for session in sessions_with_feedback(sessions):
        if session.feedback.is_correct or not session.result:
            continue
        grouped[session.result].append(session)

    result = []
    for profile_id, profile_sessions in grouped.items():
        patterns = Counter(
            (a.question_id, a.answer.value)
            for s in profile_sessions
            for a in s.answers
        )

        common = [
            MismatchPattern(question_id=qid, answer=answer, count=count)
            for (qid, answer), count in patterns.most_common()
            if count >= min_count
        ][:top_n]

        result.append(ProfileMismatches(
            profile_id=profile_id,
            incorrect_matches=len(profile_sessions),
            common_patterns=common,
        ))

    result.sort(key=lambda m: m.incorrect_matches, reverse=True)
    return result


def profile_suggestions(
    sessions: List[Session],
    recommend_threshold: int = 5
) -> List[ProfileSuggestion]:
    """
    Назви профілів, запропоновані користувачами після неправильного підбору.

    Назви нормалізуються (strip + lower).
    """
    suggested = [
        s.feedback.suggested_profile.strip().lower()
        for s in sessions_with_feedback(sessions)
        if not s.feedback.is_correct
        and s.feedback.suggested_profile
        and s.feedback.suggested_profile.strip()
    ]

    return [
        ProfileSuggestion(
            name=name,
            count=count,
            recommend_new_profile=count >= recommend_threshold,
        )
        for name, count in Counter(suggested).most_common()
    ]


def analyze_feedback(
    sessions: List[Session],
    questions: List[Question],
    min_asked: int = 5,
    min_pattern_count: int = 3,
    recommend_threshold: int = 5
) -> FeedbackReport:
    """Зібрати повний звіт"""
    stats = question_effectiveness(sessions, questions)
    most, least = rank_effectiveness(stats, min_asked=min_asked)

    return FeedbackReport(
        sessions_analyzed=len(sessions_with_feedback(sessions)),
        questions=stats,
        most_effective=most,
        least_effective=least,
        incorrect_matches=incorrect_match_patterns(sessions, min_count=min_pattern_count),
        suggestions=profile_suggestions(sessions, recommend_threshold=recommend_threshold),
    )


def save_report(report: FeedbackReport, path: str) -> Path:
    """Зберегти звіт у JSON"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    return path
