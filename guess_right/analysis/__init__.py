"""
GuessRight — Модуль аналізу зворотного зв'язку

Метрики якості анкети за завершеними сесіями:
- question_effectiveness: частка правильних підборів для кожного питання
- incorrect_match_patterns: типові відповіді в неправильних підборах
- profile_suggestions: які профілі пропонують користувачі

Приклад використання:
    from guess_right.analysis import analyze_feedback, save_report

    report = analyze_feedback(repo.list_sessions(), repo.list_questions())
    save_report(report, "reports/question_effectiveness.json")
"""

from .feedback_analysis import (
    QuestionStats,
    MismatchPattern,
    ProfileMismatches,
    ProfileSuggestion,
    FeedbackReport,
    sessions_with_feedback,
    question_effectiveness,
    rank_effectiveness,
    incorrect_match_patterns,
    profile_suggestions,
    analyze_feedback,
    save_report,
)


__all__ = [
    "QuestionStats",
    "MismatchPattern",
    "ProfileMismatches",
    "ProfileSuggestion",
    "FeedbackReport",
    "sessions_with_feedback",
    "question_effectiveness",
    "rank_effectiveness",
    "incorrect_match_patterns",
    "profile_suggestions",
    "analyze_feedback",
    "save_report",
]
