#!/usr/bin/env python3
"""
GuessRight — Аналіз зворотного зв'язку

Читає експорт сесій (JSON список) та питання, друкує звіт і зберігає
reports/question_effectiveness.json.

Запуск:
    python scripts/analyze_feedback.py --sessions exports/sessions.json
    python scripts/analyze_feedback.py --sessions exports/sessions.json --min-asked 3
"""

import sys
import json
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from guess_right.analysis import analyze_feedback, save_report
from guess_right.schemas import Question, Session


def main():
    parser = argparse.ArgumentParser(description='GuessRight feedback analysis')
    parser.add_argument('--sessions', required=True, help='JSON file with exported sessions')
    parser.add_argument('--questions', default=str(project_root / "data" / "questions.json"))
    parser.add_argument('--output', default=str(project_root / "reports" / "question_effectiveness.json"))
    parser.add_argument('--min-asked', type=int, default=5)
    args = parser.parse_args()

    print("=" * 60)
    print("📊 GuessRight — Аналіз зворотного зв'язку")
    print("=" * 60)

    with open(args.sessions, 'r', encoding='utf-8') as f:
        sessions = [Session.model_validate(s) for s in json.load(f)]

    with open(args.questions, 'r', encoding='utf-8') as f:
        questions = [Question.model_validate(q) for q in json.load(f)]

    report = analyze_feedback(sessions, questions, min_asked=args.min_asked)
    texts = {q.id: q.text for q in questions}

    print(f"\nЗнайдено {report.sessions_analyzed} сесій з feedback.")

    print("\n=== Ефективність питань ===")
    print("\nНайефективніші:")
    for i, s in enumerate(report.most_effective, 1):
        print(f"{i}. \"{s.text}\" - {s.effectiveness:.0%} (задано {s.asked} разів)")

    print("\nНайменш ефективні:")
    for i, s in enumerate(report.least_effective, 1):
        print(f"{i}. \"{s.text}\" - {s.effectiveness:.0%} (задано {s.asked} разів)")

    print("\n=== Неправильні підбори ===")
    for m in report.incorrect_matches:
        print(f"- {m.profile_id}: {m.incorrect_matches} неправильних підборів")
        for p in m.common_patterns:
            print(f"  - \"{texts.get(p.question_id, p.question_id)}\": {p.answer} ({p.count} разів)")

    print("\n=== Пропозиції профілів ===")
    if not report.suggestions:
        print("Пропозицій немає.")
    for s in report.suggestions:
        print(f"- \"{s.name}\": {s.count}")
        if s.recommend_new_profile:
            print(f"  РЕКОМЕНДАЦІЯ: створити профіль \"{s.name}\"")

    path = save_report(report, args.output)
    print(f"\n💾 Звіт збережено: {path}")


if __name__ == "__main__":
    main()
