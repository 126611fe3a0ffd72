#!/usr/bin/env python3
"""
GuessRight — Інтерактивна анкета в терміналі

Проходить повний цикл: питання -> результат -> зворотний зв'язок.

Запуск:
    python scripts/run_quiz.py
    python scripts/run_quiz.py --data-dir data --max-questions 5
"""

import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from guess_right.quiz_engine import QuizEngine


def ask(prompt: str, allowed: tuple) -> str:
    while True:
        value = input(prompt).strip().lower()
        if value in allowed:
            return value
        print(f"   Введіть одне з: {', '.join(allowed)}")


def main():
    parser = argparse.ArgumentParser(description='GuessRight interactive quiz')
    parser.add_argument('--data-dir', default=str(project_root / "data"))
    parser.add_argument('--max-questions', type=int, default=None,
                        help='Зупинитись раніше (за замовчуванням — всі питання)')
    args = parser.parse_args()

    print("=" * 60)
    print("🎯 GuessRight — Підбір профілю клієнта")
    print("=" * 60)

    engine = QuizEngine.from_data_dir(args.data_dir)
    session = engine.start_session()

    while True:
        step = engine.next_question(session.session_id)
        if step.terminated:
            break
        if args.max_questions and step.question_count > args.max_questions:
            break

        print(f"\n❓ [{step.question_count}] {step.question.text}")
        answer = ask("   (yes/no/unsure): ", ("yes", "no", "unsure"))
        engine.record_answer(session.session_id, step.question.id, answer)

    result = engine.complete_session(session.session_id)

    print("\n" + "=" * 60)
    if result.profile is None:
        print("⚠️ Не вдалося підібрати профіль")
        return

    print(f"✅ {result.profile.name} ({result.confidence_percent}%)")
    print(f"   {result.profile.description}")

    for tip in result.profile.marketing_recommendations:
        print(f"   • {tip}")

    if result.alternatives:
        print("\n   Альтернативи:")
        for alt in result.alternatives:
            print(f"   - {alt.profile.name}: score={alt.score}")

    print("=" * 60)
    correct = ask("Чи правильний результат? (yes/no): ", ("yes", "no")) == "yes"
    suggested = None
    if not correct:
        suggested = input("Який профіль був би правильним? ").strip() or None

    engine.submit_feedback(session.session_id, correct, suggested_profile=suggested)
    print("📝 Дякуємо за відгук!")


if __name__ == "__main__":
    main()
