"""
Тести для модуля quiz_engine

Запуск: pytest tests/test_quiz_engine.py -v
Або демо: python tests/test_quiz_engine.py
"""

import pytest


def make_engine(config=None):
    """Движок з двома профілями та двома питаннями"""
    from guess_right.quiz_engine import QuizEngine
    from guess_right.schemas import Profile, Question

    engine = QuizEngine(config=config)
    repo = engine.repository

    repo.put_question(Question(_id="q1", text="Question 1", order=1))
    repo.put_question(Question(_id="q2", text="Question 2", order=2))

    repo.put_profile(Profile(_id="A", name="Profile A", answers={"q1": "yes", "q2": "no"}))
    repo.put_profile(Profile(_id="B", name="Profile B", answers={"q1": "yes", "q2": "yes"}))

    return engine


def run_session(engine, answers):
    """Пройти сесію з фіксованими відповідями"""
    session = engine.start_session()
    for question_id, answer in answers.items():
        engine.record_answer(session.session_id, question_id, answer)
    result = engine.complete_session(session.session_id)
    return session.session_id, result


def test_full_flow():
    """Тест повного циклу: питання -> відповіді -> результат"""
    engine = make_engine()
    session = engine.start_session()

    step = engine.next_question(session.session_id)
    assert not step.terminated
    assert step.question.id == "q1"
    assert step.question_count == 1

    engine.record_answer(session.session_id, "q1", "yes")

    step = engine.next_question(session.session_id)
    assert step.question.id == "q2"
    assert step.question_count == 2

    engine.record_answer(session.session_id, "q2", "no")

    step = engine.next_question(session.session_id)
    assert step.terminated
    assert step.reason == "no_more_questions"

    result = engine.complete_session(session.session_id)

    assert result.profile.id == "A"
    assert result.confidence == pytest.approx(0.85)

    stored = engine.get_session(session.session_id)
    assert stored.is_completed
    assert stored.result == "A"
    assert stored.completed_at is not None
    assert [a.sequence_num for a in stored.answers] == [0, 1]

    print(f"✓ Flow: {result!r}")


def test_counters_updated():
    """Тест: asked_count та frequency"""
    engine = make_engine()
    run_session(engine, {"q1": "yes", "q2": "no"})
    run_session(engine, {"q1": "yes"})

    assert engine.repository.get_question("q1").asked_count == 2
    assert engine.repository.get_question("q2").asked_count == 1
    assert engine.repository.get_profile("A").frequency == 2

    print("✓ asked_count and frequency updated")


def test_record_answer_errors():
    """Тест помилок record_answer"""
    engine = make_engine()
    session = engine.start_session()

    with pytest.raises(ValueError):
        engine.record_answer(session.session_id, "q1", "maybe")

    with pytest.raises(ValueError):
        engine.record_answer(session.session_id, "q_missing", "yes")

    engine.record_answer(session.session_id, "q1", "yes")
    with pytest.raises(ValueError):
        engine.record_answer(session.session_id, "q1", "no")

    with pytest.raises(KeyError):
        engine.record_answer("missing", "q1", "yes")

    engine.complete_session(session.session_id)
    with pytest.raises(ValueError):
        engine.record_answer(session.session_id, "q2", "yes")

    # Невалідні відповіді не записуються
    assert len(engine.get_session(session.session_id).answers) == 1

    print("✓ record_answer validation")


def test_completed_session():
    """Тест завершеної сесії"""
    engine = make_engine()
    session_id, _ = run_session(engine, {"q1": "yes"})

    step = engine.next_question(session_id)
    assert step.terminated
    assert step.reason == "session_already_completed"

    with pytest.raises(ValueError):
        engine.complete_session(session_id)

    print("✓ Completed session cannot continue")


def test_no_profiles():
    """Тест: без профілів -> profile=None"""
    from guess_right.quiz_engine import QuizEngine
    from guess_right.schemas import Question

    engine = QuizEngine()
    engine.repository.put_question(Question(_id="q1", order=1))

    session = engine.start_session()
    engine.record_answer(session.session_id, "q1", "yes")
    result = engine.complete_session(session.session_id)

    assert result.profile is None
    assert result.confidence == 0.0
    assert engine.get_session(session.session_id).result is None

    print("✓ No profiles -> no match")


def test_feedback_requires_completed():
    """Тест: feedback лише після завершення"""
    engine = make_engine()
    session = engine.start_session()

    with pytest.raises(ValueError):
        engine.submit_feedback(session.session_id, True)

    print("✓ Feedback before completion rejected")


def test_correct_feedback_trains_profile():
    """Тест: 5 підтверджених сесій змінюють очікування профілю"""
    from guess_right.schemas import AnswerValue

    engine = make_engine()

    for _ in range(5):
        # q2 = unsure: A та B рівні за q2, A виграє за порядком
        session_id, result = run_session(engine, {"q1": "yes", "q2": "unsure"})
        assert result.profile.id == "A"
        engine.submit_feedback(session_id, True)

    profile = engine.repository.get_profile("A")

    assert profile.learning["q2"].unsure == 5
    assert profile.expected_answer("q2") == AnswerValue.UNSURE
    assert engine.repository.get_profile("B").learning == {}

    print(f"✓ Learned: q2 -> {profile.expected_answer('q2').value}")


def test_incorrect_feedback_stored_only():
    """Тест: неправильний результат зберігається, але не навчає"""
    engine = make_engine()
    session_id, _ = run_session(engine, {"q1": "yes", "q2": "no"})

    session = engine.submit_feedback(
        session_id, False, suggested_profile="Agency Owner", comments="closer to agency"
    )

    assert session.feedback.is_correct is False
    assert engine.get_session(session_id).feedback.suggested_profile == "Agency Owner"
    assert engine.repository.get_profile("A").learning == {}

    print("✓ Incorrect feedback stored without learning")


def test_cache_disabled():
    """Тест: вимкнений кеш дає той самий вибір"""
    from guess_right.config import get_default_config

    config = get_default_config()
    config.question_engine.cache_potential_matches = False

    cached, plain = make_engine(), make_engine(config)

    for engine in (cached, plain):
        session = engine.start_session()
        engine.record_answer(session.session_id, "q1", "yes")
        assert engine.next_question(session.session_id).question.id == "q2"

    print("✓ Cache on/off -> same question")


def test_from_data_dir():
    """Тест створення движка з data/"""
    from pathlib import Path
    from guess_right.quiz_engine import QuizEngine

    data_dir = Path(__file__).parent.parent / "data"
    if not (data_dir / "profiles.json").exists():
        print(f"⚠ Skipping: {data_dir} not found")
        return

    engine = QuizEngine.from_data_dir(str(data_dir))
    session = engine.start_session()

    step = engine.next_question(session.session_id)
    assert step.question.id == "q_large_company"

    print(f"✓ {engine!r}")


def test_expired_sessions_cleaned_up():
    """Тест: покинуті сесії видаляються разом з кешем та локом"""
    from datetime import datetime, timedelta

    engine = make_engine()
    repo = engine.repository
    store = repo.store

    # 20 сесій, покинутих після першої відповіді
    abandoned = []
    for _ in range(20):
        session = engine.start_session()
        engine.next_question(session.session_id)
        engine.record_answer(session.session_id, "q1", "yes")
        abandoned.append(session.session_id)

    done_id, _ = run_session(engine, {"q1": "yes"})

    assert len(engine._caches) == 20
    assert all(("sessions", sid) in store._key_locks for sid in abandoned)

    stale = datetime.now() - timedelta(minutes=engine.config.storage.session_timeout_minutes + 1)
    for session_id in abandoned + [done_id]:
        session = repo.get_session(session_id)
        session.updated_at = stale
        repo.put_session(session)

    fresh = engine.start_session()

    assert engine._caches == {}
    assert not any(("sessions", sid) in store._key_locks for sid in abandoned)
    assert all(repo.get_session(sid) is None for sid in abandoned)

    # Завершена сесія залишається для аналізу, нова — не чіпається
    assert repo.get_session(done_id).is_completed
    assert repo.get_session(fresh.session_id) is not None

    with pytest.raises(KeyError):
        engine.next_question(abandoned[0])

    print(f"✓ 20 expired sessions removed, {len(repo.list_sessions())} kept")


def test_recent_sessions_not_expired():
    """Тест: сесія в межах timeout не видаляється"""
    engine = make_engine()
    session = engine.start_session()
    engine.record_answer(session.session_id, "q1", "no")

    assert engine.cleanup_expired_sessions() == 0
    assert engine.repository.get_session(session.session_id).updated_at >= session.created_at

    print("✓ Active session within timeout kept")


def demo():
    """Демонстрація сесії"""
    print("=" * 60)
    print("GuessRight — Тест Quiz Engine")
    print("=" * 60)

    engine = make_engine()
    session_id, result = run_session(engine, {"q1": "yes", "q2": "no"})
    print(f"Сесія {session_id}: {result!r}")
    print(engine)

    print("=" * 60)


if __name__ == "__main__":
    demo()
