"""
Тести для модуля storage

Запуск: pytest tests/test_storage.py -v
Або демо: python tests/test_storage.py
"""

import json
from pathlib import Path

import pytest


DATA_DIR = Path(__file__).parent.parent / "data"


def test_memory_store_basic():
    """Тест get / put / delete / list"""
    from guess_right.storage import InMemoryStore

    store = InMemoryStore()
    store.put("profiles", "p1", {"_id": "p1", "frequency": 0})
    store.put("profiles", "p2", {"_id": "p2", "frequency": 0})

    assert store.get("profiles", "p1") == {"_id": "p1", "frequency": 0}
    assert store.get("profiles", "missing") is None
    assert [d["_id"] for d in store.list("profiles")] == ["p1", "p2"]
    assert store.count("profiles") == 2
    assert store.count("sessions") == 0

    assert store.delete("profiles", "p1")
    assert not store.delete("profiles", "p1")
    assert store.count("profiles") == 1

    print(f"✓ {store!r}")


def test_memory_store_copies_documents():
    """Тест: документи копіюються при читанні та записі"""
    from guess_right.storage import InMemoryStore

    store = InMemoryStore()
    document = {"_id": "p1", "answers": {"q1": "yes"}}
    store.put("profiles", "p1", document)

    document["answers"]["q1"] = "no"
    assert store.get("profiles", "p1")["answers"]["q1"] == "yes"

    loaded = store.get("profiles", "p1")
    loaded["answers"]["q1"] = "unsure"
    assert store.get("profiles", "p1")["answers"]["q1"] == "yes"

    print("✓ Callers never share state with the store")


def test_memory_store_increment():
    """Тест атомарного increment"""
    import threading
    from guess_right.storage import InMemoryStore

    store = InMemoryStore()
    store.put("questions", "q1", {"_id": "q1"})

    assert store.increment("questions", "q1", "asked_count") == 1
    assert store.increment("questions", "q1", "asked_count", 2) == 3

    threads = [
        threading.Thread(target=store.increment, args=("questions", "q1", "asked_count"))
        for _ in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get("questions", "q1")["asked_count"] == 23

    with pytest.raises(KeyError):
        store.increment("questions", "missing", "asked_count")

    print("✓ Increment: 23 after 20 concurrent updates")


def test_memory_store_delete_drops_lock():
    """Тест: видалення документа прибирає і його лок"""
    from guess_right.storage import InMemoryStore

    store = InMemoryStore()
    store.put("sessions", "s1", {"session_id": "s1"})

    with store.lock("sessions", "s1"):
        pass
    assert ("sessions", "s1") in store._key_locks

    assert store.delete("sessions", "s1") is True
    assert ("sessions", "s1") not in store._key_locks
    assert store.delete("sessions", "s1") is False

    print("✓ delete() drops the document lock")


def test_repository_delete_session():
    """Тест видалення сесії через репозиторій"""
    from guess_right.storage import QuizRepository

    repo = QuizRepository()
    session = repo.create_session()

    assert session.updated_at == session.created_at
    assert repo.delete_session(session.session_id) is True
    assert repo.get_session(session.session_id) is None

    print("✓ Session deleted")


def test_repository_profiles():
    """Тест профілів у репозиторії"""
    from guess_right.schemas import AnswerValue, Profile
    from guess_right.storage import QuizRepository, PROFILES

    repo = QuizRepository()
    repo.put_profile(Profile(_id="p1", name="P1", answers={"q1": "yes"}))

    # Документ зберігається з ключем _id
    assert repo.store.get(PROFILES, "p1")["_id"] == "p1"

    profile = repo.get_profile("p1")
    assert profile.expected_answer("q1") == AnswerValue.YES
    assert repo.get_profile("missing") is None

    assert repo.increment_profile_frequency("p1") == 1
    assert repo.get_profile("p1").frequency == 1
    assert [p.id for p in repo.list_profiles()] == ["p1"]

    print(f"✓ {repo!r}")


def test_repository_questions_sorted():
    """Тест: питання повертаються за order"""
    from guess_right.schemas import Question
    from guess_right.storage import QuizRepository

    repo = QuizRepository()
    repo.put_question(Question(_id="q3", order=3))
    repo.put_question(Question(_id="q1", order=1))
    repo.put_question(Question(_id="q2", order=2))

    assert [q.id for q in repo.list_questions()] == ["q1", "q2", "q3"]
    assert repo.increment_question_asked_count("q2") == 1
    assert repo.get_question("q2").asked_count == 1

    print("✓ Questions sorted by order")


def test_repository_sessions():
    """Тест сесій у репозиторії"""
    from guess_right.schemas import SessionAnswer
    from guess_right.storage import QuizRepository

    repo = QuizRepository()
    session = repo.create_session()
    other = repo.create_session()

    assert session.session_id != other.session_id
    assert repo.get_session(session.session_id).answers == []

    session.answers.append(SessionAnswer(question_id="q1", answer="yes"))
    repo.put_session(session)

    loaded = repo.get_session(session.session_id)
    assert loaded.asked_question_ids() == ["q1"]
    assert len(repo.list_sessions()) == 2

    print(f"✓ Sessions: {len(repo.list_sessions())}")


def test_seed_repository(tmp_path):
    """Тест завантаження початкових даних"""
    from guess_right.storage import QuizRepository, seed_repository

    profiles_path = tmp_path / "profiles.json"
    questions_path = tmp_path / "questions.json"

    profiles_path.write_text(json.dumps([
        {"_id": "p1", "name": "P1", "answers": {"q1": "yes"}, "frequency": 7,
         "learning": {"q1": {"yes": 1, "no": 0, "unsure": 0, "total": 1}}},
    ]), encoding="utf-8")
    questions_path.write_text(json.dumps([
        {"_id": "q1", "text": "Q1", "order": 1, "asked_count": 9},
    ]), encoding="utf-8")

    repo = QuizRepository()
    counts = seed_repository(repo, str(profiles_path), str(questions_path))

    assert counts == (1, 1)

    profile = repo.get_profile("p1")
    assert profile.learning == {}
    assert profile.frequency == 0
    assert profile.created_at is not None

    assert repo.get_question("q1").asked_count == 0

    print("✓ Seed resets learning / frequency / asked_count")


def test_seed_missing_file(tmp_path):
    """Тест: відсутній файл -> нічого не завантажено"""
    from guess_right.storage import load_seed_file

    assert load_seed_file(str(tmp_path / "nope.json")) == []

    bad = tmp_path / "bad.json"
    bad.write_text('{"_id": "p1"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_file(str(bad))

    print("✓ Missing file -> [], non-list JSON rejected")


def test_seed_bundled_data():
    """Тест вбудованих data/*.json"""
    from guess_right.storage import QuizRepository, seed_from_config

    if not (DATA_DIR / "profiles.json").exists():
        print(f"⚠ Skipping: {DATA_DIR} not found")
        return

    repo = QuizRepository()
    n_profiles, n_questions = seed_from_config(repo, data_dir=str(DATA_DIR))

    assert n_profiles > 0
    assert n_questions == 10
    assert repo.list_questions()[0].id == "q_large_company"

    print(f"✓ Bundled data: {n_profiles} profiles, {n_questions} questions")


def demo():
    """Демонстрація сховища"""
    from guess_right.storage import QuizRepository, seed_from_config

    print("=" * 60)
    print("GuessRight — Тест Storage")
    print("=" * 60)

    repo = QuizRepository()
    seed_from_config(repo, data_dir=str(DATA_DIR))
    print(repo)

    for question in repo.list_questions():
        print(f"  [{question.order}] {question.id}: {question.text}")

    print("=" * 60)


if __name__ == "__main__":
    demo()
