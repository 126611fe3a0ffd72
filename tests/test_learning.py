"""
Тести для модуля learning

Запуск: pytest tests/test_learning.py -v
Або демо: python tests/test_learning.py
"""

import pytest


def make_repository():
    """Репозиторій з двома профілями"""
    from guess_right.schemas import Profile
    from guess_right.storage import QuizRepository

    repo = QuizRepository()
    repo.put_profile(Profile(_id="A", name="A", answers={"q1": "no", "q2": "unsure"}))
    repo.put_profile(Profile(_id="B", name="B", answers={"q1": "no"}))
    return repo


def test_incorrect_feedback_is_noop():
    """Тест: is_correct=False нічого не змінює"""
    from guess_right.learning import learn

    repo = make_repository()
    before = repo.get_profile("A").model_dump()

    for _ in range(10):
        learn("A", {"q1": "yes"}, False, repo)

    assert repo.get_profile("A").model_dump() == before

    print("✓ Incorrect feedback leaves profile untouched")


def test_five_yes_updates_answer():
    """Тест: 5 x yes -> очікувана відповідь стає yes"""
    from guess_right.learning import learn
    from guess_right.schemas import AnswerValue

    repo = make_repository()

    for i in range(4):
        learn("A", {"q1": "yes"}, True, repo)
        profile = repo.get_profile("A")
        assert profile.expected_answer("q1") == AnswerValue.NO
        assert profile.learning["q1"].total == i + 1

    learn("A", {"q1": "yes"}, True, repo)
    profile = repo.get_profile("A")

    assert profile.learning["q1"].yes == 5
    assert profile.learning["q1"].total == 5
    assert profile.expected_answer("q1") == AnswerValue.YES

    print(f"✓ After 5 x yes: q1 -> {profile.expected_answer('q1').value}")


def test_boundary_agreement_inclusive():
    """Тест: 3 yes + 2 no -> agreement 0.6, відповідь оновлюється"""
    from guess_right.learning import learn
    from guess_right.schemas import AnswerValue

    repo = make_repository()

    for answer in ("yes", "no", "yes", "no", "yes"):
        learn("A", {"q1": answer}, True, repo)

    profile = repo.get_profile("A")
    record = profile.learning["q1"]

    assert (record.yes, record.no, record.total) == (3, 2, 5)
    assert record.agreement() == 0.6
    assert profile.expected_answer("q1") == AnswerValue.YES

    print("✓ agreement == 0.6 updates the answer")


def test_low_agreement_keeps_answer():
    """Тест: 2 yes + 2 no + 1 unsure -> agreement < 0.6"""
    from guess_right.learning import learn
    from guess_right.schemas import AnswerValue

    repo = make_repository()

    for answer in ("yes", "no", "yes", "no", "unsure"):
        learn("A", {"q1": answer}, True, repo)

    profile = repo.get_profile("A")

    assert profile.learning["q1"].total == 5
    assert profile.expected_answer("q1") == AnswerValue.NO

    print("✓ Low agreement keeps the existing answer")


def test_unsure_majority_on_ties():
    """Тест: при нічиїй з unsure перемагає unsure"""
    from guess_right.learning import apply_feedback
    from guess_right.config import LearningConfig
    from guess_right.schemas import AnswerValue, LearningRecord, Profile

    profile = Profile(
        _id="A",
        answers={"q1": "yes"},
        learning={"q1": LearningRecord(yes=3, no=0, unsure=3, total=6)},
    )

    # 4 yes / 4 unsure: agreement 0.5 -> поріг 0.5 дозволяє оновлення
    outcome = apply_feedback(profile, {"q1": "unsure"}, LearningConfig(min_confidence=0.5))
    outcome = apply_feedback(outcome.profile, {"q1": "yes"}, LearningConfig(min_confidence=0.5))

    record = outcome.profile.learning["q1"]
    assert (record.yes, record.unsure) == (4, 4)
    assert outcome.profile.expected_answer("q1") == AnswerValue.UNSURE

    print("✓ Tie resolved towards unsure")


def test_only_matched_profile_changes():
    """Тест: навчання змінює лише підібраний профіль"""
    from guess_right.learning import learn

    repo = make_repository()
    before_b = repo.get_profile("B").model_dump()

    for _ in range(5):
        learn("A", {"q1": "yes", "q2": "no"}, True, repo)

    assert repo.get_profile("B").model_dump() == before_b
    assert repo.get_profile("A").learning["q2"].no == 5

    print("✓ Other profiles untouched")


def test_learning_created_lazily():
    """Тест: лічильники з'являються лише для питань з сесії"""
    from guess_right.learning import learn

    repo = make_repository()
    learn("A", {"q3": "yes"}, True, repo)

    profile = repo.get_profile("A")
    assert set(profile.learning) == {"q3"}
    assert profile.learning["q3"].total == 1
    # Менше 5 зразків -> відповідь не додається
    assert profile.expected_answer("q3") is None

    print("✓ Learning record created on first use")


def test_unknown_profile_is_noop():
    """Тест: невідомий профіль ігнорується"""
    from guess_right.learning import learn

    repo = make_repository()
    learn("missing", {"q1": "yes"}, True, repo)

    assert repo.get_profile("missing") is None

    print("✓ Unknown profile ignored")


def test_invalid_answer_writes_nothing():
    """Тест: невалідна відповідь -> ValueError без змін"""
    from guess_right.learning import learn

    repo = make_repository()
    before = repo.get_profile("A").model_dump()

    with pytest.raises(ValueError):
        learn("A", {"q1": "yes", "q2": "sometimes"}, True, repo)

    assert repo.get_profile("A").model_dump() == before

    print("✓ Invalid answer rejected before any write")


def test_apply_feedback_does_not_mutate_input():
    """Тест: apply_feedback працює з копією"""
    from guess_right.learning import apply_feedback
    from guess_right.schemas import Profile

    profile = Profile(_id="A", answers={"q1": "no"})
    outcome = apply_feedback(profile, {"q1": "yes"})

    assert profile.learning == {}
    assert outcome.profile.learning["q1"].yes == 1
    assert outcome.recorded_questions == ["q1"]
    assert outcome.updated_answers == {}

    print(f"✓ {outcome!r}")


def test_unserialized_feedback_loses_update():
    """Тест: без lock профілю два одночасні навчання втрачають оновлення"""
    from guess_right.learning import learn

    repo = make_repository()

    class StaleReadRepository:
        """Обидва виклики читають той самий знімок, як при перемежуванні read-modify-write"""

        def __init__(self, inner, profile_id):
            self.inner = inner
            self.snapshot = inner.get_profile(profile_id)

        def get_profile(self, profile_id):
            return self.snapshot.model_copy(deep=True)

        def put_profile(self, profile):
            self.inner.put_profile(profile)

    stale = StaleReadRepository(repo, "A")
    learn("A", {"q1": "yes"}, True, stale)
    learn("A", {"q1": "yes"}, True, stale)

    # Два підтвердження, але лічильник побачив лише одне
    record = repo.get_profile("A").learning["q1"]
    assert (record.yes, record.total) == (1, 1)

    print("⚠ Unserialized learn: 2 confirmations -> total=1 (use profile_lock)")


def test_concurrent_feedback_serialized():
    """Тест: паралельний feedback через lock профілю не губить оновлень"""
    import threading
    from guess_right.learning import learn

    repo = make_repository()

    def worker():
        with repo.profile_lock("A"):
            learn("A", {"q1": "yes"}, True, repo)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert repo.get_profile("A").learning["q1"].total == 8

    print("✓ 8 concurrent updates -> total=8")


def demo():
    """Демонстрація онлайн-навчання"""
    from guess_right.learning import learn

    print("=" * 60)
    print("GuessRight — Тест Learning")
    print("=" * 60)

    repo = make_repository()
    for i in range(5):
        learn("A", {"q1": "yes"}, True, repo)
        profile = repo.get_profile("A")
        print(f"  round {i + 1}: q1={profile.expected_answer('q1').value}, {profile.learning['q1']}")

    print("=" * 60)


if __name__ == "__main__":
    demo()
