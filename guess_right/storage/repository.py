"""
GuessRight — Репозиторій профілів, питань та сесій

Типізований доступ до DocumentStore. Документи зберігаються як
JSON-сумісні словники (як у документній базі), назовні віддаються
pydantic моделі.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from guess_right.schemas import Profile, Question, Session

from .base import DocumentStore
from .memory import InMemoryStore


PROFILES = "profiles"
QUESTIONS = "questions"
SESSIONS = "sessions"


class QuizRepository:
    """
    Доступ до колекцій profiles / questions / sessions.

    Приклад:
        repo = QuizRepository()
        repo.put_profile(Profile(_id="p1", answers={"q1": "yes"}))
        profile = repo.get_profile("p1")
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or InMemoryStore()

    # =========================================================================
    # PROFILES
    # =========================================================================

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        document = self.store.get(PROFILES, profile_id)
        return Profile.model_validate(document) if document is not None else None

    def put_profile(self, profile: Profile) -> None:
        self.store.put(PROFILES, profile.id, profile.model_dump(mode="json", by_alias=True))

    def list_profiles(self) -> List[Profile]:
        return [Profile.model_validate(d) for d in self.store.list(PROFILES)]

    def increment_profile_frequency(self, profile_id: str) -> int:
        with self.store.lock(PROFILES, profile_id):
            return self.store.increment(PROFILES, profile_id, "frequency")

    def profile_lock(self, profile_id: str):
        """Лок для read-modify-write одного профілю (навчання)"""
        return self.store.lock(PROFILES, profile_id)

    # =========================================================================
    # QUESTIONS
    # =========================================================================

    def get_question(self, question_id: str) -> Optional[Question]:
        document = self.store.get(QUESTIONS, question_id)
        return Question.model_validate(document) if document is not None else None

    def put_question(self, question: Question) -> None:
        self.store.put(QUESTIONS, question.id, question.model_dump(mode="json", by_alias=True))

    def list_questions(self) -> List[Question]:
        """Всі питання, відсортовані за order (стабільно)"""
        questions = [Question.model_validate(d) for d in self.store.list(QUESTIONS)]
        return sorted(questions, key=lambda q: q.order)

    def increment_question_asked_count(self, question_id: str) -> int:
        return self.store.increment(QUESTIONS, question_id, "asked_count")

    # =========================================================================
    # SESSIONS
    # =========================================================================

    def create_session(self) -> Session:
        now = datetime.now()
        session = Session(session_id=uuid.uuid4().hex, created_at=now, updated_at=now)
        self.put_session(session)
        return session

    def get_session(self, session_id: str) -> Optional[Session]:
        document = self.store.get(SESSIONS, session_id)
        return Session.model_validate(document) if document is not None else None

    def put_session(self, session: Session) -> None:
        self.store.put(SESSIONS, session.session_id, session.model_dump(mode="json"))

    def list_sessions(self) -> List[Session]:
        return [Session.model_validate(d) for d in self.store.list(SESSIONS)]

    def delete_session(self, session_id: str) -> bool:
        return self.store.delete(SESSIONS, session_id)

    def session_lock(self, session_id: str):
        """Лок для послідовного запису відповідей однієї сесії"""
        return self.store.lock(SESSIONS, session_id)

    def __repr__(self) -> str:
        return (
            f"QuizRepository(profiles={self.store.count(PROFILES)}, "
            f"questions={self.store.count(QUESTIONS)}, "
            f"sessions={self.store.count(SESSIONS)})"
        )
