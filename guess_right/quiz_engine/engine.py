"""
GuessRight — Движок анкетування

Керує сесією від першого питання до навчання на зворотному зв'язку:

    start_session -> (next_question -> record_answer)* -> complete_session
                  -> submit_feedback -> learn

Ядро (matching, question_engine, learning) залишається чистим;
сховище та послідовність викликів — відповідальність цього класу.
"""

import threading
from datetime import datetime, timedelta
from typing import Dict, Optional, Union
from dataclasses import dataclass

from guess_right.config import GuessRightConfig, get_default_config
from guess_right.learning import learn
from guess_right.matching import score_profiles, resolve_match
from guess_right.question_engine import PotentialMatchCache, select_next_question
from guess_right.schemas import (
    AnswerValue,
    MatchResult,
    Question,
    Session,
    SessionAnswer,
    SessionFeedback,
    SessionStatus,
)
from guess_right.storage import QuizRepository, seed_from_config


@dataclass
class NextQuestion:
    """Наступне питання або сигнал завершення"""
    terminated: bool
    question: Optional[Question] = None
    question_count: int = 0
    reason: Optional[str] = None   # session_already_completed / no_more_questions

    def __repr__(self) -> str:
        if self.terminated:
            return f"NextQuestion(terminated, reason='{self.reason}')"
        return f"NextQuestion('{self.question.id}', #{self.question_count})"


class QuizEngine:
    """
    Движок анкетування.

    Приклад використання:
        engine = QuizEngine.from_data_dir("data")

        session = engine.start_session()

        while True:
            step = engine.next_question(session.session_id)
            if step.terminated:
                break
            answer = input(f"{step.question.text} (yes/no/unsure): ")
            engine.record_answer(session.session_id, step.question.id, answer)

        result = engine.complete_session(session.session_id)
        print(f"{result.profile.name}: {result.confidence_percent}%")

        engine.submit_feedback(session.session_id, is_correct=True)
    """

    def __init__(
        self,
        repository: Optional[QuizRepository] = None,
        config: Optional[GuessRightConfig] = None
    ):
        """
        Args:
            repository: Сховище профілів/питань/сесій
            config: Конфігурація (None = за замовчуванням)
        """
        self.repository = repository or QuizRepository()
        self.config = config or get_default_config()

        # Кеш potential matches для кожної сесії
        self._caches: Dict[str, PotentialMatchCache] = {}
        self._cleanup_lock = threading.Lock()

    @classmethod
    def from_data_dir(
        cls,
        data_dir: Optional[str] = None,
        config: Optional[GuessRightConfig] = None
    ) -> "QuizEngine":
        """Створити движок і заповнити сховище з data/*.json"""
        engine = cls(config=config)
        seed_from_config(engine.repository, engine.config.storage, data_dir)
        return engine

    # =========================================================================
    # SESSION FLOW
    # =========================================================================

    def start_session(self) -> Session:
        """Почати нову сесію (попередньо прибравши прострочені)"""
        self.cleanup_expired_sessions()
        return self.repository.create_session()

    def cleanup_expired_sessions(self) -> int:
        """
        Видалити активні сесії, які не змінювались довше за timeout.

        Завершені сесії залишаються для аналізу зворотного зв'язку.

        Returns:
            Кількість видалених сесій
        """
        timeout = timedelta(minutes=self.config.storage.session_timeout_minutes)
        now = datetime.now()
        removed = 0

        with self._cleanup_lock:
            for session in self.repository.list_sessions():
                if session.is_completed or now - session.updated_at <= timeout:
                    continue

                with self.repository.session_lock(session.session_id):
                    current = self.repository.get_session(session.session_id)
                    # Відповідь могла надійти після list_sessions
                    if current is None or current.is_completed or now - current.updated_at <= timeout:
                        continue
                    self.repository.delete_session(session.session_id)

                self._caches.pop(session.session_id, None)
                removed += 1

        if removed:
            print(f"🧹 Removed {removed} expired sessions")

        return removed

    def get_session(self, session_id: str) -> Session:
        """
        Raises:
            KeyError: сесію не знайдено
        """
        session = self.repository.get_session(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found")
        return session

    def record_answer(
        self,
        session_id: str,
        question_id: str,
        answer: Union[AnswerValue, str],
        sequence_num: Optional[int] = None
    ) -> Session:
        """
        Записати відповідь користувача.

        Raises:
            KeyError: сесію не знайдено
            ValueError: невалідна відповідь, невідоме питання,
                сесію завершено або питання вже мало відповідь
        """
        answer = AnswerValue.parse(answer)

        if self.repository.get_question(question_id) is None:
            raise ValueError(f"Unknown question: {question_id}")

        with self.repository.session_lock(session_id):
            session = self.get_session(session_id)

            if session.is_completed:
                raise ValueError("Session already completed")

            if question_id in session.asked_question_ids():
                raise ValueError(f"Question {question_id} already answered")

            session.answers.append(SessionAnswer(
                question_id=question_id,
                answer=answer,
                sequence_num=sequence_num if sequence_num is not None else len(session.answers),
            ))
            session.updated_at = datetime.now()
            self.repository.put_session(session)

        self.repository.increment_question_asked_count(question_id)
        return session

    def next_question(self, session_id: str) -> NextQuestion:
        """
        Обрати наступне питання.

        Завершення визначається тут: питань не залишилось або сесію закрито.
        """
        session = self.get_session(session_id)

        if session.is_completed:
            return NextQuestion(terminated=True, reason="session_already_completed")

        asked = set(session.asked_question_ids())
        available = [q for q in self.repository.list_questions() if q.id not in asked]

        if not available:
            return NextQuestion(terminated=True, reason="no_more_questions")

        cache = None
        if self.config.question_engine.cache_potential_matches:
            cache = self._caches.setdefault(session_id, PotentialMatchCache())

        question = select_next_question(
            available,
            session.answer_map(),
            self.repository.list_profiles(),
            config=self.config.question_engine,
            cache=cache,
        )

        return NextQuestion(
            terminated=False,
            question=question,
            question_count=len(session.answers) + 1,
        )

    def complete_session(self, session_id: str) -> MatchResult:
        """
        Завершити сесію та підібрати профіль.

        Raises:
            KeyError: сесію не знайдено
            ValueError: сесію вже завершено
        """
        with self.repository.session_lock(session_id):
            session = self.get_session(session_id)

            if session.is_completed:
                raise ValueError("Session already completed")

            profiles = self.repository.list_profiles()
            answers = session.answer_map()

            scores = score_profiles(answers, profiles, self.config.matching)
            result = resolve_match(
                scores, profiles, len(session.answers), self.config.matching
            )

            session.status = SessionStatus.COMPLETED
            session.result = result.profile_id
            session.confidence = result.confidence
            session.completed_at = datetime.now()
            session.updated_at = session.completed_at
            self.repository.put_session(session)

        self._caches.pop(session_id, None)

        if result.profile is not None:
            self.repository.increment_profile_frequency(result.profile.id)

        return result

    def submit_feedback(
        self,
        session_id: str,
        is_correct: bool,
        suggested_profile: Optional[str] = None,
        comments: str = ""
    ) -> Session:
        """
        Зберегти зворотний зв'язок і, якщо результат правильний, навчити профіль.

        Raises:
            KeyError: сесію не знайдено
            ValueError: сесію ще не завершено
        """
        with self.repository.session_lock(session_id):
            session = self.get_session(session_id)

            if not session.is_completed:
                raise ValueError("Session is not completed yet")

            session.feedback = SessionFeedback(
                is_correct=is_correct,
                suggested_profile=suggested_profile,
                comments=comments or "",
            )
            self.repository.put_session(session)

        if is_correct and session.result:
            # Один профіль — одне навчання за раз
            with self.repository.profile_lock(session.result):
                learn(
                    session.result,
                    session.answer_map(),
                    True,
                    self.repository,
                    self.config.learning,
                )

        return session

    def __repr__(self) -> str:
        return f"QuizEngine({self.repository!r})"
