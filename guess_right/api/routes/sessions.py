"""
GuessRight — Sessions Routes

Endpoints для сесій анкетування:
- Створення сесії
- Отримання стану
- Відповідь на питання
- Наступне питання
- Завершення та результат
- Зворотний зв'язок
"""

from fastapi import APIRouter, Depends, HTTPException

from guess_right.quiz_engine import QuizEngine
from guess_right.schemas import MatchResult, Session

from ..dependencies import get_engine
from ..models import (
    AlternativeInfo,
    AnswerInfo,
    AnswerRequest,
    CompleteRequest,
    CreateSessionResponse,
    FeedbackRequest,
    MatchResponse,
    NextQuestionResponse,
    SessionResponse,
    SuccessResponse,
)
from .profiles import profile_to_summary, question_to_info

router = APIRouter(tags=["Sessions"])


def _session_or_404(engine: QuizEngine, session_id: str) -> Session:
    session = engine.repository.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )
    return session


def session_to_response(session: Session, engine: QuizEngine) -> SessionResponse:
    """Конвертувати сесію в Pydantic модель"""
    profile = None
    if session.is_completed and session.result:
        matched = engine.repository.get_profile(session.result)
        if matched is not None:
            profile = profile_to_summary(matched)

    return SessionResponse(
        session_id=session.session_id,
        status=session.status,
        answers=[
            AnswerInfo(
                question_id=a.question_id,
                answer=a.answer,
                sequence_num=a.sequence_num,
            )
            for a in session.answers
        ],
        result=session.result,
        confidence=session.confidence,
        profile=profile,
        created_at=session.created_at,
        completed_at=session.completed_at,
    )


def match_to_response(result: MatchResult) -> MatchResponse:
    return MatchResponse(
        profile=profile_to_summary(result.profile) if result.profile else None,
        confidence=result.confidence,
        confidence_percent=result.confidence_percent,
        alternatives=[
            AlternativeInfo(profile=profile_to_summary(alt.profile), score=alt.score)
            for alt in result.alternatives
        ],
    )


@router.post("/sessions", response_model=CreateSessionResponse)
async def create_session(
    engine: QuizEngine = Depends(get_engine)
) -> CreateSessionResponse:
    """Створити нову сесію анкетування"""
    session = engine.start_session()
    return CreateSessionResponse(session_id=session.session_id)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    engine: QuizEngine = Depends(get_engine)
) -> SessionResponse:
    """
    Отримати поточний стан сесії.

    Якщо сесію завершено — разом з підібраним профілем.
    """
    session = _session_or_404(engine, session_id)
    return session_to_response(session, engine)


@router.post("/answers", response_model=SuccessResponse)
async def record_answer(
    request: AnswerRequest,
    engine: QuizEngine = Depends(get_engine)
) -> SuccessResponse:
    """
    Записати відповідь на питання.

    - **answer**: yes / no / unsure

    Приклад:
    ```json
    {
        "session_id": "4f9c...",
        "question_id": "q_large_company",
        "answer": "yes",
        "sequence_num": 0
    }
    ```
    """
    _session_or_404(engine, request.session_id)

    try:
        engine.record_answer(
            request.session_id,
            request.question_id,
            request.answer,
            request.sequence_num,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SuccessResponse()


@router.get("/questions/next", response_model=NextQuestionResponse)
async def next_question(
    session_id: str,
    engine: QuizEngine = Depends(get_engine)
) -> NextQuestionResponse:
    """
    Наступне питання.

    terminated=true якщо питань не залишилось або сесію завершено.
    """
    _session_or_404(engine, session_id)

    try:
        step = engine.next_question(session_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))

    if step.terminated:
        return NextQuestionResponse(terminated=True, reason=step.reason)

    return NextQuestionResponse(
        terminated=False,
        question=question_to_info(step.question),
        question_count=step.question_count,
    )


@router.post("/complete", response_model=MatchResponse)
async def complete_session(
    request: CompleteRequest,
    engine: QuizEngine = Depends(get_engine)
) -> MatchResponse:
    """Завершити сесію та отримати підібраний профіль"""
    _session_or_404(engine, request.session_id)

    try:
        result = engine.complete_session(request.session_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return match_to_response(result)


@router.post("/feedback", response_model=SuccessResponse)
async def submit_feedback(
    request: FeedbackRequest,
    engine: QuizEngine = Depends(get_engine)
) -> SuccessResponse:
    """
    Підтвердити або спростувати результат.

    При is_correct=true відповіді сесії навчають підібраний профіль.

    Приклад:
    ```json
    {
        "session_id": "4f9c...",
        "is_correct": false,
        "suggested_profile": "Agency Owner",
        "comments": "Closer to a marketing agency"
    }
    ```
    """
    _session_or_404(engine, request.session_id)

    try:
        engine.submit_feedback(
            request.session_id,
            request.is_correct,
            suggested_profile=request.suggested_profile,
            comments=request.comments or "",
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SuccessResponse()
