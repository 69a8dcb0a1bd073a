"""
Learning style assessment API endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from uuid import UUID
from app.database import get_db
from app.models import QuizSession
from app.schemas.assessment import (
    SessionStart,
    SessionResponse,
    AnswerSubmission,
    AnswerResponse,
    ScoreSubmission,
    SubmissionResponse,
    QuizResultResponse,
)
from app.services import question_bank
from app.services.session_service import session_service
from app.services.submission_service import submission_service, SubmissionOutcome


router = APIRouter(prefix="/api/assessment", tags=["assessment"])


def _session_response(session: QuizSession, resumed: bool = False) -> SessionResponse:
    return SessionResponse(
        session_id=session.id,
        user_id=session.user_id,
        current_question_index=session.current_question_index,
        total_questions=question_bank.TOTAL_QUESTIONS,
        scores=session_service.scores(session),
        is_complete=session_service.is_complete(session),
        next_question=session_service.next_question(session),
        started_at=session.started_at,
        resumed=resumed,
    )


def _submission_response(outcome: SubmissionOutcome) -> SubmissionResponse:
    result = outcome.result
    return SubmissionResponse(
        learning_style=result.dominant_style,
        quiz_level=result.quiz_level,
        total_score=result.total_score,
        dominance_percentage=outcome.classification.dominance_percentage,
        quiz_result=QuizResultResponse.model_validate(result),
    )


@router.get("/questions", response_model=List[Dict[str, Any]])
async def get_questions():
    """All 40 assessment questions, without their answers"""
    return [question_bank.public_view(q) for q in question_bank.QUESTIONS]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def start_session(request: SessionStart, db: Session = Depends(get_db)):
    """
    Start the assessment for a user

    Returns the user's open session instead when one exists, so an
    interrupted quiz resumes where it stopped.
    """
    session, resumed = session_service.start(db, request.user_id)
    return _session_response(session, resumed=resumed)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: UUID, db: Session = Depends(get_db)):
    return _session_response(session_service.get(db, session_id))


@router.post("/sessions/{session_id}/answers", response_model=AnswerResponse)
async def answer_question(
    session_id: UUID, submission: AnswerSubmission, db: Session = Depends(get_db)
):
    """
    Answer the current question

    - Multiple choice: option index or letter A-D
    - Matching: list of {left_id, right_id}; full credit only if all pairs are right
    """
    answer = submission.answer
    if isinstance(answer, list):
        answer = [match.model_dump() for match in answer]

    session, is_correct = session_service.answer(db, session_id, submission.question_id, answer)

    return AnswerResponse(
        question_id=submission.question_id,
        is_correct=is_correct,
        session=_session_response(session),
    )


@router.post("/sessions/{session_id}/submit", response_model=SubmissionResponse)
async def submit_session(session_id: UUID, db: Session = Depends(get_db)):
    """
    Submit a completed session

    Classifies the learning style, stores the quiz result, updates the
    profile and closes the session. Responds 503 only when every write
    path failed.
    """
    return _submission_response(submission_service.submit_session(db, session_id))


@router.delete("/sessions/{session_id}", status_code=204)
async def abandon_session(session_id: UUID, db: Session = Depends(get_db)):
    """Abandon the session; no result is recorded"""
    session_service.abandon(db, session_id)


@router.post("/process", response_model=SubmissionResponse)
async def process_scores(submission: ScoreSubmission, db: Session = Depends(get_db)):
    """Classify and store scores tallied by the client"""
    scores = {
        "visual": submission.visual_score,
        "auditory": submission.auditory_score,
        "reading_writing": submission.reading_writing_score,
        "kinesthetic": submission.kinesthetic_score,
    }

    outcome = submission_service.submit_scores(
        db, submission.user_id, scores, time_taken=submission.time_taken, age=submission.age
    )
    return _submission_response(outcome)
