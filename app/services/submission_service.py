"""
Quiz submission service
Classifies once, then persists the result and the profile update with retries
and a secondary write path
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID
from sqlalchemy import insert, update, delete
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models import QuizResult, QuizSession, UserProfile
from app.models._types import utcnow
from app.services.classifier import classifier, Classification
from app.services.exceptions import ProfileNotFoundError, QuizSessionError, PersistenceError
from app.services.session_service import session_service
from app.utils.cache import cache_service

logger = logging.getLogger(__name__)


@dataclass
class SubmissionOutcome:
    """Result record plus the informational classification details"""
    result: QuizResult
    classification: Classification


class SubmissionService:
    """
    Service for turning final scores into a stored QuizResult

    Write strategy:
    - Primary: ORM unit of work (result insert, profile update, session delete)
    - Retry the primary on transient OperationalError
    - Secondary: explicit Core statements on a fresh connection
    - PersistenceError only when every path failed
    """

    def __init__(self, max_retries: Optional[int] = None):
        self.max_retries = settings.SUBMISSION_MAX_RETRIES if max_retries is None else max_retries

    def submit_session(self, db: Session, session_id: UUID) -> SubmissionOutcome:
        """Submit a completed quiz session"""
        session = session_service.get(db, session_id)
        if not session_service.is_complete(session):
            raise QuizSessionError(
                f"Quiz incomplete: {session.current_question_index} of "
                f"{len(session.answers)} questions answered"
            )

        profile = self._get_profile(db, session.user_id)
        scores = session_service.scores(session)
        time_taken = int((utcnow() - session.started_at).total_seconds())

        return self._submit(db, profile, scores, time_taken, age=profile.age, session_id=session.id)

    def submit_scores(
        self,
        db: Session,
        user_id: UUID,
        scores: Dict[str, int],
        time_taken: Optional[int] = None,
        age: Optional[int] = None
    ) -> SubmissionOutcome:
        """Submit already-tallied scores without a server-side session"""
        profile = self._get_profile(db, user_id)
        return self._submit(db, profile, scores, time_taken, age=age if age is not None else profile.age)

    def _submit(
        self,
        db: Session,
        profile: UserProfile,
        scores: Dict[str, int],
        time_taken: Optional[int],
        age: Optional[int],
        session_id: Optional[UUID] = None
    ) -> SubmissionOutcome:
        if age is None:
            age = settings.DEFAULT_AGE

        # Computed once; retries below reuse this record unchanged
        classification = classifier.evaluate(
            scores["visual"], scores["auditory"], scores["reading_writing"], scores["kinesthetic"]
        )
        record = {
            "id": uuid.uuid4(),
            "user_id": profile.id,
            "visual_score": scores["visual"],
            "auditory_score": scores["auditory"],
            "reading_writing_score": scores["reading_writing"],
            "kinesthetic_score": scores["kinesthetic"],
            "total_score": sum(scores.values()),
            "quiz_level": classifier.quiz_level(age),
            "dominant_style": classification.dominant_style,
            "dominance_percentage": classification.dominance_percentage,
            "time_taken": time_taken,
            "created_at": utcnow(),
        }

        logger.info(
            f"Classified user {profile.id}: {classification.dominant_style} "
            f"with {classification.dominance_percentage:.1f}% lead, level {record['quiz_level']}"
        )

        result = self._persist(db, record, session_id)
        cache_service.invalidate_user(profile.id)

        return SubmissionOutcome(result=result, classification=classification)

    def _persist(self, db: Session, record: Dict[str, Any], session_id: Optional[UUID]) -> QuizResult:
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_retries + 2):
            try:
                return self._write_primary(db, record, session_id)
            except OperationalError as e:
                db.rollback()
                last_error = e
                logger.warning(f"Primary write failed (attempt {attempt}): {str(e)}")

        try:
            self._write_secondary(db, record, session_id)
        except SQLAlchemyError as e:
            logger.error(f"Secondary write failed: {str(e)}")
            raise PersistenceError("Could not store the quiz result, please try again") from (last_error or e)

        logger.info(f"Quiz result {record['id']} stored via secondary write path")
        db.expire_all()
        return db.get(QuizResult, record["id"])

    def _write_primary(self, db: Session, record: Dict[str, Any], session_id: Optional[UUID]) -> QuizResult:
        result = QuizResult(**record)
        db.add(result)

        profile = db.get(UserProfile, record["user_id"])
        profile.learning_style = record["dominant_style"]
        profile.quiz_completed = True

        if session_id is not None:
            session = db.get(QuizSession, session_id)
            if session is not None:
                db.delete(session)

        db.commit()
        db.refresh(result)

        logger.info(f"Quiz result saved: {result.id}, total score {result.total_score}")
        return result

    def _write_secondary(self, db: Session, record: Dict[str, Any], session_id: Optional[UUID]) -> None:
        engine = db.get_bind()
        with engine.begin() as conn:
            conn.execute(insert(QuizResult.__table__).values(**record))
            conn.execute(
                update(UserProfile.__table__)
                .where(UserProfile.__table__.c.id == record["user_id"])
                .values(learning_style=record["dominant_style"], quiz_completed=True, updated_at=utcnow())
            )
            if session_id is not None:
                conn.execute(delete(QuizSession.__table__).where(QuizSession.__table__.c.id == session_id))

    def _get_profile(self, db: Session, user_id: UUID) -> UserProfile:
        profile = db.query(UserProfile).filter(UserProfile.id == user_id).first()
        if not profile:
            raise ProfileNotFoundError(f"Profile {user_id} not found")
        return profile


# Global instance
submission_service = SubmissionService()
