"""
Quiz session service
Drives the in_progress state of an assessment: start/resume, answer, abandon
"""
import logging
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import QuizSession, UserProfile
from app.services import question_bank
from app.services.classifier import STYLE_PRIORITY
from app.services.exceptions import ProfileNotFoundError, SessionNotFoundError, QuizSessionError

logger = logging.getLogger(__name__)

UNANSWERED = -1


class QuizSessionService:
    """
    Service for the per-user assessment session

    Scoring:
    - Multiple choice: exact match on the option index
    - Matching: all-or-nothing, every left item paired with its own right item
    - A correct answer adds exactly one point to the question's modality
    """

    def start(self, db: Session, user_id: UUID) -> Tuple[QuizSession, bool]:
        """
        Start a session for the user, or resume the open one

        Returns:
            Tuple of (session, resumed)
        """
        profile = db.query(UserProfile).filter(UserProfile.id == user_id).first()
        if not profile:
            raise ProfileNotFoundError(f"Profile {user_id} not found")

        existing = self._open_session(db, user_id)
        if existing:
            logger.info(f"Resuming quiz session {existing.id} at question {existing.current_question_index}")
            return existing, True

        session = QuizSession(
            user_id=user_id,
            current_question_index=0,
            answers=[UNANSWERED] * question_bank.TOTAL_QUESTIONS,
        )
        db.add(session)
        try:
            db.commit()
        except IntegrityError:
            # A concurrent start already opened the user's session
            db.rollback()
            existing = self._open_session(db, user_id)
            if not existing:
                raise
            logger.info(f"Concurrent start for user {user_id}, resuming quiz session {existing.id}")
            return existing, True
        db.refresh(session)

        logger.info(f"Quiz session started: {session.id} for user {user_id}")
        return session, False

    def _open_session(self, db: Session, user_id: UUID) -> Optional[QuizSession]:
        return db.query(QuizSession).filter(QuizSession.user_id == user_id).first()

    def get(self, db: Session, session_id: UUID) -> QuizSession:
        session = db.query(QuizSession).filter(QuizSession.id == session_id).first()
        if not session:
            raise SessionNotFoundError(f"Quiz session {session_id} not found")
        return session

    def answer(self, db: Session, session_id: UUID, question_id: int, answer: Any) -> Tuple[QuizSession, bool]:
        """
        Commit the answer for the current question and advance

        Returns:
            Tuple of (session, is_correct)
        """
        session = self.get(db, session_id)

        if self.is_complete(session):
            raise QuizSessionError("All questions have been answered; submit the quiz")

        question = question_bank.question_at(session.current_question_index)
        if question_id != question["id"]:
            raise QuizSessionError(
                f"Expected an answer to question {question['id']}, got question {question_id}"
            )

        if question["type"] == question_bank.MULTIPLE_CHOICE:
            stored, is_correct = self._grade_multiple_choice(question, answer)
        else:
            stored, is_correct = self._grade_matching(question, answer)

        # Reassign rather than mutate so the JSON column is flagged dirty
        answers = list(session.answers)
        answers[session.current_question_index] = stored
        session.answers = answers

        if is_correct:
            counter = self.score_attribute(question["style"])
            setattr(session, counter, getattr(session, counter) + 1)

        session.current_question_index += 1
        db.commit()
        db.refresh(session)

        logger.debug(
            f"Session {session.id}: question {question_id} answered, correct={is_correct}, "
            f"next index {session.current_question_index}"
        )
        return session, is_correct

    def abandon(self, db: Session, session_id: UUID) -> None:
        """Discard the session; nothing is recorded for the attempt"""
        session = self.get(db, session_id)
        db.delete(session)
        db.commit()
        logger.info(f"Quiz session abandoned: {session_id}")

    def is_complete(self, session: QuizSession) -> bool:
        return session.current_question_index >= question_bank.TOTAL_QUESTIONS

    def next_question(self, session: QuizSession) -> Optional[Dict[str, Any]]:
        if self.is_complete(session):
            return None
        return question_bank.public_view(question_bank.question_at(session.current_question_index))

    def scores(self, session: QuizSession) -> Dict[str, int]:
        return {style: getattr(session, self.score_attribute(style)) for style in STYLE_PRIORITY}

    @staticmethod
    def score_attribute(style: str) -> str:
        return f"{style}_score"

    def _grade_multiple_choice(self, question: Dict[str, Any], answer: Any) -> Tuple[int, bool]:
        # Letters A-D are accepted as option indexes
        if isinstance(answer, str) and len(answer) == 1 and answer.upper() in "ABCD":
            answer = ord(answer.upper()) - ord("A")

        if isinstance(answer, bool) or not isinstance(answer, int):
            raise QuizSessionError(f"Question {question['id']} expects an option index")
        if not 0 <= answer < len(question["options"]):
            raise QuizSessionError(
                f"Option {answer} is out of range for question {question['id']}"
            )

        return answer, answer == question["correct"]

    def _grade_matching(self, question: Dict[str, Any], answer: Any) -> Tuple[List[Dict[str, str]], bool]:
        if not isinstance(answer, list):
            raise QuizSessionError(f"Question {question['id']} expects a list of matches")

        pair_ids = {pair["id"] for pair in question["pairs"]}
        matches: Dict[str, str] = {}

        for match in answer:
            try:
                left_id = match["left_id"]
                right_id = match["right_id"]
            except (KeyError, TypeError):
                raise QuizSessionError("Each match needs a left_id and a right_id")

            if left_id not in pair_ids or right_id not in pair_ids:
                raise QuizSessionError(f"Unknown item in match {left_id} -> {right_id}")
            if left_id in matches:
                raise QuizSessionError(f"Item {left_id} is matched more than once")
            matches[left_id] = right_id

        # Full credit only when every pair is present and correct
        is_correct = len(matches) == len(pair_ids) and all(
            left_id == right_id for left_id, right_id in matches.items()
        )

        stored = [{"left_id": left_id, "right_id": right_id} for left_id, right_id in matches.items()]
        return stored, is_correct


# Global instance
session_service = QuizSessionService()
