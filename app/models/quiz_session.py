"""
QuizSession model - resumable in-progress assessment state
"""
from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, Uuid
from app.database import Base
from app.models._types import JSONType, utcnow
import uuid


class QuizSession(Base):
    """
    Quiz sessions table - one open session per user, deleted on submit or abandon
    """
    __tablename__ = "quiz_sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("user_profiles.id"), nullable=False, unique=True, index=True)
    current_question_index = Column(Integer, default=0, nullable=False)
    answers = Column(JSONType, nullable=False)  # -1 | option index | [{"left_id", "right_id"}]
    visual_score = Column(Integer, default=0, nullable=False)
    auditory_score = Column(Integer, default=0, nullable=False)
    reading_writing_score = Column(Integer, default=0, nullable=False)
    kinesthetic_score = Column(Integer, default=0, nullable=False)
    started_at = Column(TIMESTAMP, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<QuizSession(id={self.id}, user_id={self.user_id}, index={self.current_question_index})>"
