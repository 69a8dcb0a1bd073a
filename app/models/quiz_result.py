"""
QuizResult model - the permanent record of a completed assessment
"""
from sqlalchemy import Column, Integer, String, Float, TIMESTAMP, ForeignKey, Uuid
from app.database import Base
from app.models._types import utcnow
import uuid


class QuizResult(Base):
    """
    Quiz results table - written exactly once per submission, never updated
    """
    __tablename__ = "quiz_results"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("user_profiles.id"), nullable=False, index=True)
    visual_score = Column(Integer, nullable=False)
    auditory_score = Column(Integer, nullable=False)
    reading_writing_score = Column(Integer, nullable=False)
    kinesthetic_score = Column(Integer, nullable=False)
    total_score = Column(Integer, nullable=False)
    quiz_level = Column(String(20), nullable=False)  # beginner | intermediate | advanced
    dominant_style = Column(String(20), nullable=False)
    dominance_percentage = Column(Float, default=0.0)
    time_taken = Column(Integer)  # seconds
    created_at = Column(TIMESTAMP, default=utcnow, index=True)

    def __repr__(self):
        return f"<QuizResult(user_id={self.user_id}, style={self.dominant_style}, total={self.total_score})>"
