"""
UserProfile model - account profile owned by the profile subsystem
"""
from sqlalchemy import Column, String, Integer, Boolean, TIMESTAMP, Uuid
from app.database import Base
from app.models._types import utcnow
import uuid


class UserProfile(Base):
    """
    User profiles table - age drives the quiz level, learning_style is
    overwritten by every submitted assessment
    """
    __tablename__ = "user_profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    age = Column(Integer)
    learning_style = Column(String(20))  # visual | auditory | reading_writing | kinesthetic
    quiz_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<UserProfile(id={self.id}, learning_style={self.learning_style})>"
