"""
StudyMaterial model - user study notes feeding the recommendation engine
"""
from sqlalchemy import Column, String, Text, TIMESTAMP, ForeignKey, Uuid
from app.database import Base
from app.models._types import utcnow
import uuid


class StudyMaterial(Base):
    """
    Study materials table - titles and summaries are mined for dominant topics
    """
    __tablename__ = "study_materials"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("user_profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    subject = Column(String(100))
    content = Column(Text)
    summary = Column(Text)
    learning_style = Column(String(20), nullable=False)
    resource_url = Column(String(500))
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow, index=True)

    def __repr__(self):
        return f"<StudyMaterial(id={self.id}, title={self.title})>"
