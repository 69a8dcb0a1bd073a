"""
Task model - scheduled study sessions and deadlines
"""
from sqlalchemy import Column, String, Text, TIMESTAMP, ForeignKey, Uuid
from app.database import Base
from app.models._types import utcnow
import uuid


class Task(Base):
    """
    Tasks table - start_time <= end_time; times are naive UTC
    """
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("user_profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    subject = Column(String(100))
    description = Column(Text)
    start_time = Column(TIMESTAMP, nullable=False, index=True)
    end_time = Column(TIMESTAMP, nullable=False)
    source = Column(String(20), default="manual", nullable=False)  # manual | google
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Task(id={self.id}, title={self.title}, start={self.start_time})>"
