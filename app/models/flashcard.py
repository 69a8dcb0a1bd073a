"""
Flashcard model - front/back cards saved against a study material
"""
from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid
from app.database import Base
from app.models._types import utcnow
import uuid


class Flashcard(Base):
    __tablename__ = "flashcards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("user_profiles.id"), nullable=False, index=True)
    material_id = Column(Uuid, ForeignKey("study_materials.id", ondelete="CASCADE"), nullable=False, index=True)
    front = Column(Text, nullable=False)
    back = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, default=utcnow)

    def __repr__(self):
        return f"<Flashcard(id={self.id}, material_id={self.material_id})>"
