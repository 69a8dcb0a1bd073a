"""
Pydantic schemas for study materials and their flashcards
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from app.schemas.profile import LEARNING_STYLE_PATTERN


class MaterialCreate(BaseModel):
    """Schema for storing a study material"""
    user_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    subject: Optional[str] = Field(None, max_length=100)
    content: Optional[str] = None
    summary: Optional[str] = None
    resource_url: Optional[str] = Field(None, max_length=500)
    learning_style: Optional[str] = Field(
        None, pattern=LEARNING_STYLE_PATTERN, description="Defaults to the profile's learning style"
    )


class MaterialUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subject: Optional[str] = Field(None, max_length=100)
    content: Optional[str] = None
    summary: Optional[str] = None
    resource_url: Optional[str] = Field(None, max_length=500)
    learning_style: Optional[str] = Field(None, pattern=LEARNING_STYLE_PATTERN)


class MaterialResponse(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    subject: Optional[str] = None
    summary: Optional[str] = None
    resource_url: Optional[str] = None
    learning_style: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FlashcardIn(BaseModel):
    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)


class FlashcardBatch(BaseModel):
    """Flashcards to save for a material"""
    flashcards: List[FlashcardIn] = Field(..., min_length=1)


class FlashcardResponse(BaseModel):
    id: UUID
    material_id: UUID
    front: str
    back: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
