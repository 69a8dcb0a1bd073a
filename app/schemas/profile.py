"""
Pydantic schemas for user profiles
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from uuid import UUID
from datetime import datetime

LEARNING_STYLE_PATTERN = "^(visual|auditory|reading_writing|kinesthetic)$"


class ProfileCreate(BaseModel):
    """Schema for creating a profile"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    age: Optional[int] = Field(None, ge=0, le=120, description="Age in years, drives the quiz level")


class ProfileUpdate(BaseModel):
    """Partial profile update"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=120)
    learning_style: Optional[str] = Field(None, pattern=LEARNING_STYLE_PATTERN)


class ProfileResponse(BaseModel):
    """Profile as returned by the API"""
    id: UUID
    name: str
    email: str
    age: Optional[int] = None
    learning_style: Optional[str] = None
    quiz_completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
