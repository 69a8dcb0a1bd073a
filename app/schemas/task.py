"""
Pydantic schemas for scheduled tasks
"""
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime

TASK_SOURCE_PATTERN = "^(manual|google)$"


class TaskCreate(BaseModel):
    """Schema for scheduling a task"""
    user_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    subject: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime = Field(..., description="Deadline; must not be before start_time")
    source: str = Field("manual", pattern=TASK_SOURCE_PATTERN)


class TaskUpdate(BaseModel):
    """Partial task update"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subject: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class TaskResponse(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    subject: Optional[str] = None
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    source: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
