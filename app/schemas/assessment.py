"""
Pydantic schemas for the learning style assessment
"""
from pydantic import BaseModel, Field, StrictInt
from typing import List, Dict, Any, Optional, Union
from uuid import UUID
from datetime import datetime


class MatchPair(BaseModel):
    """One association made on a matching question"""
    left_id: str
    right_id: str


class SessionStart(BaseModel):
    """Request to start or resume an assessment"""
    user_id: UUID


class AnswerSubmission(BaseModel):
    """Answer for the session's current question"""
    question_id: int = Field(..., ge=1)
    # Option index (or letter A-D) for multiple choice, list of matches for matching
    answer: Union[StrictInt, str, List[MatchPair]]


class SessionResponse(BaseModel):
    """Current state of a quiz session"""
    session_id: UUID
    user_id: UUID
    current_question_index: int
    total_questions: int
    scores: Dict[str, int]
    is_complete: bool
    next_question: Optional[Dict[str, Any]] = None
    started_at: datetime
    resumed: bool = False


class AnswerResponse(BaseModel):
    """Outcome of one answer"""
    question_id: int
    is_correct: bool
    session: SessionResponse


class ScoreSubmission(BaseModel):
    """Direct submission of tallied scores"""
    user_id: UUID
    visual_score: int = Field(..., ge=0)
    auditory_score: int = Field(..., ge=0)
    reading_writing_score: int = Field(..., ge=0)
    kinesthetic_score: int = Field(..., ge=0)
    time_taken: Optional[int] = Field(None, ge=0, description="Seconds spent on the quiz")
    age: Optional[int] = Field(None, description="Overrides the age on the profile")


class QuizResultResponse(BaseModel):
    """Stored quiz result"""
    id: UUID
    user_id: UUID
    visual_score: int
    auditory_score: int
    reading_writing_score: int
    kinesthetic_score: int
    total_score: int
    quiz_level: str
    dominant_style: str
    dominance_percentage: float
    time_taken: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class SubmissionResponse(BaseModel):
    """Response after a quiz is submitted"""
    learning_style: str
    quiz_level: str
    total_score: int
    dominance_percentage: float
    quiz_result: QuizResultResponse
