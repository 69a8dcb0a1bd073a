"""
Pydantic schemas for personalized recommendations
"""
from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID


class LearningPathStep(BaseModel):
    id: str
    step: int
    title: str
    description: str
    level: str  # basic, intermediate, advanced
    icon: str


class TopicRecommendation(BaseModel):
    topic: str
    reason: str
    icon: str


class RecentMaterial(BaseModel):
    id: UUID
    title: str
    category: str
    progress: int  # 0-100
    last_studied: str
    summary: Optional[str] = None


class RecommendationResponse(BaseModel):
    """Complete recommendation payload for a user"""
    user_id: UUID
    learning_style: str
    dominant_topics: List[str]
    youtube_queries: List[str]
    learning_path: List[LearningPathStep]
    topic_recommendations: List[TopicRecommendation]
    recent_materials: List[RecentMaterial]
