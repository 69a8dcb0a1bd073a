"""
Database models package
"""
from app.models.user_profile import UserProfile
from app.models.quiz_session import QuizSession
from app.models.quiz_result import QuizResult
from app.models.study_material import StudyMaterial
from app.models.flashcard import Flashcard
from app.models.task import Task

__all__ = ["UserProfile", "QuizSession", "QuizResult", "StudyMaterial", "Flashcard", "Task"]
