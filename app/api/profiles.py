"""
User profile API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from app.database import get_db
from app.models import UserProfile, QuizResult
from app.schemas.profile import ProfileCreate, ProfileUpdate, ProfileResponse
from app.schemas.assessment import QuizResultResponse
from app.utils.cache import cache_service

router = APIRouter(prefix="/api/profiles", tags=["profiles"])
logger = logging.getLogger(__name__)


def get_profile_or_404(db: Session, profile_id: UUID) -> UserProfile:
    profile = db.query(UserProfile).filter(UserProfile.id == profile_id).first()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(request: ProfileCreate, db: Session = Depends(get_db)):
    email = request.email.strip().lower()

    existing = db.query(UserProfile).filter(UserProfile.email == email).first()
    if existing:
        raise HTTPException(status_code=409, detail="A profile with this email already exists")

    profile = UserProfile(name=request.name, email=email, age=request.age, quiz_completed=False)
    db.add(profile)
    db.commit()
    db.refresh(profile)

    logger.info(f"Profile created: {profile.id}")
    return profile


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: UUID, db: Session = Depends(get_db)):
    return get_profile_or_404(db, profile_id)


@router.patch("/{profile_id}", response_model=ProfileResponse)
async def update_profile(profile_id: UUID, request: ProfileUpdate, db: Session = Depends(get_db)):
    profile = get_profile_or_404(db, profile_id)

    changes = request.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(profile, field, value)

    db.commit()
    db.refresh(profile)

    if "learning_style" in changes:
        cache_service.invalidate_user(profile.id)

    logger.info(f"Profile {profile_id} updated: {', '.join(changes) or 'no changes'}")
    return profile


@router.get("/{profile_id}/quiz-results", response_model=List[QuizResultResponse])
async def list_quiz_results(profile_id: UUID, db: Session = Depends(get_db)):
    """Assessment history, newest first"""
    get_profile_or_404(db, profile_id)

    return db.query(QuizResult).filter(
        QuizResult.user_id == profile_id
    ).order_by(QuizResult.created_at.desc()).all()
