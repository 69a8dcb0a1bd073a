"""
Study material, flashcard and recommendation API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from app.config import settings
from app.database import get_db
from app.models import Flashcard, StudyMaterial
from app.schemas.material import (
    MaterialCreate,
    MaterialUpdate,
    MaterialResponse,
    FlashcardBatch,
    FlashcardResponse,
)
from app.schemas.recommendation import RecommendationResponse
from app.services.classifier import VISUAL
from app.services.recommendation_service import recommendation_service
from app.api.profiles import get_profile_or_404
from app.utils.cache import cache_service

router = APIRouter(prefix="/api", tags=["materials"])
logger = logging.getLogger(__name__)


def get_material_or_404(db: Session, material_id: UUID) -> StudyMaterial:
    material = db.query(StudyMaterial).filter(StudyMaterial.id == material_id).first()
    if not material:
        raise HTTPException(status_code=404, detail="Study material not found")
    return material


@router.post("/materials", response_model=MaterialResponse, status_code=201)
async def create_material(request: MaterialCreate, db: Session = Depends(get_db)):
    """Store a study material; it feeds the user's topic recommendations"""
    profile = get_profile_or_404(db, request.user_id)

    material = StudyMaterial(
        user_id=profile.id,
        title=request.title,
        subject=request.subject,
        content=request.content,
        summary=request.summary,
        resource_url=request.resource_url,
        learning_style=request.learning_style or profile.learning_style or VISUAL,
    )
    db.add(material)
    db.commit()
    db.refresh(material)

    cache_service.invalidate_user(profile.id)

    logger.info(f"Study material created: {material.id}")
    return material


@router.get("/materials/{material_id}", response_model=MaterialResponse)
async def get_material(material_id: UUID, db: Session = Depends(get_db)):
    return get_material_or_404(db, material_id)


@router.patch("/materials/{material_id}", response_model=MaterialResponse)
async def update_material(material_id: UUID, request: MaterialUpdate, db: Session = Depends(get_db)):
    material = get_material_or_404(db, material_id)

    # title and learning_style are required columns; null means unchanged
    changes = {
        field: value for field, value in request.model_dump(exclude_unset=True).items()
        if value is not None or field not in ("title", "learning_style")
    }
    for field, value in changes.items():
        setattr(material, field, value)

    db.commit()
    db.refresh(material)

    cache_service.invalidate_user(material.user_id)

    logger.info(f"Study material {material_id} updated: {', '.join(changes) or 'no changes'}")
    return material


@router.delete("/materials/{material_id}", status_code=204)
async def delete_material(material_id: UUID, db: Session = Depends(get_db)):
    """Delete a material together with its flashcards"""
    material = get_material_or_404(db, material_id)
    user_id = material.user_id

    db.query(Flashcard).filter(Flashcard.material_id == material_id).delete(synchronize_session=False)
    db.delete(material)
    db.commit()

    cache_service.invalidate_user(user_id)
    logger.info(f"Study material deleted: {material_id}")


@router.post(
    "/materials/{material_id}/flashcards",
    response_model=List[FlashcardResponse],
    status_code=201,
)
async def save_flashcards(material_id: UUID, request: FlashcardBatch, db: Session = Depends(get_db)):
    """Save a batch of flashcards for the material"""
    material = get_material_or_404(db, material_id)

    cards = [
        Flashcard(user_id=material.user_id, material_id=material.id, front=card.front, back=card.back)
        for card in request.flashcards
    ]
    db.add_all(cards)
    db.commit()
    for card in cards:
        db.refresh(card)

    logger.info(f"Saved {len(cards)} flashcards for material {material_id}")
    return cards


@router.get("/materials/{material_id}/flashcards", response_model=List[FlashcardResponse])
async def list_flashcards(material_id: UUID, db: Session = Depends(get_db)):
    get_material_or_404(db, material_id)

    return db.query(Flashcard).filter(
        Flashcard.material_id == material_id
    ).order_by(Flashcard.created_at.asc()).all()


@router.get("/profiles/{profile_id}/materials", response_model=List[MaterialResponse])
async def list_materials(profile_id: UUID, db: Session = Depends(get_db)):
    get_profile_or_404(db, profile_id)

    return db.query(StudyMaterial).filter(
        StudyMaterial.user_id == profile_id
    ).order_by(StudyMaterial.updated_at.desc()).limit(settings.RECENT_MATERIALS_LIMIT).all()


@router.get("/profiles/{profile_id}/recommendations", response_model=RecommendationResponse)
async def get_recommendations(profile_id: UUID, db: Session = Depends(get_db)):
    """
    Personalized recommendations

    Returns:
    - Dominant topics from recent study materials
    - Learning path and topic suggestions for the learning style
    - Search queries for video resources
    - Recently studied materials
    """
    profile = get_profile_or_404(db, profile_id)
    return RecommendationResponse(**recommendation_service.get_recommendations(db, profile))
