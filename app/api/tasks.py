"""
Task scheduling API endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from app.database import get_db
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from app.services.task_service import task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(request: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create(db, request.user_id, request.model_dump(exclude={"user_id"}))


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    user_id: UUID,
    time_min: Optional[datetime] = Query(None, description="Window start (ISO 8601)"),
    time_max: Optional[datetime] = Query(None, description="Window end (ISO 8601)"),
    db: Session = Depends(get_db),
):
    """
    A user's tasks ordered by start time

    When a window is given, only tasks overlapping it are returned.
    """
    return task_service.list_tasks(db, user_id, time_min=time_min, time_max=time_max)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: UUID, db: Session = Depends(get_db)):
    return task_service.get(db, task_id)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: UUID, request: TaskUpdate, db: Session = Depends(get_db)):
    return task_service.update(db, task_id, request.model_dump(exclude_unset=True))


@router.delete("/{task_id}", status_code=204)
async def delete_task(task_id: UUID, db: Session = Depends(get_db)):
    task_service.delete(db, task_id)
