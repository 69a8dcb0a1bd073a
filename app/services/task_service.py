"""
Task scheduling service
Create, list by time window, update and delete a user's study tasks
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models import Task, UserProfile
from app.models._types import as_naive_utc
from app.services.exceptions import ProfileNotFoundError, TaskNotFoundError, InvalidScheduleError

logger = logging.getLogger(__name__)


class TaskService:
    """
    Service for scheduled tasks

    All times are stored as naive UTC. A task always satisfies
    start_time <= end_time.
    """

    REQUIRED_FIELDS = ("title", "start_time", "end_time")

    def create(self, db: Session, user_id: UUID, data: Dict[str, Any]) -> Task:
        if not db.query(UserProfile).filter(UserProfile.id == user_id).first():
            raise ProfileNotFoundError(f"Profile {user_id} not found")

        start_time = as_naive_utc(data["start_time"])
        end_time = as_naive_utc(data["end_time"])
        self._check_order(start_time, end_time)

        task = Task(
            user_id=user_id,
            title=data["title"],
            subject=data.get("subject"),
            description=data.get("description"),
            start_time=start_time,
            end_time=end_time,
            source=data.get("source") or "manual",
        )
        db.add(task)
        db.commit()
        db.refresh(task)

        logger.info(f"Task created: {task.id} for user {user_id}")
        return task

    def list_tasks(
        self,
        db: Session,
        user_id: UUID,
        time_min: Optional[datetime] = None,
        time_max: Optional[datetime] = None,
    ) -> List[Task]:
        """
        Tasks ordered by start time

        With a window, returns every task that overlaps it: starting at or
        before time_max and ending at or after time_min.
        """
        query = db.query(Task).filter(Task.user_id == user_id)

        if time_min is not None:
            time_min = as_naive_utc(time_min)
            query = query.filter(Task.end_time >= time_min)
        if time_max is not None:
            time_max = as_naive_utc(time_max)
            query = query.filter(Task.start_time <= time_max)
        if time_min is not None and time_max is not None and time_min > time_max:
            raise InvalidScheduleError("time_min must not be after time_max")

        return query.order_by(Task.start_time.asc()).all()

    def get(self, db: Session, task_id: UUID) -> Task:
        task = db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise TaskNotFoundError(f"Task {task_id} not found")
        return task

    def update(self, db: Session, task_id: UUID, changes: Dict[str, Any]) -> Task:
        task = self.get(db, task_id)

        # Required columns cannot be cleared
        changes = {
            field: value for field, value in changes.items()
            if value is not None or field not in self.REQUIRED_FIELDS
        }
        for field in ("start_time", "end_time"):
            if field in changes:
                changes[field] = as_naive_utc(changes[field])

        self._check_order(
            changes.get("start_time", task.start_time),
            changes.get("end_time", task.end_time),
        )

        for field, value in changes.items():
            setattr(task, field, value)

        db.commit()
        db.refresh(task)

        logger.info(f"Task {task_id} updated: {', '.join(changes) or 'no changes'}")
        return task

    def delete(self, db: Session, task_id: UUID) -> None:
        task = self.get(db, task_id)
        db.delete(task)
        db.commit()
        logger.info(f"Task deleted: {task_id}")

    def _check_order(self, start_time: datetime, end_time: datetime) -> None:
        if end_time < start_time:
            raise InvalidScheduleError(
                f"Task ends ({end_time.isoformat()}) before it starts ({start_time.isoformat()})"
            )


# Global instance
task_service = TaskService()
