# routers/reminders.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.reminder import Reminder
from app.models.user import User
from app.schemas.reminder import ReminderIn, ReminderOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.get("", response_model=List[ReminderOut])
def list_reminders(
    include_completed: bool = True,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    q = db.query(Reminder).filter(Reminder.user_id == user.id)
    if not include_completed:
        q = q.filter(Reminder.is_completed.is_(False))
    return q.order_by(Reminder.reminder_time.asc()).all()


@router.post("", response_model=ReminderOut)
def create_reminder(
    body: ReminderIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    reminder = Reminder(user_id=user.id, **body.model_dump())
    db.add(reminder)
    db.commit()
    db.refresh(reminder)
    logger.info(f"⏰ Reminder created: id={reminder.id}, user={user.id}, type={reminder.type}")
    return reminder


@router.patch("/{reminder_id}/complete", response_model=ReminderOut)
def complete_reminder(
    reminder_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    reminder = (
        db.query(Reminder)
        .filter(Reminder.id == reminder_id, Reminder.user_id == user.id)
        .first()
    )
    if not reminder:
        raise HTTPException(status_code=404, detail="Reminder not found")

    reminder.is_completed = True
    db.add(reminder)
    db.commit()
    db.refresh(reminder)
    return reminder
