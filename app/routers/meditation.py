# routers/meditation.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.meditation import MeditationSession, UserProgress
from app.models.user import User
from app.schemas.meditation import MeditationLogIn, MeditationSessionOut, ProgressOut
from app.services.progress import record_meditation

router = APIRouter(tags=["meditation"])


@router.get("/api/meditation/sessions", response_model=List[MeditationSessionOut])
def list_sessions(
    category: Optional[str] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    q = db.query(MeditationSession)
    if category:
        q = q.filter(MeditationSession.category == category)
    return q.order_by(MeditationSession.id.asc()).all()


@router.get("/api/meditation/featured", response_model=Optional[MeditationSessionOut])
def featured_session(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return (
        db.query(MeditationSession)
        .filter(MeditationSession.is_featured.is_(True))
        .order_by(MeditationSession.id.asc())
        .first()
    )


@router.get("/api/progress", response_model=ProgressOut)
def get_progress(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    progress = db.query(UserProgress).filter(UserProgress.user_id == user.id).first()
    return progress or ProgressOut()


@router.post("/api/progress/meditation", response_model=ProgressOut)
def log_meditation(
    body: MeditationLogIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return record_meditation(db, user.id, body.duration)
