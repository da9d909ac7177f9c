# backend/app/main.py - HerVital wellness API
from __future__ import annotations

import logging
import os
from typing import List

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import create_access_token, get_current_user
from app.core.timezone import format_time, utc_now
from app.db.base import Base
from app.db.session import get_db, engine
from app.models import User  # importing app.models registers every table
from app.schemas.assessment import AnswerCheckIn, QuestionnaireSubmitIn
from app.schemas.auth import JoinIn, UserOut, UserUpdateIn
from app.services.assessment_service import serialize_result, submit_assessment
from app.services.assessment_store import AssessmentStore
from app.services.catalog import DEFAULT_CATALOG
from app.services.errors import ReferentialError, StorageError, ValidationError
from app.services.safety import check_answer
from app import chat as chat_module
from app.routers import appointments, meditation, reminders

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="HerVital Backend",
    version=VERSION,
    description="Wellness assessment, chat support, reminders and meditation tracking"
)


def _parse_allowed(origins_str: str) -> List[str]:
    out: List[str] = []
    for s in (origins_str or "").split(","):
        s = s.strip()
        if s and s not in ("*", "null"):
            out.append(s)
    return out


_ALLOWED_ORIGINS = _parse_allowed(settings.ALLOWED_ORIGINS)
_VERCEL_REGEX_STR = r"^https://.*\.vercel\.app$"

app.add_middleware(
    CORSMiddleware,
    allow_origins=_ALLOWED_ORIGINS,
    allow_origin_regex=_VERCEL_REGEX_STR,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)


@app.on_event("startup")
def on_startup():
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Tables ready")
    except SQLAlchemyError as e:
        logger.error(f"⚠️ Table creation failed: {e}")


app.include_router(chat_module.router, prefix="/api/chat", tags=["chat"])
app.include_router(appointments.router)
app.include_router(reminders.router)
app.include_router(meditation.router)

# ============================================================================
# Auth & user
# ============================================================================


def _user_payload(user: User) -> dict:
    return UserOut.model_validate(user).model_dump(by_alias=True)


@app.post("/api/auth/join")
def join(body: JoinIn, db: Session = Depends(get_db)):
    """Hand-off from the identity provider: find or create the user, issue a token."""
    email = (body.email or "").strip().lower()
    if not email:
        raise HTTPException(status_code=422, detail="email is required")

    user = db.query(User).filter(User.email == email).first()
    if not user:
        user = User(email=email, first_name=body.first_name, last_name=body.last_name)
        db.add(user)
        logger.info(f"✅ New user: email={email}")
    else:
        if body.first_name:
            user.first_name = body.first_name
        if body.last_name:
            user.last_name = body.last_name
        db.add(user)

    db.commit()
    db.refresh(user)

    return {"token": create_access_token(user_id=user.id), "user": _user_payload(user)}


@app.get("/api/auth/user")
def get_me(user: User = Depends(get_current_user)):
    return _user_payload(user)


@app.patch("/api/user/me")
def update_me(
    body: UserUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    changes = body.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(user, field, value)
    if changes:
        db.add(user)
        db.commit()
        db.refresh(user)
    return {"ok": True, "user": _user_payload(user)}

# ============================================================================
# Questionnaire
# ============================================================================


@app.get("/api/questionnaire/questions")
def list_questions(user: User = Depends(get_current_user)):
    return {
        "version": DEFAULT_CATALOG.version,
        "count": len(DEFAULT_CATALOG),
        "questions": DEFAULT_CATALOG.to_list(),
    }


@app.post("/api/questionnaire/answer")
def check_questionnaire_answer(
    body: AnswerCheckIn,
    user: User = Depends(get_current_user)
):
    """
    Called as each answer is given. Safety answers disclose crisis resources
    here, before the assessment is submitted.
    """
    question = DEFAULT_CATALOG.get(body.question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=f"Unknown question: {body.question_id}")

    disclosure = check_answer(question, body.answer)
    return {
        "ok": True,
        "questionId": question.id,
        "crisis": disclosure.model_dump(by_alias=True) if disclosure else None,
    }


@app.post("/api/questionnaire")
def submit_questionnaire(
    body: QuestionnaireSubmitIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        result = submit_assessment(db, user.id, body.responses, body.category)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ReferentialError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        logger.error(f"❌ Questionnaire save failed: user={user.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save questionnaire")

    return serialize_result(result)


@app.get("/api/questionnaire/latest")
def latest_questionnaire(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    result = AssessmentStore(db).latest_for(user.id)
    return serialize_result(result) if result else None


@app.get("/api/questionnaire/history")
def questionnaire_history(
    limit: int = 10,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    results = AssessmentStore(db).history_for(user.id, limit=max(1, min(limit, 100)))
    return {
        "ok": True,
        "count": len(results),
        "results": [serialize_result(r) for r in results],
    }

# ============================================================================
# Health
# ============================================================================


@app.get("/api/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("select 1"))
        db_ok = True
    except SQLAlchemyError as e:
        logger.error(f"DB not ready: {e}")
        db_ok = False
    return {
        "ok": db_ok,
        "time": format_time(utc_now()),
        "version": VERSION,
        "catalogVersion": DEFAULT_CATALOG.version,
    }


@app.get("/")
def root():
    return {
        "service": "HerVital Backend API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "10000"))
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")
