# backend/app/chat.py - supportive chat assistant
import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from openai import OpenAI, OpenAIError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_current_user
from app.core.timezone import format_time
from app.db.session import get_db
from app.models.chat import ChatLog
from app.models.user import User
from app.schemas.chat import ChatIn, ChatReply
from app.services.safety import crisis_disclosure

logger = logging.getLogger(__name__)
router = APIRouter()

SYSTEM_PROMPT = """You are a compassionate mental health support assistant for HerVital, an app serving rural communities.
Provide supportive, empathetic responses while being mindful of cultural sensitivity.
If the user expresses severe distress, suicidal thoughts, or immediate danger, respond with concern and suggest they seek immediate professional help or emergency services.
Keep responses concise but caring. Focus on self-care tips, coping strategies, and emotional support.
If appropriate, suggest booking an appointment or trying meditation features within the app.
Respond in JSON format with: { "response": "your message", "sentiment": "positive/negative/neutral", "escalationNeeded": true/false, "suggestedActions": ["action1", "action2"] }"""

FALLBACK_REPLY = (
    "I'm here to listen. I'm having trouble responding right now, "
    "but please tell me a little more about how you're feeling."
)

VALID_SENTIMENTS = ("positive", "negative", "neutral")


# ================= OpenAI Integration =================

def call_openai(system_prompt: str, message: str) -> Dict[str, Any]:
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY not set")

    try:
        client = OpenAI(api_key=api_key)

        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content if response.choices else ""
        return json.loads(content or "{}")

    except Exception as e:
        logger.error(f"OpenAI API failed: {e}")
        raise


def parse_reply(raw: Dict[str, Any]) -> ChatReply:
    reply = ChatReply.model_validate(raw)
    if reply.sentiment not in VALID_SENTIMENTS:
        reply.sentiment = "neutral"
    return reply


# ================= Chat endpoints =================

@router.post("")
def send_chat(
    payload: ChatIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    message = (payload.message or "").strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        reply = parse_reply(call_openai(SYSTEM_PROMPT, message))

        log = ChatLog(
            user_id=user.id,
            message=message,
            response=reply.response,
            sentiment=reply.sentiment,
            escalation_needed=reply.escalationNeeded,
        )
        db.add(log)
        db.commit()
        db.refresh(log)

    except (OpenAIError, RuntimeError, ValueError, PydanticValidationError, SQLAlchemyError) as e:
        db.rollback()
        logger.error(f"Chat failed for user={user.id}: {e}", exc_info=True)
        return {
            "ok": False,
            "response": FALLBACK_REPLY,
            "sentiment": "neutral",
            "escalationNeeded": False,
            "suggestedActions": [],
            "crisis": None,
            "error": str(e),
        }

    crisis = crisis_disclosure().model_dump(by_alias=True) if reply.escalationNeeded else None
    if crisis:
        logger.warning(f"Chat escalation for user={user.id}, log id={log.id}")

    return {
        "ok": True,
        **reply.model_dump(),
        "crisis": crisis,
        "messageId": log.id,
    }


@router.get("/history")
def get_chat_history(
    limit: int = 50,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    logs = (
        db.query(ChatLog)
        .filter(ChatLog.user_id == user.id)
        .order_by(ChatLog.created_at.desc(), ChatLog.id.desc())
        .limit(limit)
        .all()
    )

    return {
        "ok": True,
        "count": len(logs),
        "messages": [
            {
                "id": log.id,
                "message": log.message,
                "response": log.response,
                "sentiment": log.sentiment,
                "escalationNeeded": log.escalation_needed,
                "createdAt": format_time(log.created_at),
            }
            for log in reversed(logs)
        ],
    }
