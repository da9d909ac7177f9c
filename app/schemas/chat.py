from pydantic import BaseModel, Field


class ChatIn(BaseModel):
    message: str | None = None


class ChatReply(BaseModel):
    """Shape the language model is asked to answer in."""
    response: str
    sentiment: str = "neutral"
    escalationNeeded: bool = False
    suggestedActions: list[str] = Field(default_factory=list)
