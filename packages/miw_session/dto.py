from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from packages.miw_catalog.domain import Role
from packages.miw_core.time import utc_now
from .state import QuestionCursor, SessionStatus, TurnSpeaker


class ConversationTurn(BaseModel):
    """
    One entry of the interview transcript.
    Turns are append-only; insertion order is the only ordering guarantee.
    """
    speaker: TurnSpeaker
    text: str = ""
    timestamp: datetime = Field(default_factory=utc_now)


class InterviewSession(BaseModel):
    """
    Runtime state of one upload-through-feedback journey.
    Owned exclusively by the session repository.
    """
    session_id: str
    resume_text: str = ""
    file_name: Optional[str] = None
    upload_time: datetime = Field(default_factory=utc_now)
    status: SessionStatus = SessionStatus.CREATED

    # Set by start-interview
    role: Optional[Role] = None
    role_key: Optional[str] = None
    cursor: Optional[QuestionCursor] = None

    history: List[ConversationTurn] = Field(default_factory=list)

    @property
    def has_role(self) -> bool:
        return self.role is not None

    def append_turn(self, speaker: TurnSpeaker, text: Optional[str]) -> ConversationTurn:
        turn = ConversationTurn(speaker=speaker, text=text or "")
        self.history.append(turn)
        return turn
