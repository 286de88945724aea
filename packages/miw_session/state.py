from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class SessionStatus(str, Enum):
    """
    Interview session lifecycle.
    CREATED -> ROLE_SELECTED -> IN_PROGRESS -> COMPLETED
    COMPLETED is informational; answers submitted afterwards are still accepted.
    """
    CREATED = "CREATED"
    ROLE_SELECTED = "ROLE_SELECTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TurnSpeaker(str, Enum):
    AI = "ai"
    USER = "user"


class CursorMode(str, Enum):
    INDEXED = "INDEXED"
    FALLBACK = "FALLBACK"


AI_GENERATED_MARKER = "AI-generated"


@dataclass(frozen=True)
class QuestionCursor:
    """
    Position in the role's predefined question list.

    Either Indexed(n), pointing at bank entry n, or Fallback, meaning questions
    now come from the heuristic generator. Fallback is terminal: no method
    returns an indexed cursor from a fallback one.
    """
    mode: CursorMode
    index: Optional[int] = None

    @classmethod
    def indexed(cls, index: int) -> "QuestionCursor":
        if index < 0:
            raise ValueError(f"Question index must be non-negative, got {index}")
        return cls(mode=CursorMode.INDEXED, index=index)

    @classmethod
    def fallback(cls) -> "QuestionCursor":
        return cls(mode=CursorMode.FALLBACK)

    @property
    def is_fallback(self) -> bool:
        return self.mode == CursorMode.FALLBACK

    def advance(self, bank_size: int, cap: int) -> "QuestionCursor":
        """
        Next cursor after an answer: the next bank entry while one exists below
        the cap, otherwise Fallback.
        """
        if self.is_fallback:
            return self
        next_index = self.index + 1
        if next_index < bank_size and next_index < cap:
            return QuestionCursor.indexed(next_index)
        return QuestionCursor.fallback()

    @property
    def question_number(self) -> Union[int, str]:
        """1-based predefined question number, or the AI-generated marker."""
        if self.is_fallback:
            return AI_GENERATED_MARKER
        return self.index + 1

    @property
    def legacy_index(self) -> int:
        """Raw index with -1 standing for Fallback, as reported in totalQuestions."""
        if self.is_fallback:
            return -1
        return self.index
