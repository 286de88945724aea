from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Optional
from .dto import InterviewSession


class SessionStateRepository(ABC):
    """
    Interface for the process-wide session store.
    The only place session state lives; handlers fetch, mutate and save back.
    """
    @abstractmethod
    def create(self, resume_text: str, file_name: Optional[str]) -> InterviewSession:
        """Insert a fresh session under a newly generated id."""
        pass

    @abstractmethod
    def get_state(self, session_id: str) -> Optional[InterviewSession]:
        pass

    @abstractmethod
    def save_state(self, session: InterviewSession) -> None:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        pass

    @abstractmethod
    def purge_expired(self, now: Optional[datetime] = None) -> int:
        """
        Drop sessions past their time-to-live.
        Returns the number of evicted sessions.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def add_eviction_listener(self, callback: Callable[[str], None]) -> None:
        """
        Register a callback invoked with the id of every session the store
        drops on its own (expiry, capacity) or through delete().
        """
        pass
