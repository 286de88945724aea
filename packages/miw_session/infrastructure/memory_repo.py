import random
import threading
import time
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

from packages.miw_core.logging import get_logger
from packages.miw_core.time import utc_now
from packages.miw_session.dto import InterviewSession
from packages.miw_session.repository import SessionStateRepository

logger = get_logger("miw_session.memory_repo")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_session_id() -> str:
    """
    Millisecond timestamp plus a random suffix, both base-36.
    Unique enough for a single process; not suitable as a secret.
    """
    return _to_base36(int(time.time() * 1000)) + _to_base36(random.getrandbits(52))


class MemorySessionRepository(SessionStateRepository):
    """
    In-Memory implementation of SessionStateRepository.

    Bounded two ways: sessions older than ttl_seconds (measured from upload)
    are evicted lazily on create/get, and once max_sessions is reached the
    oldest session makes room for a new one. Either bound is off when 0.
    Eviction listeners are called outside the store lock.
    """
    def __init__(self, ttl_seconds: int = 0, max_sessions: int = 0):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self._store: Dict[str, InterviewSession] = {}
        self._lock = threading.RLock()
        self._eviction_listeners: List[Callable[[str], None]] = []

    def add_eviction_listener(self, callback: Callable[[str], None]) -> None:
        # Registering the same callback twice is a no-op
        if callback not in self._eviction_listeners:
            self._eviction_listeners.append(callback)

    def create(self, resume_text: str, file_name: Optional[str]) -> InterviewSession:
        with self._lock:
            evicted = self._drop_expired(utc_now())
            evicted.extend(self._evict_for_capacity())

            session_id = generate_session_id()
            while session_id in self._store:
                session_id = generate_session_id()

            session = InterviewSession(
                session_id=session_id,
                resume_text=resume_text,
                file_name=file_name,
            )
            self._store[session_id] = session

        self._notify_evicted(evicted)
        return session

    def get_state(self, session_id: str) -> Optional[InterviewSession]:
        if not session_id:
            return None
        with self._lock:
            session = self._store.get(session_id)
            if session is None:
                return None
            if not self._is_expired(session, utc_now()):
                return session
            del self._store[session_id]

        logger.info(f"Session {session_id} expired on access.")
        self._notify_evicted([session_id])
        return None

    def save_state(self, session: InterviewSession) -> None:
        with self._lock:
            self._store[session.session_id] = session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            removed = self._store.pop(session_id, None) is not None
        if removed:
            self._notify_evicted([session_id])
        return removed

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        with self._lock:
            expired = self._drop_expired(now or utc_now())
        self._notify_evicted(expired)
        return len(expired)

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def _is_expired(self, session: InterviewSession, now: datetime) -> bool:
        if self.ttl_seconds <= 0:
            return False
        return now - session.upload_time > timedelta(seconds=self.ttl_seconds)

    def _drop_expired(self, now: datetime) -> List[str]:
        if self.ttl_seconds <= 0:
            return []
        expired = [sid for sid, s in self._store.items() if self._is_expired(s, now)]
        for sid in expired:
            del self._store[sid]
        if expired:
            logger.info(f"Evicted {len(expired)} expired session(s).")
        return expired

    def _evict_for_capacity(self) -> List[str]:
        evicted = []
        if self.max_sessions <= 0:
            return evicted
        while len(self._store) >= self.max_sessions:
            # dicts keep insertion order, so the first key is the oldest upload
            oldest_id = next(iter(self._store))
            del self._store[oldest_id]
            evicted.append(oldest_id)
            logger.warning(f"Session store at capacity ({self.max_sessions}). Evicted {oldest_id}.")
        return evicted

    def _notify_evicted(self, session_ids: List[str]) -> None:
        for session_id in session_ids:
            for callback in self._eviction_listeners:
                callback(session_id)
