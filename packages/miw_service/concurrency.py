import threading
from contextlib import contextmanager
from typing import Dict


class ConcurrencyManager:
    """
    Serialises state-changing commands on the same session.
    One in-process lock per session id; a request waits up to `timeout`
    seconds for its turn and then fails with BlockingIOError.
    """
    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, resource_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(resource_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[resource_id] = lock
            return lock

    @contextmanager
    def acquire_lock(self, resource_id: str):
        lock = self._lock_for(resource_id)
        if not lock.acquire(timeout=self.timeout):
            raise BlockingIOError(f"Resource {resource_id} is currently locked by another request.")
        try:
            yield
        finally:
            lock.release()

    def forget(self, resource_id: str) -> None:
        """Drop the lock entry of a session that no longer exists."""
        with self._registry_lock:
            self._locks.pop(resource_id, None)
