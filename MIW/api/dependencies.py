from functools import lru_cache

from packages.miw_catalog.service import RoleCatalog
from packages.miw_core.config import MIWConfig
from packages.miw_providers.pdf.base import IPDFProvider
from packages.miw_providers.pdf.local_provider import LocalPDFProvider
from packages.miw_service.concurrency import ConcurrencyManager
from packages.miw_service.session_service import InterviewService
from packages.miw_session.infrastructure.memory_repo import MemorySessionRepository
from packages.miw_session.repository import SessionStateRepository

# --- Configuration ---

@lru_cache
def get_config() -> MIWConfig:
    return MIWConfig.load()

# --- Providers (External Adapters) ---

@lru_cache
def get_pdf_provider() -> IPDFProvider:
    """
    Singleton PDF text extractor (pypdf).
    """
    return LocalPDFProvider()

# --- Repositories (State) ---

@lru_cache
def get_session_repository() -> SessionStateRepository:
    """
    Singleton Session Repository (Memory).
    Must be shared across requests to maintain state.
    """
    config = get_config()
    return MemorySessionRepository(
        ttl_seconds=config.SESSION_TTL_SECONDS,
        max_sessions=config.MAX_SESSIONS
    )

@lru_cache
def get_role_catalog() -> RoleCatalog:
    """
    Singleton Role Catalog and Question Bank (static data).
    """
    return RoleCatalog()

@lru_cache
def get_concurrency_manager() -> ConcurrencyManager:
    """
    Singleton per-session lock registry.
    """
    return ConcurrencyManager()

# --- Domain Services (Application Logic) ---

def get_interview_service() -> InterviewService:
    """
    Transient Interview Service.
    Injected with Singleton Repositories and Providers.
    """
    return InterviewService(
        repository=get_session_repository(),
        catalog=get_role_catalog(),
        pdf_provider=get_pdf_provider(),
        config=get_config(),
        concurrency_manager=get_concurrency_manager()
    )
