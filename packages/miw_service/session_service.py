from typing import Dict, Optional

from packages.miw_catalog.service import RoleCatalog
from packages.miw_core.config import MIWConfig
from packages.miw_core.errors import BadInputError, InvalidReferenceError
from packages.miw_core.logging import get_logger
from packages.miw_core.time import to_iso, utc_now
from packages.miw_dto.interview import (
    AnswerResultDTO,
    FeedbackDTO,
    SessionDataDTO,
    StartInterviewDTO,
    UploadResultDTO,
)
from packages.miw_providers.pdf.base import IPDFProvider
from packages.miw_service.concurrency import ConcurrencyManager
from packages.miw_session.dto import InterviewSession
from packages.miw_session.engine import InterviewSessionEngine
from packages.miw_session.repository import SessionStateRepository

logger = get_logger("miw_service.session_service")

NO_FILE_MESSAGE = "No resume file uploaded."
INVALID_SESSION_MESSAGE = "Invalid session ID"


class InterviewService:
    """
    Application Service for the interview wizard.
    Responsible for:
    1. Loading and saving sessions around each command
    2. Serialising commands on the same session (lock entries are
       dropped when the store evicts a session)
    3. Orchestrating PDF extraction and engine calls
    """
    def __init__(
        self,
        repository: SessionStateRepository,
        catalog: RoleCatalog,
        pdf_provider: IPDFProvider,
        config: MIWConfig,
        concurrency_manager: Optional[ConcurrencyManager] = None
    ):
        self.repository = repository
        self.catalog = catalog
        self.pdf_provider = pdf_provider
        self.config = config
        self.concurrency_manager = concurrency_manager or ConcurrencyManager()
        self.repository.add_eviction_listener(self.concurrency_manager.forget)

    def list_roles(self) -> Dict[str, dict]:
        return self.catalog.to_public_dict()

    def upload_resume(self, file_name: Optional[str], payload: Optional[bytes]) -> UploadResultDTO:
        """
        Extract resume text and open a new session (-> CREATED).
        """
        if not payload:
            raise BadInputError(NO_FILE_MESSAGE)

        if len(payload) > self.config.max_resume_size_bytes:
            raise BadInputError(
                f"Resume file exceeds {self.config.MAX_RESUME_SIZE_MB}MB limit.",
                details={"file_size_bytes": len(payload)}
            )

        result = self.pdf_provider.extract_text(payload)
        resume_text = result.full_text
        logger.info(f"Extracted resume text length: {len(resume_text)}, File: {file_name}")

        session = self.repository.create(resume_text=resume_text, file_name=file_name)
        logger.info(f"Created session {session.session_id}")

        return UploadResultDTO(
            session_id=session.session_id,
            resume_preview=resume_text[:self.config.RESUME_PREVIEW_CHARS] + "...",
        )

    def start_interview(self, session_id: Optional[str], role_key: Optional[str]) -> StartInterviewDTO:
        """
        Bind a role to the session and emit the opening question (-> ROLE_SELECTED).
        """
        with self._locked(session_id):
            session = self._load(session_id)
            if not self.catalog.has_role(role_key):
                raise InvalidReferenceError("Invalid role selected", details={"role_key": role_key})

            engine = self._engine(session)
            question = engine.select_role(role_key)
            self.repository.save_state(session)

            return StartInterviewDTO(
                question=question,
                role_name=session.role.name,
                session_id=session.session_id,
            )

    def submit_answer(self, session_id: Optional[str], answer: Optional[str]) -> AnswerResultDTO:
        """
        Record an answer and return the next question (-> IN_PROGRESS).
        """
        with self._locked(session_id):
            session = self._load(session_id)
            engine = self._engine(session)
            next_question = engine.record_answer(answer)
            self.repository.save_state(session)

            return AnswerResultDTO(
                next_question=next_question.text,
                question_number=next_question.question_number,
            )

    def get_feedback(self, session_id: Optional[str]) -> FeedbackDTO:
        """
        Heuristic feedback for the session (-> COMPLETED).
        """
        with self._locked(session_id):
            session = self._load(session_id)
            engine = self._engine(session)
            result = engine.build_feedback()
            self.repository.save_state(session)

            return FeedbackDTO(
                feedback=result.text,
                role_name=session.role.name,
                total_questions=result.total_questions,
                session_data=SessionDataDTO(
                    file_name=session.file_name,
                    upload_time=to_iso(session.upload_time),
                    interview_duration=to_iso(utc_now()),
                ),
            )

    def _locked(self, session_id: Optional[str]):
        if not session_id:
            raise InvalidReferenceError(INVALID_SESSION_MESSAGE)
        return self.concurrency_manager.acquire_lock(session_id)

    def _load(self, session_id: str) -> InterviewSession:
        session = self.repository.get_state(session_id)
        if session is None:
            self.concurrency_manager.forget(session_id)
            raise InvalidReferenceError(INVALID_SESSION_MESSAGE, details={"session_id": session_id})
        return session

    def _engine(self, session: InterviewSession) -> InterviewSessionEngine:
        return InterviewSessionEngine(
            session=session,
            catalog=self.catalog,
            max_predefined_questions=self.config.MAX_PREDEFINED_QUESTIONS,
        )
