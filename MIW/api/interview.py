import os
import uuid
from typing import Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from MIW.api.dependencies import get_interview_service
from MIW.api.schemas import (
    ErrorResponse,
    FeedbackRequest,
    RoleSchema,
    StartInterviewRequest,
    SubmitAnswerRequest,
)
from packages.miw_core.errors import BadInputError, InternalServiceError, MIWBaseError
from packages.miw_core.logging import get_logger
from packages.miw_dto.interview import (
    AnswerResultDTO,
    FeedbackDTO,
    StartInterviewDTO,
    UploadResultDTO,
)
from packages.miw_service.session_service import NO_FILE_MESSAGE, InterviewService

router = APIRouter(tags=["Interview"])
logger = get_logger("MIW.api.interview")

READ_CHUNK_BYTES = 1024 * 1024

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/roles", response_model=Dict[str, RoleSchema])
def list_roles(service: InterviewService = Depends(get_interview_service)):
    """
    Full engineering role catalog, keyed by role id.
    """
    return service.list_roles()


@router.post("/upload-resume", response_model=UploadResultDTO, responses=ERROR_RESPONSES)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    service: InterviewService = Depends(get_interview_service)
):
    """
    Upload a PDF resume (multipart field 'resume') and open a new session.
    """
    request_id = str(uuid.uuid4())
    if resume is None:
        raise BadInputError(NO_FILE_MESSAGE)

    logger.info(
        f"Resume upload received. RequestID: {request_id}, Filename: {resume.filename}, "
        f"ContentType: {resume.content_type}"
    )

    try:
        limit = service.config.max_resume_size_bytes
        chunks = []
        size = 0
        while content := await resume.read(READ_CHUNK_BYTES):
            size += len(content)
            if size > limit:
                raise BadInputError(f"Resume file exceeds {service.config.MAX_RESUME_SIZE_MB}MB limit.")
            chunks.append(content)

        file_name = os.path.basename(resume.filename) if resume.filename else None
        result = await run_in_threadpool(service.upload_resume, file_name, b"".join(chunks))
        logger.info(f"Resume upload succeeded. Session: {result.session_id} [RequestID: {request_id}]")
        return result

    except MIWBaseError:
        raise
    except Exception as e:
        logger.exception(f"Resume upload failed [RequestID: {request_id}]")
        raise InternalServiceError("Failed to upload resume due to an unexpected error.") from e
    finally:
        await resume.close()


@router.post("/start-interview", response_model=StartInterviewDTO, responses=ERROR_RESPONSES)
def start_interview(
    payload: Optional[StartInterviewRequest] = None,
    service: InterviewService = Depends(get_interview_service)
):
    """
    Select a role for the session and receive the first question.
    """
    payload = payload or StartInterviewRequest()
    try:
        return service.start_interview(payload.session_id, payload.role_key)
    except MIWBaseError:
        raise
    except Exception as e:
        logger.exception("Error starting interview")
        raise InternalServiceError("Failed to start interview") from e


@router.post("/submit-answer", response_model=AnswerResultDTO, responses=ERROR_RESPONSES)
def submit_answer(
    payload: Optional[SubmitAnswerRequest] = None,
    service: InterviewService = Depends(get_interview_service)
):
    """
    Submit an answer for the current question and receive the next one.
    """
    payload = payload or SubmitAnswerRequest()
    try:
        return service.submit_answer(payload.session_id, payload.user_answer)
    except MIWBaseError:
        raise
    except Exception as e:
        logger.exception("Error submitting answer")
        raise InternalServiceError("Failed to submit answer") from e


@router.post("/get-feedback", response_model=FeedbackDTO, responses=ERROR_RESPONSES)
def get_feedback(
    payload: Optional[FeedbackRequest] = None,
    service: InterviewService = Depends(get_interview_service)
):
    """
    Heuristic feedback summary for the whole interview.
    """
    payload = payload or FeedbackRequest()
    try:
        return service.get_feedback(payload.session_id)
    except MIWBaseError:
        raise
    except Exception as e:
        logger.exception("Error generating feedback")
        raise InternalServiceError("Failed to generate feedback") from e
