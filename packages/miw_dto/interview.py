from typing import Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireDTO(BaseModel):
    """
    Base for DTOs returned to the browser.
    Fields are snake_case in Python and camelCase on the wire.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )


class UploadResultDTO(WireDTO):
    success: bool = True
    session_id: str
    message: str = "Resume uploaded successfully"
    resume_preview: str = Field(..., description="First characters of the extracted resume text")


class StartInterviewDTO(WireDTO):
    success: bool = True
    question: str
    role_name: str
    session_id: str


class AnswerResultDTO(WireDTO):
    success: bool = True
    next_question: str
    question_number: Union[int, str] = Field(
        ..., description="1-based predefined question number, or 'AI-generated'"
    )


class SessionDataDTO(WireDTO):
    file_name: str | None = None
    upload_time: str
    interview_duration: str


class FeedbackDTO(WireDTO):
    success: bool = True
    feedback: str
    role_name: str
    total_questions: int
    session_data: SessionDataDTO
