from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# --- Request Schemas ---
# Every field is optional so that a missing value reaches the service and is
# answered with the domain message ("Invalid session ID", ...) instead of a 422.

class _CamelRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class StartInterviewRequest(_CamelRequest):
    session_id: Optional[str] = Field(None, alias="sessionId")
    role_key: Optional[str] = Field(None, alias="roleKey")


class SubmitAnswerRequest(_CamelRequest):
    session_id: Optional[str] = Field(None, alias="sessionId")
    user_answer: Optional[str] = Field(None, alias="userAnswer")


class FeedbackRequest(_CamelRequest):
    session_id: Optional[str] = Field(None, alias="sessionId")


# --- Response Schemas ---

class ErrorResponse(BaseModel):
    error: str


class RoleSchema(BaseModel):
    name: str
    skills: list[str]
    questionTypes: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
