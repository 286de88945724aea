from typing import Any
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for every DTO (Data Transfer Object) in the MIW project.

    Features:
        - from_attributes=True (build from plain objects / dataclasses)
        - populate_by_name=True (camelCase aliases on the wire, snake_case in code)
    """
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True
    )


# -------------------------------------------------------------------------
# PDF Provider DTOs
# -------------------------------------------------------------------------
class PDFPageDTO(BaseDTO):
    page_number: int
    text: str

class PDFExtractionResultDTO(BaseDTO):
    full_text: str
    pages: list[PDFPageDTO]
    metadata: dict[str, Any]
