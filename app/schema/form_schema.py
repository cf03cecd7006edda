from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.models.form_model import FormStatus
from app.exceptions.validation_exception_handler import format_errors


class FormCreate(BaseModel):
    name: str = Field(..., min_length=4)
    description: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def description_not_null(cls, value):
        # May be omitted, but an explicit null is not a description
        if value is None:
            raise ValueError("Description must be a string")
        return value


class FormContentUpdate(BaseModel):
    content: str


class SubmissionCreate(BaseModel):
    content: str


class FormValidationResult(BaseModel):
    success: bool
    data: Optional[FormCreate] = None
    errors: List[Dict[str, Any]] = []


def validate_form_input(raw: Any) -> FormValidationResult:
    """Check creation input without raising; returns the payload or the field errors."""
    try:
        data = FormCreate.model_validate(raw)
    except PydanticValidationError as e:
        return FormValidationResult(success=False, errors=format_errors(e.errors()))
    return FormValidationResult(success=True, data=data)


class FormResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: str
    description: Optional[str] = None
    content: str
    published: bool
    status: FormStatus
    visits: int
    submissions: int
    share_url: str
    share_link: Optional[str] = None
    created_at: datetime


class SubmissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    form_id: int
    content: str
    created_at: datetime


class FormWithSubmissionsResponse(FormResponse):
    form_submissions: List[SubmissionResponse] = []
