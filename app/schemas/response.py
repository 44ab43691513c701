import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field


def new_request_id() -> str:
    return uuid.uuid4().hex


class SuccessResponse(BaseModel):
    """Envelope for every successful API response."""
    success: bool = True
    request_id: str = Field(default_factory=new_request_id)
    data: Optional[Any] = None


class ErrorDetail(BaseModel):
    code: str
    message: Any
    field: Optional[str] = None
    details: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Envelope for failures; built by the exception handlers."""
    success: bool = False
    error: ErrorDetail
    request_id: str = Field(default_factory=new_request_id)


class MessageData(BaseModel):
    message: str
