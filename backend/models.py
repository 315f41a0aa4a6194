"""
Pydantic API Models

Request/response models for the backend API.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Literal


class SubmissionRequest(BaseModel):
    """Raw values submitted on a settings form."""
    fullname: str = Field("", description="Full name")
    phone: str = Field("", description="Phone number")
    email: str = Field("", description="Email address")
    gender: Optional[Literal["male", "female"]] = Field(None, description="Gender")


class FieldValidationError(BaseModel):
    """One failed validation rule."""
    field: Optional[str] = None
    message: str
    kind: str


class StatusMessage(BaseModel):
    type: str
    message: str


class SubmissionResponse(BaseModel):
    """Outcome of a form submission."""
    form_id: str
    valid: bool
    errors: List[FieldValidationError] = []
    messages: List[StatusMessage] = []


class FieldValidationRequest(BaseModel):
    """Current value of a field being validated live."""
    value: str = Field("", description="Field value")


class FieldValidationResponse(BaseModel):
    """Message for one field, addressed by its element selector."""
    field: str
    selector: str
    valid: bool
    message: str


class FormConfigResponse(BaseModel):
    """Values stored under a form's configuration name."""
    form_id: str
    config_name: str
    values: Dict[str, Any] = {}


class LoginLinkRequest(BaseModel):
    """Request a one-time login link for a user."""
    user_id: Optional[int] = Field(None, description="User id")


class LoginLinkResponse(BaseModel):
    message: str
    link: Optional[str] = None


class LoginLinkVerifyResponse(BaseModel):
    status: str = "valid"
    uid: int
    name: str


class GreetingResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    forms_loaded: int = 0
