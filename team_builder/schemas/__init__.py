# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
Field values are never constrained: empty strings are accepted everywhere.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictStr

from team_builder.models.domain import DraftField, FormState


class FieldChangeRequest(BaseModel):
    """One keystroke-level change: overwrite `field` with `value`."""
    field: DraftField = Field(..., description="Which draft field to overwrite")
    value: StrictStr = Field(..., description="New field value, empty allowed")


class DraftResponse(BaseModel):
    name: str
    email: str
    role: str
    state: FormState


class TeamMemberResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str


class SubmitResponse(BaseModel):
    member: TeamMemberResponse
    draft: DraftResponse
    team_size: int
    members_html: str
    form_html: str


class TeamStats(BaseModel):
    team_size: int
    submissions: int
    field_changes: int
    form_state: FormState
    page_renders: int


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
