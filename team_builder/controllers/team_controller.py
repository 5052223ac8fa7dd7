# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Roster and draft endpoints.
Thin HTTP layer — delegates ALL logic to TeamService.
"""

from typing import Any

from fastapi import APIRouter, Depends

from team_builder.core.dependencies import get_team_service
from team_builder.schemas import (
    DraftResponse,
    FieldChangeRequest,
    SubmitResponse,
    TeamMemberResponse,
    TeamStats,
)
from team_builder.services.team_service import TeamService
from team_builder.views.entry_form import render_entry_form
from team_builder.views.member_list import render_member_list

router = APIRouter(prefix="/api/v1", tags=["Team"])


def _draft_response(result: dict[str, Any]) -> DraftResponse:
    draft = result["draft"]
    return DraftResponse(
        name=draft.name, email=draft.email, role=draft.role,
        state=result["state"],
    )


@router.get("/members", response_model=list[TeamMemberResponse])
def list_members(service: TeamService = Depends(get_team_service)):
    """Current roster, in insertion order."""
    return [m.model_dump() for m in service.list_members()]


@router.get("/draft", response_model=DraftResponse)
def get_draft(service: TeamService = Depends(get_team_service)):
    return _draft_response(service.get_draft())


@router.patch("/draft", response_model=DraftResponse)
def change_draft_field(
    payload: FieldChangeRequest,
    service: TeamService = Depends(get_team_service),
):
    """Overwrite one draft field; the other two are left untouched."""
    return _draft_response(service.change_field(payload.field, payload.value))


@router.post("/draft/submit", response_model=SubmitResponse)
def submit_draft(service: TeamService = Depends(get_team_service)):
    """Append the draft as a new member, then reset the draft."""
    result = service.submit()
    members = result["members"]
    return SubmitResponse(
        member=TeamMemberResponse(**result["member"].model_dump()),
        draft=_draft_response(result),
        team_size=len(members),
        members_html=render_member_list(members),
        form_html=render_entry_form(result["draft"]),
    )


@router.get("/stats", response_model=TeamStats)
def get_stats(service: TeamService = Depends(get_team_service)):
    return service.get_stats()
