# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: HTML page and fragment endpoints.
Thin HTTP layer. Rendering lives in the views, state in TeamService.
"""

from fastapi import APIRouter, Depends
from starlette.responses import HTMLResponse

from team_builder.core.dependencies import get_team_service
from team_builder.metrics.prometheus import PAGE_VIEWS
from team_builder.services.team_service import TeamService

router = APIRouter(tags=["Page"])


@router.get("/", response_class=HTMLResponse)
def index(service: TeamService = Depends(get_team_service)):
    """The single page: roster list plus add-member form."""
    PAGE_VIEWS.labels(page="index").inc()
    return HTMLResponse(service.render_page())


@router.get("/fragments/members", response_class=HTMLResponse)
def members_fragment(service: TeamService = Depends(get_team_service)):
    PAGE_VIEWS.labels(page="members").inc()
    return HTMLResponse(service.render_members())


@router.get("/fragments/form", response_class=HTMLResponse)
def form_fragment(service: TeamService = Depends(get_team_service)):
    PAGE_VIEWS.labels(page="form").inc()
    return HTMLResponse(service.render_form())
