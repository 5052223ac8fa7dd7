# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the store and the service.
"""

from team_builder.core.config import settings
from team_builder.models.domain import DEFAULT_MEMBERS
from team_builder.repositories.member_store import CollectionStore
from team_builder.services.team_service import TeamService


def default_seed() -> tuple:
    return DEFAULT_MEMBERS if settings.SEED_DEFAULT_MEMBERS else ()


# ── Singleton instances (in-memory state, discarded on exit) ──
_store = CollectionStore(initial=default_seed())
_team_service = TeamService(_store, title=settings.PAGE_TITLE)


# ── FastAPI dependency functions ──
def get_team_service() -> TeamService:
    return _team_service


def get_member_store() -> CollectionStore:
    return _store
