# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DraftField(str, Enum):
    """The three free-text fields of the add-member form."""
    NAME = "name"
    EMAIL = "email"
    ROLE = "role"


class FormState(str, Enum):
    CLEAN = "clean"
    EDITING = "editing"


class TeamMember(BaseModel):
    """A finalized, id-bearing record in the team collection."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    role: str


class Draft(BaseModel):
    """In-progress candidate record owned by the entry form. Never has an id."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    email: str = ""
    role: str = ""

    def replace(self, field: DraftField, value: str) -> "Draft":
        """Copy of this draft with exactly one field replaced."""
        return self.model_copy(update={DraftField(field).value: value})


# Seed roster shown on first load.
DEFAULT_MEMBERS: tuple[TeamMember, ...] = (
    TeamMember(id=1, name="Amy", email="amy@email.com", role="UI/UX Designer"),
    TeamMember(id=2, name="Bob", email="bob@email.com", role="Marketer"),
    TeamMember(id=3, name="Chris", email="chris@email.com", role="Front-End Developer"),
)
