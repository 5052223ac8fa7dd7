# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Team builder application facade used by the controllers.
Wires the entry form's submit hand-off to the collection store and keeps
metrics and logs in step with every mutation.
"""

import threading
from typing import Any, Iterable, Union

from team_builder.core.logging import get_logger
from team_builder.metrics.prometheus import (
    DRAFT_FIELD_CHANGES,
    FORM_SUBMISSIONS,
    MEMBERS_ADDED,
    TEAM_SIZE,
)
from team_builder.models.domain import DraftField, TeamMember
from team_builder.repositories.member_store import CollectionStore, Snapshot
from team_builder.services.entry_form import EntryForm
from team_builder.views.entry_form import render_entry_form
from team_builder.views.member_list import render_member_list
from team_builder.views.page import TeamPage

logger = get_logger(__name__)


class TeamService:
    """Business logic for the roster page."""

    def __init__(self, store: CollectionStore, title: str = "Team Builder") -> None:
        self._store = store
        self._form = EntryForm(on_submit_draft=self._store.append)
        self._page = TeamPage(self._store, self._form, title=title)
        self._lock = threading.Lock()
        self._field_changes = 0
        self._submissions = 0
        self._store.subscribe(self._on_members)
        TEAM_SIZE.set(self._store.count())

    # ── Accessors ──

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def form(self) -> EntryForm:
        return self._form

    @property
    def page(self) -> TeamPage:
        return self._page

    # ── Commands ──

    def change_field(self, field: Union[DraftField, str], value: str) -> dict[str, Any]:
        """Apply one keystroke-level change. Returns the draft and form state as of this change."""
        with self._lock:
            self._form.on_field_change(field, value)
            self._field_changes += 1
            result = {"draft": self._form.draft, "state": self._form.state}
        DRAFT_FIELD_CHANGES.labels(field=DraftField(field).value).inc()
        logger.info("Draft field changed: field=%s, length=%d", DraftField(field).value, len(value))
        return result

    def submit(self) -> dict[str, Any]:
        """Submit the draft as-is.

        Returns the appended member together with the roster snapshot, the
        reset draft and the form state captured in the same critical section,
        so the caller never pairs this member with a later append.
        """
        with self._lock:
            self._form.on_submit()
            result = {
                "member": self._store.last_appended,
                "members": self._store.members,
                "draft": self._form.draft,
                "state": self._form.state,
            }
            self._submissions += 1
        member = result["member"]
        FORM_SUBMISSIONS.inc()
        MEMBERS_ADDED.inc()
        logger.info("Team member added: id=%d, name=%r, role=%r", member.id, member.name, member.role)
        return result

    def reset(self, initial: Iterable[TeamMember] = ()) -> None:
        """Restore a seed roster and an empty draft."""
        with self._lock:
            self._store.reset(initial)
            self._form.reset()
            self._field_changes = 0
            self._submissions = 0
        logger.info("Roster reset: members=%d", self._store.count())

    # ── Queries ──

    def list_members(self) -> Snapshot:
        return self._store.members

    def get_draft(self) -> dict[str, Any]:
        with self._lock:
            return {"draft": self._form.draft, "state": self._form.state}

    def render_page(self) -> str:
        return self._page.html

    def render_members(self) -> str:
        return render_member_list(self._store.members)

    def render_form(self) -> str:
        return render_entry_form(self._form.draft)

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "team_size": self._store.count(),
                "submissions": self._submissions,
                "field_changes": self._field_changes,
                "form_state": self._form.state.value,
                "page_renders": self._page.render_count,
            }

    # ── Subscriptions ──

    def _on_members(self, members: Snapshot) -> None:
        TEAM_SIZE.set(len(members))
