# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""View: read-only projection of the roster to an HTML fragment."""

from html import escape
from typing import Iterable

from team_builder.models.domain import TeamMember


def render_member(member: TeamMember) -> str:
    return (
        f'<div class="team-member" data-key="{member.id}">'
        f"<h2>{escape(member.name)}</h2>"
        f"<p><strong>Email:</strong> {escape(member.email)}</p>"
        f"<p><strong>Role:</strong> {escape(member.role)}</p>"
        "</div>"
    )


def render_member_list(members: Iterable[TeamMember]) -> str:
    """One block per member, in collection order, keyed by member id."""
    body = "".join(render_member(m) for m in members)
    return f'<div class="team-member-list" id="team-member-list">{body}</div>'
