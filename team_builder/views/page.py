# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
View: full single-page document.
Composes the roster list and the entry form. The inline script intercepts
form submission, forwards keystrokes and submits to the JSON API in event
order, and swaps the re-rendered fragments in place of the old ones.
"""

from html import escape
from typing import Iterable

from team_builder.models.domain import Draft, TeamMember
from team_builder.repositories.member_store import CollectionStore, Snapshot
from team_builder.services.entry_form import EntryForm
from team_builder.views.entry_form import render_entry_form
from team_builder.views.member_list import render_member_list

PAGE_STYLE = """
    * { box-sizing: border-box; }
    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
        margin: 0;
        padding: 2rem;
    }
    .App { text-align: center; }
    .container {
        display: flex;
        justify-content: center;
        gap: 2rem;
        text-align: left;
    }
    .team-member {
        border: 1px solid #cbd5e1;
        border-radius: 0.5rem;
        padding: 0.5rem 1rem;
        margin-bottom: 1rem;
    }
    .form form { display: flex; flex-direction: column; gap: 0.5rem; }
"""

# Requests are chained so the server sees handlers in the order the browser fired them.
# Inputs are re-bound to the server's draft only once the queue drains, from the
# newest response, so a keystroke typed while a submit is in flight is never hidden.
# A failed link is reported and the chain carries on with the next request.
PAGE_SCRIPT = """
    const teamBuilder = {
        queue: Promise.resolve(),
        pending: 0,
        latestDraft: null,
        send(method, url, body) {
            const options = { method, headers: { "Content-Type": "application/json" } };
            if (body !== undefined) { options.body = JSON.stringify(body); }
            this.pending += 1;
            const request = this.queue
                .then(() => fetch(url, options))
                .then((resp) => {
                    if (!resp.ok) { throw new Error(method + " " + url + " returned " + resp.status); }
                    return resp.json();
                });
            this.queue = request
                .then((data) => {
                    this.latestDraft = data.draft || data;
                    this.report("");
                }, (error) => {
                    this.report("Could not save your changes: " + error.message);
                })
                .then(() => {
                    this.pending -= 1;
                    if (this.pending === 0 && this.latestDraft) { this.bind(this.latestDraft); }
                });
            return request;
        },
        bind(draft) {
            for (const field of ["name", "email", "role"]) {
                const input = document.getElementById(field);
                if (input && input.value !== draft[field]) { input.value = draft[field]; }
            }
        },
        report(message) {
            const status = document.getElementById("sync-status");
            if (status) { status.textContent = message; }
        },
        change(event) {
            const { name, value } = event.target;
            this.send("PATCH", "/api/v1/draft", { field: name, value: value }).catch(() => {});
        },
        submit(event) {
            event.preventDefault();
            this.send("POST", "/api/v1/draft/submit").then((data) => {
                document.getElementById("team-member-list").outerHTML = data.members_html;
            }).catch(() => {});
        },
    };
"""


def render_page(members: Iterable[TeamMember], draft: Draft, title: str = "Team Builder") -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="UTF-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
        f"<title>{escape(title)}</title>"
        f"<style>{PAGE_STYLE}</style>"
        "</head>"
        "<body>"
        '<div class="App">'
        f"<h1>{escape(title)}</h1>"
        '<div class="container">'
        + render_member_list(members)
        + render_entry_form(draft)
        + "</div>"
        '<p class="sync-status" id="sync-status" role="status"></p>'
        "</div>"
        f"<script>{PAGE_SCRIPT}</script>"
        "</body>"
        "</html>"
    )


class TeamPage:
    """Re-derives the page from the latest store and form snapshots on every change."""

    def __init__(self, store: CollectionStore, form: EntryForm, title: str = "Team Builder") -> None:
        self._title = title
        self._members: Snapshot = store.members
        self._draft: Draft = form.draft
        self.render_count = 0
        self.html = ""
        self._render()
        self._unsubscribe = [
            store.subscribe(self._on_members),
            form.subscribe(self._on_draft),
        ]

    def _on_members(self, members: Snapshot) -> None:
        self._members = members
        self._render()

    def _on_draft(self, draft: Draft) -> None:
        self._draft = draft
        self._render()

    def _render(self) -> None:
        self.html = render_page(self._members, self._draft, self._title)
        self.render_count += 1

    def close(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
