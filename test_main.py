# type: ignore
"""
Tests for the Team Builder service.
Covers the page, the draft/submit API, system endpoints and middleware.

Run:  pytest test_main.py -v --cov=team_builder --cov-report=term-missing
"""
import re
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from main import app
from team_builder.core.dependencies import get_team_service
from team_builder.models.domain import DEFAULT_MEMBERS
from team_builder.services.team_service import TeamService

client = TestClient(app, raise_server_exceptions=False)


def _keys(html: str) -> list[int]:
    return [int(k) for k in re.findall(r'data-key="(\d+)"', html)]


def _type(field: str, value: str):
    return client.patch("/api/v1/draft", json={"field": field, "value": value})


# ============================================
# Fixtures
# ============================================
@pytest.fixture(autouse=True)
def reset_state():
    """Restore the seeded roster and an empty draft before each test."""
    get_team_service().reset(DEFAULT_MEMBERS)
    yield


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ══════════════════════════════════════════════════════════════════════════
# HEALTH & OPS ENDPOINTS
# ══════════════════════════════════════════════════════════════════════════
class TestHealth:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["service"] == "team-builder"
        assert data["members_count"] == 3

    def test_readiness(self):
        resp = client.get("/health/ready")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ready"

    def test_metrics_endpoint(self):
        _type("name", "Dana")
        client.post("/api/v1/draft/submit")
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert "team_builder_members_added_total" in resp.text
        assert "team_builder_team_size" in resp.text


# ══════════════════════════════════════════════════════════════════════════
# MIDDLEWARE & ERRORS
# ══════════════════════════════════════════════════════════════════════════
class TestMiddleware:
    def test_request_id_auto_generated(self):
        resp = client.get("/health")
        assert "x-request-id" in resp.headers

    def test_request_id_forwarded(self):
        resp = client.get("/api/v1/members", headers={"X-Request-ID": "my-req-id"})
        assert resp.headers["x-request-id"] == "my-req-id"

    def test_unknown_route_returns_404(self):
        assert client.get("/api/v1/nonexistent").status_code == 404

    def test_metrics_labelled_by_route_template(self):
        client.get("/api/v1/members")
        client.get("/api/v1/no-such-thing")
        text = client.get("/metrics").text
        assert 'endpoint="/api/v1/members"' in text
        assert 'endpoint="unmatched"' in text
        assert "no-such-thing" not in text

    def test_unhandled_exception_returns_500(self):
        with patch.object(TeamService, "list_members", side_effect=RuntimeError("boom")):
            resp = client.get("/api/v1/members")
        assert resp.status_code == 500
        assert resp.json()["error"] == "internal_server_error"


# ══════════════════════════════════════════════════════════════════════════
# PAGE
# ══════════════════════════════════════════════════════════════════════════
class TestPage:
    def test_index_renders_seeded_roster_and_form(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        html = resp.text
        assert "<h1>Team Builder</h1>" in html
        assert _keys(html) == [1, 2, 3]
        assert "<h2>Add a Team Member</h2>" in html

    def test_form_submission_never_navigates(self):
        html = client.get("/").text
        assert 'onsubmit="teamBuilder.submit(event)"' in html
        assert "event.preventDefault()" in html
        assert "action=" not in html

    def test_page_carries_sync_status_region(self):
        html = client.get("/").text
        assert 'id="sync-status"' in html
        assert 'getElementById("entry-form").outerHTML' not in html

    def test_index_reflects_draft(self):
        _type("email", "dana@email.com")
        html = client.get("/").text
        assert 'name="email" type="email" value="dana@email.com"' in html

    def test_members_fragment(self):
        resp = client.get("/fragments/members")
        assert resp.status_code == 200
        assert _keys(resp.text) == [1, 2, 3]

    def test_form_fragment(self):
        _type("role", "Engineer")
        resp = client.get("/fragments/form")
        assert 'value="Engineer"' in resp.text

    def test_empty_roster_renders_empty_list(self):
        get_team_service().reset(())
        assert _keys(client.get("/").text) == []


# ══════════════════════════════════════════════════════════════════════════
# DRAFT
# ══════════════════════════════════════════════════════════════════════════
class TestDraft:
    def test_initial_draft_is_clean(self):
        resp = client.get("/api/v1/draft")
        assert resp.json() == {"name": "", "email": "", "role": "", "state": "clean"}

    @pytest.mark.parametrize("field", ["name", "email", "role"])
    def test_field_change_overwrites_only_that_field(self, field):
        _type("name", "seed")
        resp = _type(field, "typed")
        assert resp.status_code == 200
        data = resp.json()
        assert data[field] == "typed"
        assert data["state"] == "editing"
        for other in {"name", "email", "role"} - {field}:
            assert data[other] == ("seed" if other == "name" else "")

    def test_each_keystroke_replaces_value(self):
        for prefix in ("D", "Da", "Dan", "Dana"):
            _type("name", prefix)
        assert client.get("/api/v1/draft").json()["name"] == "Dana"

    def test_empty_value_accepted(self):
        _type("name", "x")
        resp = _type("name", "")
        assert resp.status_code == 200
        assert resp.json()["name"] == ""
        assert resp.json()["state"] == "editing"

    def test_unknown_field_rejected(self):
        assert _type("id", "5").status_code == 422

    def test_missing_value_rejected(self):
        resp = client.patch("/api/v1/draft", json={"field": "name"})
        assert resp.status_code == 422

    def test_non_string_value_rejected(self):
        resp = client.patch("/api/v1/draft", json={"field": "name", "value": 5})
        assert resp.status_code == 422


# ══════════════════════════════════════════════════════════════════════════
# SUBMIT
# ══════════════════════════════════════════════════════════════════════════
class TestSubmit:
    def test_dana_scenario(self):
        _type("name", "Dana")
        _type("email", "dana@email.com")
        _type("role", "Engineer")
        resp = client.post("/api/v1/draft/submit")
        assert resp.status_code == 200
        data = resp.json()

        member = data["member"]
        assert (member["name"], member["email"], member["role"]) == ("Dana", "dana@email.com", "Engineer")
        assert member["id"] not in {1, 2, 3}
        assert data["team_size"] == 4
        assert data["draft"] == {"name": "", "email": "", "role": "", "state": "clean"}
        assert _keys(data["members_html"]) == [1, 2, 3, member["id"]]
        assert data["form_html"].count('value=""') == 3

        members = client.get("/api/v1/members").json()
        assert [m["name"] for m in members] == ["Amy", "Bob", "Chris", "Dana"]
        assert members[3] == member
        assert _keys(client.get("/").text) == [1, 2, 3, member["id"]]

    def test_empty_submit_appends_empty_member(self):
        resp = client.post("/api/v1/draft/submit")
        member = resp.json()["member"]
        assert (member["name"], member["email"], member["role"]) == ("", "", "")
        assert resp.json()["team_size"] == 4

    def test_double_submit_appends_twice_with_distinct_ids(self):
        _type("name", "Dana")
        first = client.post("/api/v1/draft/submit").json()["member"]
        second = client.post("/api/v1/draft/submit").json()["member"]
        assert first["name"] == "Dana"
        assert second["name"] == ""
        assert first["id"] != second["id"]
        assert len(client.get("/api/v1/members").json()) == 5

    def test_many_submits_keep_order_and_unique_ids(self):
        names = [f"member-{i}" for i in range(10)]
        for n in names:
            _type("name", n)
            client.post("/api/v1/draft/submit")
        members = client.get("/api/v1/members").json()
        assert [m["name"] for m in members[3:]] == names
        ids = [m["id"] for m in members]
        assert len(set(ids)) == len(ids)

    def test_keystroke_after_submit_stays_bound_to_server_draft(self):
        _type("name", "Dana")
        # Order the server sees when a keystroke lands while a submit is in flight.
        responses = [client.post("/api/v1/draft/submit").json(), _type("name", "x").json()]
        newest = responses[-1].get("draft", responses[-1])

        server = client.get("/api/v1/draft").json()
        assert newest == server
        assert server["name"] == "x"
        assert 'name="name" type="text" value="x"' in client.get("/fragments/form").text

        member = client.post("/api/v1/draft/submit").json()["member"]
        assert member["name"] == "x"

    def test_response_pairs_member_with_its_own_snapshot(self):
        original = TeamService.submit

        def interleaved(self):
            result = original(self)
            original(self)
            return result

        _type("name", "Dana")
        with patch.object(TeamService, "submit", interleaved):
            data = client.post("/api/v1/draft/submit").json()

        assert data["member"]["name"] == "Dana"
        assert data["team_size"] == 4
        assert _keys(data["members_html"])[-1] == data["member"]["id"]
        assert len(client.get("/api/v1/members").json()) == 5

    def test_stats(self):
        _type("name", "Dana")
        _type("role", "Engineer")
        client.post("/api/v1/draft/submit")
        data = client.get("/api/v1/stats").json()
        assert data["team_size"] == 4
        assert data["submissions"] == 1
        assert data["field_changes"] == 2
        assert data["form_state"] == "clean"
        assert data["page_renders"] >= 4


# ══════════════════════════════════════════════════════════════════════════
# ASYNC CLIENT
# ══════════════════════════════════════════════════════════════════════════
@pytest.mark.anyio
async def test_async_type_then_submit(async_client: AsyncClient):
    await async_client.patch("/api/v1/draft", json={"field": "name", "value": "Eve"})
    resp = await async_client.post("/api/v1/draft/submit")
    assert resp.status_code == 200
    assert resp.json()["member"]["name"] == "Eve"


@pytest.mark.anyio
async def test_async_members_listing(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/members")
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == [1, 2, 3]
