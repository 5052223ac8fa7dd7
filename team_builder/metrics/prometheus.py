# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "team_builder_requests_total",
    "Total HTTP requests to the team builder",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "team_builder_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "team_builder_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_ADDED = Counter(
    "team_builder_members_added_total",
    "Total team members appended to the roster",
)
TEAM_SIZE = Gauge(
    "team_builder_team_size",
    "Number of team members currently in the roster",
)
DRAFT_FIELD_CHANGES = Counter(
    "team_builder_draft_field_changes_total",
    "Total field changes applied to the form draft",
    ["field"],
)
FORM_SUBMISSIONS = Counter(
    "team_builder_form_submissions_total",
    "Total add-member form submissions",
)
PAGE_VIEWS = Counter(
    "team_builder_page_views_total",
    "Total page and fragment views",
    ["page"],
)
