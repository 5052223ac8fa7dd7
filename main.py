# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Team Builder Service
====================
Serves a single page listing the team's members next to a form for adding
new ones. All state lives in memory and is discarded on exit.

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from team_builder.controllers import page_controller, system_controller, team_controller
from team_builder.core.config import settings
from team_builder.core.dependencies import get_team_service
from team_builder.core.logging import get_logger
from team_builder.middleware import MetricsMiddleware, RequestIDMiddleware
from team_builder.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log startup and shutdown."""
    service = get_team_service()
    logger.info("Team builder starting: %d members seeded", service.store.count())
    yield
    logger.info("Team builder shutting down: %d members in roster", service.store.count())


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Team Builder",
    description="Single-page team roster with an add-member form.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(page_controller.router)
app.include_router(team_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
