"""
FreelanceHub — FastAPI Application Entry Point

Registers all routers, applies middleware, and serves the API.
"""

import logging
import contextlib
import traceback
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from freelancehub.config import settings
from freelancehub.domain.errors import (
    CrudError,
    DuplicateRecordError,
    MissingRecordIdError,
    RecordNotFoundError,
)
from freelancehub.routers import collections, freelancers, jobs, members, metrics, reputation
from freelancehub.services.auth_service import MemberSessions

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 %s is starting up (record store: %s)", settings.app_name, settings.record_store.value)
    app.state.member_sessions = MemberSessions()
    yield
    # Shutdown
    app.state.member_sessions.clear()
    logger.info("🛑 %s is shutting down", settings.app_name)


# ── App factory ───────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    description=(
        "Freelance marketplace — directory, job board, proposals, "
        "client metrics and a portable reputation ledger."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# ── Data-access errors ───────────────────────────────────────
# BaseCrudService has already logged these; map them to HTTP status codes.
@app.exception_handler(CrudError)
async def crud_exception_handler(request: Request, exc: CrudError):
    cause = exc.__cause__
    if isinstance(exc, MissingRecordIdError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(cause, RecordNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(cause, DuplicateRecordError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_502_BAD_GATEWAY
    return JSONResponse(status_code=code, content={"detail": str(exc)})


# ── Global Exception Handler ─────────────────────────────────
# Ensures ALL unhandled errors return proper JSON with CORS headers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {type(exc).__name__}"},
    )


# ── Routers ───────────────────────────────────────────────────
app.include_router(collections.router)
app.include_router(freelancers.router)
app.include_router(jobs.router)
app.include_router(metrics.router)
app.include_router(reputation.router)
app.include_router(members.router)


# ── Health Check ──────────────────────────────────────────────
@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "service": settings.app_name}
