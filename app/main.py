# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the CivicMoncho API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import CivicException, civic_exception_handler
from app.routers import (
    approvals,
    certificates,
    events,
    health,
    notifications,
    polls,
    projects,
    site,
    threads,
)
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup logs the environment and CORS origins; the Supabase client is
    created lazily on first use.
    """
    logger.info(f"Starting CivicMoncho API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down CivicMoncho API")


# Create FastAPI application
app = FastAPI(
    title="CivicMoncho API",
    description="""
## Civic Engagement API

Citizens browse government projects, vote on them, take part in events,
discuss in threads, receive notifications for their thana and download
participation certificates. Governmental users publish and moderate content
and approve new accounts.

### Once-per-user actions

| Endpoint | Undo | Counter |
|----------|------|---------|
| `POST /api/projects/{id}/upvote` | `/unvote` | `upvotes` |
| `POST /api/polls/{id}/vote` | `/unvote` | `upvotes` |
| `POST /api/events/{id}/volunteer` | `/unvolunteer` | `volunteers` |
| `POST /api/events/{id}/going` | `/notgoing` | `going` |
| `POST /api/events/{id}/helpful` | `/unhelpful` | `helpful` |
| `POST /api/threads/{id}/like` | `/unlike` | `likes` |

A repeated action answers 409, undoing something never done answers 404,
and joining an event whose date has passed answers 400.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Registration, login and the current session",
        },
        {
            "name": "Approvals",
            "description": "Review pending registrations (governmental)",
        },
        {
            "name": "Projects",
            "description": "Government projects and upvotes",
        },
        {
            "name": "Polls",
            "description": "Top projects shown as home page polls",
        },
        {
            "name": "Events",
            "description": "Events, participation and proposals",
        },
        {
            "name": "Threads",
            "description": "Discussion threads, comments and likes",
        },
        {
            "name": "Notifications",
            "description": "Thana-targeted and countrywide notifications",
        },
        {
            "name": "Site",
            "description": "About us, contact info and the contact form",
        },
        {
            "name": "Certificates",
            "description": "Finished events and participation certificates",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - the browser client sends the session cookie, so origins
# must be explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log `METHOD path status in Nms` for every /api request."""
    start = time.perf_counter()
    response = await call_next(request)

    if request.url.path.startswith("/api"):
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} in {duration_ms}ms"
        )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(CivicException)
async def handle_civic_exception(request: Request, exc: CivicException):
    """Handle domain exceptions (401/403/404/409/400)."""
    return await civic_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Registration approvals
app.include_router(
    approvals.router,
    prefix="/api/approvals",
    tags=["Approvals"]
)

# Projects and polls
app.include_router(
    projects.router,
    prefix="/api/projects",
    tags=["Projects"]
)

app.include_router(
    polls.router,
    prefix="/api/polls",
    tags=["Polls"]
)

# Events
app.include_router(
    events.router,
    prefix="/api/events",
    tags=["Events"]
)

# Threads
app.include_router(
    threads.router,
    prefix="/api/threads",
    tags=["Threads"]
)

# Notifications
app.include_router(
    notifications.router,
    prefix="/api/notifications",
    tags=["Notifications"]
)

# About us / contact
app.include_router(
    site.router,
    prefix="/api",
    tags=["Site"]
)

# Finished events and certificates
app.include_router(
    certificates.router,
    prefix="/api",
    tags=["Certificates"]
)

# Health check endpoints (/health and /api/health/ready)
app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "CivicMoncho API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
