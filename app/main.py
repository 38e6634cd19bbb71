# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Sparq API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    SparqException,
    sparq_exception_handler,
    supabase_exception_handler,
    validation_exception_handler,
)
from app.routers import couples, health, invitations, psychology, questions, responses
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup and shutdown."""
    logger.info(f"Starting Sparq API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    yield
    logger.info("Shutting down Sparq API")


app = FastAPI(
    title="Sparq API",
    description="""
## Relationship Coaching API

Sparq helps couples connect through one personalized question a day.

### How It Works

1. **Register** - `POST /api/auth/register`, then sign in with Supabase Auth
2. **Invite your partner** - `POST /api/invitations`, share the 8-character code
3. **Accept** - your partner calls `POST /api/invitations/accept`
4. **Answer daily** - `GET /api/questions/daily?couple_id=...`, then `POST /api/responses`

### Safety

Every response is moderated and screened for crisis signals before it is
stored. Detected crises are logged anonymously and the client receives
support recommendations.

### Authentication

All endpoints except `/api/auth/register` and `/api/health*` require
`Authorization: Bearer <Supabase access token>`.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Registration and token verification"},
        {"name": "Couples", "description": "Couples, dashboard summary and health score"},
        {"name": "Invitations", "description": "Partner invitation codes"},
        {"name": "Questions", "description": "AI-generated daily questions"},
        {"name": "Responses", "description": "Answers to daily questions"},
        {"name": "Psychology", "description": "Profiles, assessments and compatibility"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(SparqException)
async def handle_sparq_exception(request: Request, exc: SparqException):
    """Handle known failure modes."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return await sparq_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return await validation_exception_handler(request, exc)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    """Validation of bodies parsed inside services (e.g. assessment answers)."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_error(request: Request, exc: SupabaseClientError):
    logger.error(f"Database error on {request.url.path}: {exc}")
    return await supabase_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(couples.router, prefix="/api/couples", tags=["Couples"])
app.include_router(invitations.router, prefix="/api/invitations", tags=["Invitations"])
app.include_router(questions.router, prefix="/api/questions", tags=["Questions"])
app.include_router(responses.router, prefix="/api/responses", tags=["Responses"])
app.include_router(psychology.router, prefix="/api/psychology", tags=["Psychology"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Sparq API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
