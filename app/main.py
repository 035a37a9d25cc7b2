# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Appective site.
# It configures the FastAPI application with middleware, routers, handlers,
# and the static directories the site is served from.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import (
    AppectiveException,
    appective_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    banner,
    health,
    jobs,
    maintenance,
    mastheads,
    newsletter,
    pages,
    partners,
    portfolio,
    services,
    site_content,
    team,
    uploads,
)
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# HTML5 ads are rendered in iframes and load their own scripts, fonts and media
CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "script-src 'self' 'unsafe-inline' 'unsafe-eval' https:",
    "style-src 'self' 'unsafe-inline' https:",
    "img-src 'self' data: blob: https:",
    "media-src 'self' data: blob: https:",
    "font-src 'self' data: https:",
    "connect-src 'self' https:",
    "frame-src 'self' https:",
    "frame-ancestors 'self'",
])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown.
    """
    logger.info(f"Starting Appective site in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Serving public assets from {settings.public_path}")

    yield

    logger.info("Shutting down Appective site")


# Create FastAPI application
app = FastAPI(
    title="Appective Site API",
    description="""
## Appective marketing site

Public pages plus the API behind the admin dashboard.

### How It Works

1. **Sign in** - `POST /api/auth/login` with an admin account
2. **Manage content** - partners, services, team, jobs, portfolio, banner
3. **Upload assets** - images and ZIP archives of HTML5 ads via `POST /api/upload`

Reads are public. Every change needs an admin bearer token, except
job applications and newsletter sign-ups.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Admin sign-in, sign-out and status"},
        {"name": "Partners", "description": "Partner categories and logos"},
        {"name": "Services", "description": "The agency's service catalog"},
        {"name": "Team", "description": "Team members"},
        {"name": "Careers", "description": "Job openings and applications"},
        {"name": "Newsletter", "description": "Newsletter subscribers"},
        {"name": "Portfolio", "description": "Apps, games, web portals and digital marketing"},
        {"name": "Mastheads", "description": "Interactive HTML5 mastheads"},
        {"name": "Banner", "description": "Home page top banner"},
        {"name": "Uploads", "description": "Image and HTML5 ad uploads"},
        {"name": "Maintenance", "description": "HTML5 ad maintenance tools"},
        {"name": "Site Content", "description": "Contact info and social links"},
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


@app.middleware("http")
async def add_content_security_policy(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AppectiveException)
async def handle_appective_exception(request: Request, exc: AppectiveException):
    """Handle custom Appective exceptions."""
    return await appective_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Report missing or malformed request fields as 400."""
    return await validation_exception_handler(request, exc)


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

# Authentication endpoints (router carries its /auth prefix)
app.include_router(auth_routes.router, prefix="/api")

app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(partners.router, prefix="/api", tags=["Partners"])
app.include_router(services.router, prefix="/api", tags=["Services"])
app.include_router(team.router, prefix="/api", tags=["Team"])
app.include_router(jobs.router, prefix="/api", tags=["Careers"])
app.include_router(newsletter.router, prefix="/api", tags=["Newsletter"])
app.include_router(portfolio.router, prefix="/api", tags=["Portfolio"])
app.include_router(mastheads.router, prefix="/api", tags=["Mastheads"])
app.include_router(banner.router, prefix="/api", tags=["Banner"])
app.include_router(uploads.router, prefix="/api", tags=["Uploads"])
app.include_router(maintenance.router, prefix="/api", tags=["Maintenance"])
app.include_router(site_content.router, prefix="/api", tags=["Site Content"])

# Server-rendered pages
app.include_router(pages.router)


# =============================================================================
# Static Files
# =============================================================================

app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")
app.mount(
    "/uploads",
    StaticFiles(directory=settings.public_path / "uploads", check_dir=False),
    name="uploads",
)
app.mount(
    "/interactive_mastheads_zips",
    StaticFiles(directory=settings.masthead_root, html=True, check_dir=False),
    name="interactive_mastheads_zips",
)


# =============================================================================
# API Root
# =============================================================================

@app.get("/api", tags=["Root"])
async def api_root():
    """
    Returns API info.
    """
    return {
        "name": "Appective Site API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
