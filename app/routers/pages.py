# =============================================================================
# app/routers/pages.py - Server-Rendered Pages
# =============================================================================
# The public marketing site and the admin dashboard shell.
#
# The home page reads every content table at request time. A section whose
# query fails is rendered empty so one broken table never takes the page down.
# =============================================================================

import logging
from pathlib import Path
from typing import Any, Callable

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.exceptions import AppectiveException
from core.services.banner_service import BannerService
from core.services.catalog_service import CatalogService
from core.services.job_service import JobOpeningService
from core.services.partner_service import PartnerService
from core.services.portfolio_service import (
    AppItemService,
    DigitalMarketingService,
    GameService,
    MastheadService,
    WebPortalService,
)
from core.services.site_content_service import SiteContentService
from core.services.team_service import TeamService

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _load_section(name: str, loader: Callable[[], Any], default: Any) -> Any:
    try:
        return loader()
    except (AppectiveException, OSError, ValueError) as e:
        logger.warning(f"Home page section '{name}' failed to load: {e}")
        return default


def _home_context() -> dict[str, Any]:
    sections: dict[str, tuple[Callable[[], Any], Any]] = {
        "banner": (BannerService.get_banner, {"image_url": None, "target_url": None}),
        "partners": (PartnerService.get_overview, []),
        "services": (CatalogService.list_records, []),
        "team": (TeamService.list_members, []),
        "jobs": (JobOpeningService.list_records, []),
        "apps": (AppItemService.list_records, []),
        "games": (GameService.list_records, []),
        "web_portals": (WebPortalService.list_records, []),
        "digital_marketing": (DigitalMarketingService.list_records, []),
        "mastheads": (MastheadService.list_records, []),
        "contact_info": (SiteContentService.get_contact_info, []),
        "social_links": (SiteContentService.get_social_links, []),
    }
    return {
        name: _load_section(name, loader, default)
        for name, (loader, default) in sections.items()
    }


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", _home_context())


@router.get("/interactive-mastheads", response_class=HTMLResponse, include_in_schema=False)
async def interactive_mastheads(request: Request):
    mastheads = _load_section("mastheads", MastheadService.list_records, [])
    return templates.TemplateResponse(
        request, "interactive_mastheads.html", {"mastheads": mastheads}
    )


@router.get("/privacy-policy", response_class=HTMLResponse, include_in_schema=False)
async def privacy_policy(request: Request):
    return templates.TemplateResponse(request, "privacy_policy.html", {})


@router.get("/terms-of-service", response_class=HTMLResponse, include_in_schema=False)
async def terms_of_service(request: Request):
    return templates.TemplateResponse(request, "terms_of_service.html", {})


@router.get("/cookie-policy", response_class=HTMLResponse, include_in_schema=False)
async def cookie_policy(request: Request):
    return templates.TemplateResponse(request, "cookie_policy.html", {})


@router.get("/admin", response_class=HTMLResponse, include_in_schema=False)
async def admin_dashboard(request: Request):
    """
    Dashboard shell. Authentication happens client-side against /api/auth;
    every panel loads its data through the admin-gated API.
    """
    return templates.TemplateResponse(request, "admin.html", {})
