# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .asset_service import AssetService
from .banner_service import BannerService
from .base import RecordService
from .catalog_service import CatalogService
from .job_service import JobApplicationService, JobOpeningService
from .newsletter_service import NewsletterService
from .partner_service import PartnerCategoryService, PartnerLogoService, PartnerService
from .portfolio_service import (
    AppItemService,
    DigitalMarketingService,
    GameService,
    MastheadService,
    WebPortalService,
)
from .site_content_service import SiteContentService
from .storage_service import StorageService
from .team_service import TeamService

__all__ = [
    "AssetService",
    "BannerService",
    "RecordService",
    "CatalogService",
    "JobApplicationService",
    "JobOpeningService",
    "NewsletterService",
    "PartnerCategoryService",
    "PartnerLogoService",
    "PartnerService",
    "AppItemService",
    "DigitalMarketingService",
    "GameService",
    "MastheadService",
    "WebPortalService",
    "SiteContentService",
    "StorageService",
    "TeamService",
]
