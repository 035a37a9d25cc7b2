# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - partner.py: Partner categories and logos
# - service.py: Agency services
# - team.py: Team members
# - job.py: Job openings and applications
# - newsletter.py: Newsletter subscribers
# - portfolio.py: Apps, games, web portals, digital marketing
# - masthead.py: Interactive HTML5 mastheads
# - banner.py: Top banner
# - site_content.py: Contact info and social links
# - upload.py: Upload and maintenance results
# - update.py: Base for partial (PUT) updates
#
# These models define the "contract" between API and clients.
# =============================================================================

from .banner import (
    BANNER_DEFAULTS,
    BANNER_ROW_ID,
    BannerUpdateResponse,
    BannerUploadResponse,
    TopBannerResponse,
)
from .job import (
    ApplicationStatus,
    JobApplicationCreate,
    JobApplicationResponse,
    JobApplicationStatusUpdate,
    JobOpeningCreate,
    JobOpeningResponse,
    JobOpeningUpdate,
)
from .masthead import MastheadCreate, MastheadResponse, MastheadUpdate
from .newsletter import (
    NewsletterDeleteRequest,
    NewsletterDeleteResponse,
    NewsletterSubscribe,
    NewsletterSubscriberResponse,
)
from .partner import (
    PartnerCategoryCreate,
    PartnerCategoryResponse,
    PartnerCategoryUpdate,
    PartnerCategoryWithLogos,
    PartnerLogoCreate,
    PartnerLogoResponse,
    PartnerLogoUpdate,
)
from .portfolio import (
    AppItemCreate,
    AppItemResponse,
    AppItemUpdate,
    DigitalMarketingCreate,
    DigitalMarketingResponse,
    DigitalMarketingUpdate,
    GameCreate,
    GameResponse,
    GameUpdate,
    WebPortalCreate,
    WebPortalResponse,
    WebPortalUpdate,
)
from .service import ServiceCreate, ServiceResponse, ServiceUpdate
from .site_content import ContactInfoItem, SocialLink
from .team import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from .upload import (
    CleanupRequest,
    CleanupResponse,
    ExtractZipsResponse,
    FixContentTypesResponse,
    MastheadFileCheck,
    UploadKind,
    UploadResponse,
)

__all__ = [
    # Banner
    "BANNER_DEFAULTS",
    "BANNER_ROW_ID",
    "BannerUpdateResponse",
    "BannerUploadResponse",
    "TopBannerResponse",
    # Jobs
    "ApplicationStatus",
    "JobApplicationCreate",
    "JobApplicationResponse",
    "JobApplicationStatusUpdate",
    "JobOpeningCreate",
    "JobOpeningResponse",
    "JobOpeningUpdate",
    # Mastheads
    "MastheadCreate",
    "MastheadResponse",
    "MastheadUpdate",
    # Newsletter
    "NewsletterDeleteRequest",
    "NewsletterDeleteResponse",
    "NewsletterSubscribe",
    "NewsletterSubscriberResponse",
    # Partners
    "PartnerCategoryCreate",
    "PartnerCategoryResponse",
    "PartnerCategoryUpdate",
    "PartnerCategoryWithLogos",
    "PartnerLogoCreate",
    "PartnerLogoResponse",
    "PartnerLogoUpdate",
    # Portfolio
    "AppItemCreate",
    "AppItemResponse",
    "AppItemUpdate",
    "DigitalMarketingCreate",
    "DigitalMarketingResponse",
    "DigitalMarketingUpdate",
    "GameCreate",
    "GameResponse",
    "GameUpdate",
    "WebPortalCreate",
    "WebPortalResponse",
    "WebPortalUpdate",
    # Services
    "ServiceCreate",
    "ServiceResponse",
    "ServiceUpdate",
    # Site content
    "ContactInfoItem",
    "SocialLink",
    # Team
    "TeamMemberCreate",
    "TeamMemberResponse",
    "TeamMemberUpdate",
    # Uploads
    "CleanupRequest",
    "CleanupResponse",
    "ExtractZipsResponse",
    "FixContentTypesResponse",
    "MastheadFileCheck",
    "UploadKind",
    "UploadResponse",
]
