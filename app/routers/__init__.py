# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - partners.py: Partner categories, logos and overview
# - services.py: Service catalog
# - team.py: Team members
# - jobs.py: Job openings and applications
# - newsletter.py: Newsletter subscribers
# - portfolio.py: Apps, games, web portals, digital marketing
# - mastheads.py: Interactive HTML5 mastheads
# - banner.py: Top banner
# - uploads.py: Image and HTML5 ad uploads
# - maintenance.py: HTML5 ad maintenance tools
# - site_content.py: Contact info and social links
# - pages.py: Server-rendered site and admin dashboard
#
# API routers are mounted in main.py under /api; pages are mounted at the root.
# =============================================================================

from . import health
from . import partners
from . import services
from . import team
from . import jobs
from . import newsletter
from . import portfolio
from . import mastheads
from . import banner
from . import uploads
from . import maintenance
from . import site_content
from . import pages

__all__ = [
    "health",
    "partners",
    "services",
    "team",
    "jobs",
    "newsletter",
    "portfolio",
    "mastheads",
    "banner",
    "uploads",
    "maintenance",
    "site_content",
    "pages",
]
