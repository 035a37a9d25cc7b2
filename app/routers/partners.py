# =============================================================================
# app/routers/partners.py - Partner Endpoints
# =============================================================================
# Partner categories, partner logos, and the nested overview used by the
# home page. Reads are public; changes require an admin token.
# =============================================================================

from fastapi import APIRouter, Path, Response, status

from app.dependencies import AdminUser
from core.models.partner import (
    PartnerCategoryCreate,
    PartnerCategoryResponse,
    PartnerCategoryUpdate,
    PartnerCategoryWithLogos,
    PartnerLogoCreate,
    PartnerLogoResponse,
    PartnerLogoUpdate,
)
from core.services.partner_service import (
    PartnerCategoryService,
    PartnerLogoService,
    PartnerService,
)

router = APIRouter()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/partners", response_model=list[PartnerCategoryWithLogos])
async def get_partners(response: Response):
    """
    All partner categories with their logos nested.

    Served uncached so dashboard edits show up immediately.
    """
    response.headers.update(NO_CACHE_HEADERS)
    return PartnerService.get_overview()


# =============================================================================
# Categories
# =============================================================================

@router.get("/partner-categories", response_model=list[PartnerCategoryResponse])
async def list_partner_categories():
    return PartnerCategoryService.list_records()


@router.get("/partner-categories/{category_id}", response_model=PartnerCategoryResponse)
async def get_partner_category(category_id: int = Path(...)):
    """
    Raises:
        404: If category not found
    """
    return PartnerCategoryService.get_record(category_id)


@router.post(
    "/partner-categories",
    response_model=PartnerCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_partner_category(request: PartnerCategoryCreate, user: AdminUser):
    """
    Create a partner category.

    Raises:
        400: If name or original_path is missing
    """
    return PartnerCategoryService.create_record(request.model_dump())


@router.put("/partner-categories/{category_id}", response_model=PartnerCategoryResponse)
async def update_partner_category(
    request: PartnerCategoryUpdate,
    user: AdminUser,
    category_id: int = Path(...),
):
    return PartnerCategoryService.update_record(category_id, request.model_dump(exclude_unset=True))


@router.delete("/partner-categories/{category_id}")
async def delete_partner_category(user: AdminUser, category_id: int = Path(...)):
    """
    Delete a category and every logo in it.

    Raises:
        404: If category not found
    """
    PartnerCategoryService.delete_record(category_id)
    return {"success": True, "id": category_id}


# =============================================================================
# Logos
# =============================================================================

@router.get("/partner-logos", response_model=list[PartnerLogoResponse])
async def list_partner_logos():
    return PartnerLogoService.list_records()


@router.get("/partner-logos/{logo_id}", response_model=PartnerLogoResponse)
async def get_partner_logo(logo_id: int = Path(...)):
    return PartnerLogoService.get_record(logo_id)


@router.post(
    "/partner-logos",
    response_model=PartnerLogoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_partner_logo(request: PartnerLogoCreate, user: AdminUser):
    """
    Add a logo to a category.

    Raises:
        400: If category_id, alt or image_path is missing
        404: If the category does not exist
    """
    return PartnerLogoService.create_record(request.model_dump())


@router.put("/partner-logos/{logo_id}", response_model=PartnerLogoResponse)
async def update_partner_logo(
    request: PartnerLogoUpdate,
    user: AdminUser,
    logo_id: int = Path(...),
):
    return PartnerLogoService.update_record(logo_id, request.model_dump(exclude_unset=True))


@router.delete("/partner-logos/{logo_id}")
async def delete_partner_logo(user: AdminUser, logo_id: int = Path(...)):
    PartnerLogoService.delete_record(logo_id)
    return {"success": True, "id": logo_id}
