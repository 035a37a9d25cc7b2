# =============================================================================
# app/routers/services.py - Service Catalog Endpoints
# =============================================================================

from fastapi import APIRouter, Path, status

from app.dependencies import AdminUser
from core.models.service import ServiceCreate, ServiceResponse, ServiceUpdate
from core.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/services", response_model=list[ServiceResponse])
async def list_services():
    """List the agency's services."""
    return CatalogService.list_records()


@router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str = Path(...)):
    """
    Raises:
        404: If service not found
    """
    return CatalogService.get_record(service_id)


@router.post("/services", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(request: ServiceCreate, user: AdminUser):
    """
    Create a service. The id defaults to a slug of the name.

    Raises:
        400: If name is missing or blank
        409: If a service with the same id exists
    """
    return CatalogService.create_record(request.model_dump())


@router.put("/services/{service_id}", response_model=ServiceResponse)
async def update_service(
    request: ServiceUpdate,
    user: AdminUser,
    service_id: str = Path(...),
):
    return CatalogService.update_record(service_id, request.model_dump(exclude_unset=True))


@router.delete("/services/{service_id}")
async def delete_service(user: AdminUser, service_id: str = Path(...)):
    CatalogService.delete_record(service_id)
    return {"success": True, "id": service_id}
