# =============================================================================
# app/routers/portfolio.py - Portfolio Endpoints
# =============================================================================
# "Our Works" sub-types share one shape: public list/get, admin
# create/update/delete. Routes are generated per sub-type from a table of
# (path, service, schemas) instead of being written out four times.
# =============================================================================

from typing import Any

from fastapi import APIRouter, Path, status
from pydantic import BaseModel

from app.dependencies import AdminUser
from core.models.portfolio import (
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
from core.services.base import RecordService
from core.services.portfolio_service import (
    AppItemService,
    DigitalMarketingService,
    GameService,
    WebPortalService,
)

router = APIRouter()


def register_crud_routes(
    router: APIRouter,
    path: str,
    service: type[RecordService],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
    id_type: type = int,
) -> None:
    """
    Add list/get/create/update/delete routes for one resource.

    Example:
        register_crud_routes(router, "/games", GameService, GameCreate, GameUpdate, GameResponse)
    """
    name = path.strip("/").replace("-", "_")

    async def list_items() -> Any:
        return service.list_records()

    async def get_item(item_id: id_type = Path(...)) -> Any:
        return service.get_record(item_id)

    async def create_item(request: create_model, user: AdminUser) -> Any:
        return service.create_record(request.model_dump())

    async def update_item(request: update_model, user: AdminUser, item_id: id_type = Path(...)) -> Any:
        return service.update_record(item_id, request.model_dump(exclude_unset=True))

    async def delete_item(user: AdminUser, item_id: id_type = Path(...)) -> Any:
        service.delete_record(item_id)
        return {"success": True, "id": item_id}

    router.add_api_route(
        path, list_items, methods=["GET"],
        response_model=list[response_model], name=f"list_{name}",
    )
    router.add_api_route(
        f"{path}/{{item_id}}", get_item, methods=["GET"],
        response_model=response_model, name=f"get_{name}",
    )
    router.add_api_route(
        path, create_item, methods=["POST"],
        response_model=response_model, status_code=status.HTTP_201_CREATED,
        name=f"create_{name}",
    )
    router.add_api_route(
        f"{path}/{{item_id}}", update_item, methods=["PUT"],
        response_model=response_model, name=f"update_{name}",
    )
    router.add_api_route(
        f"{path}/{{item_id}}", delete_item, methods=["DELETE"],
        name=f"delete_{name}",
    )


register_crud_routes(
    router, "/applications", AppItemService,
    AppItemCreate, AppItemUpdate, AppItemResponse,
)
register_crud_routes(
    router, "/games", GameService,
    GameCreate, GameUpdate, GameResponse,
)
register_crud_routes(
    router, "/web-portals", WebPortalService,
    WebPortalCreate, WebPortalUpdate, WebPortalResponse,
)
register_crud_routes(
    router, "/digital-marketing", DigitalMarketingService,
    DigitalMarketingCreate, DigitalMarketingUpdate, DigitalMarketingResponse,
)
