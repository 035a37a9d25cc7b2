# =============================================================================
# app/routers/team.py - Team Member Endpoints
# =============================================================================
# The public list only shows active members; the dashboard asks for
# inactive ones too with include_inactive=true and an admin token.
# =============================================================================

from fastapi import APIRouter, HTTPException, Path, Query, status

from app.dependencies import AdminUser, OptionalUser
from core.models.team import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from core.services.team_service import TeamService

router = APIRouter()


@router.get("/team-members", response_model=list[TeamMemberResponse])
async def list_team_members(
    user: OptionalUser,
    include_inactive: bool = Query(default=False, description="Also list hidden members (admin only)"),
):
    """
    List team members in display order.

    Raises:
        403: If include_inactive is requested without an admin token
    """
    if include_inactive and not (user and user.is_admin):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return TeamService.list_members(include_inactive=include_inactive)


@router.get("/team-members/{member_id}", response_model=TeamMemberResponse)
async def get_team_member(member_id: int = Path(...)):
    return TeamService.get_record(member_id)


@router.post(
    "/team-members",
    response_model=TeamMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_team_member(request: TeamMemberCreate, user: AdminUser):
    """
    Add a team member.

    Raises:
        400: If name, position or image is missing
    """
    return TeamService.create_record(request.model_dump())


@router.put("/team-members/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    request: TeamMemberUpdate,
    user: AdminUser,
    member_id: int = Path(...),
):
    return TeamService.update_record(member_id, request.model_dump(exclude_unset=True))


@router.delete("/team-members/{member_id}")
async def delete_team_member(user: AdminUser, member_id: int = Path(...)):
    TeamService.delete_record(member_id)
    return {"success": True, "id": member_id}
