"""Team management router."""

import logging
from uuid import UUID

from fastapi import APIRouter

from hubtrack.presentation.api.dependencies import (
    AdminUser,
    AuthService,
    DBSession,
    TeamLead,
)
from hubtrack.presentation.api.schemas import (
    ErrorResponse,
    UserListResponse,
    UserMessageResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List team members",
    responses={
        200: {"description": "All accounts"},
        403: {"model": ErrorResponse, "description": "Admin or manager required"},
    },
)
async def list_users(team_lead: TeamLead, auth_service: AuthService) -> UserListResponse:
    users = await auth_service.list_users()
    logger.debug("User list requested by %s", team_lead.email)
    return UserListResponse(
        users=[UserResponse.from_domain(user) for user in users],
        total=len(users),
    )


@router.patch(
    "/{user_id}/deactivate",
    summary="Deactivate a user",
    responses={
        200: {"description": "User deactivated"},
        400: {"model": ErrorResponse, "description": "Cannot deactivate yourself"},
        403: {"model": ErrorResponse, "description": "Admin required"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def deactivate_user(
    user_id: UUID,
    admin: AdminUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserMessageResponse:
    """
    Deactivate an account. Deactivation is permanent.

    Tokens already issued to the account keep working until they expire.
    """
    user = await auth_service.deactivate_user(admin, user_id)
    await session.commit()

    return UserMessageResponse(
        message="User deactivated successfully",
        user=UserResponse.from_domain(user),
    )
