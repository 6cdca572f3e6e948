"""Team listing schemas."""

from pydantic import BaseModel

from hubtrack.presentation.api.schemas.auth import UserResponse


class UserListResponse(BaseModel):
    """All accounts visible to an admin or manager."""

    users: list[UserResponse]
    total: int
