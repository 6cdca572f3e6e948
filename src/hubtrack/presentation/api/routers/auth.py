"""Authentication router for registration, login, and token management.

Identity errors raised by the services are translated into HTTP responses
by the exception handlers registered on the app.
"""

import logging

from fastapi import APIRouter, status

from hubtrack.presentation.api.dependencies import (
    AuthService,
    BearerToken,
    CurrentUser,
    CurrentUserContext,
    DBSession,
    JWTServiceDep,
    ResetService,
)
from hubtrack.presentation.api.schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ErrorResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateSettingsRequest,
    UserMessageResponse,
    UserResponse,
    VerifyResponse,
)
from hubtrack_identity import JWTService, User

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(
    message: str,
    user: User,
    token: str,
    jwt_service: JWTService,
) -> AuthResponse:
    return AuthResponse(
        message=message,
        user=UserResponse.from_domain(user),
        token=token,
        expires_in=int(jwt_service.session_token_ttl.total_seconds()),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or email taken"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    user, token = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        company=request.company,
        role=request.role,
    )
    await session.commit()

    return _create_auth_response(
        "User registered successfully",
        user,
        token,
        jwt_service,
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns a session token valid for the configured number of days.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return _create_auth_response(
        "Login successful",
        user,
        token,
        jwt_service,
    )


@router.post(
    "/refresh",
    summary="Refresh session token",
    responses={
        200: {"description": "Token refreshed successfully"},
        401: {"model": ErrorResponse, "description": "Invalid or expired token"},
        404: {"model": ErrorResponse, "description": "Account no longer exists"},
    },
)
async def refresh_token(
    token: BearerToken,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """
    Exchange a valid session token for one with a fresh expiry.

    The current token is sent in the ``Authorization: Bearer`` header.
    """
    user, new_token = await auth_service.refresh_token(token)
    return _create_auth_response(
        "Token refreshed successfully",
        user,
        new_token,
        jwt_service,
    )


@router.post(
    "/logout",
    summary="Logout user",
    responses={
        200: {"description": "Logged out successfully"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def logout(
    user_context: CurrentUserContext,
    auth_service: AuthService,
) -> MessageResponse:
    """
    Logout user.

    Tokens are stateless, so the token stays valid until it expires.
    Clients are expected to discard it.
    """
    await auth_service.logout(user_context)
    return MessageResponse(message="Logout successful")


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_me(user: CurrentUser) -> UserResponse:
    return UserResponse.from_domain(user)


@router.get(
    "/verify",
    summary="Verify session token",
    responses={
        200: {"description": "Token is valid"},
        401: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def verify_token(user: CurrentUser) -> VerifyResponse:
    return VerifyResponse(valid=True, user=UserResponse.from_domain(user))


@router.put(
    "/change-password",
    summary="Change password",
    responses={
        200: {"description": "Password changed successfully"},
        400: {"model": ErrorResponse, "description": "New password too weak"},
        401: {
            "model": ErrorResponse,
            "description": "Current password incorrect or not authenticated",
        },
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    """
    Change the current user's password.

    Requires the current password for verification.
    """
    await auth_service.change_password(
        user_id=user.id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    await session.commit()

    return MessageResponse(message="Password changed successfully")


@router.put(
    "/settings",
    summary="Update user settings",
    responses={
        200: {"description": "Settings updated"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def update_settings(
    request: UpdateSettingsRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserMessageResponse:
    """Merge the given settings into the stored ones."""
    updated = await auth_service.update_settings(user.id, request.settings)
    await session.commit()

    return UserMessageResponse(
        message="Settings updated successfully",
        user=UserResponse.from_domain(updated),
    )


@router.post(
    "/forgot-password",
    summary="Request password reset",
    responses={
        200: {"description": "If the email exists, a reset link has been sent"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: ResetService,
) -> MessageResponse:
    """Request a password reset email.

    The response is identical whether or not the account exists.
    """
    message = await reset_service.request_reset(request.email)
    return MessageResponse(message=message)


@router.post(
    "/reset-password",
    summary="Reset password with token",
    responses={
        200: {"description": "Password reset successfully"},
        400: {"model": ErrorResponse, "description": "Not a password reset token"},
        401: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: ResetService,
    session: DBSession,
) -> MessageResponse:
    await reset_service.reset_password(
        token=request.token,
        new_password=request.new_password,
    )
    await session.commit()

    return MessageResponse(message="Password reset successfully")
