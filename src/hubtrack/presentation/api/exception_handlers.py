"""Translate exceptions into JSON error responses.

Every error leaves the API as

    {"detail": "Invalid email or password", "code": "INVALID_CREDENTIALS"}

with the status taken from ``ERROR_CODE_TO_STATUS``. Rejected request
bodies answer 400 and also list ``errors: [{"field", "message"}]``.
Anything unexpected becomes a 500 whose detail reveals nothing.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hubtrack_identity.exceptions import ErrorCode, IdentityError

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_RESET_TOKEN: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized - authentication errors
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_DEACTIVATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_status_for_exception(exc: IdentityError) -> int:
    return ERROR_CODE_TO_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    **extra: Any,
) -> JSONResponse:
    """401 responses also carry ``WWW-Authenticate: Bearer``."""
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code, **extra},
        headers=headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query" location prefix
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid value"),
            },
        )
    return errors


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""

    @app.exception_handler(IdentityError)
    async def identity_exception_handler(
        request: Request,
        exc: IdentityError,
    ) -> JSONResponse:
        status_code = get_status_for_exception(exc)

        logger.warning(
            "Identity exception on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = _format_validation_errors(exc)
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            ", ".join(error["field"] for error in errors),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Validation failed",
            code=ErrorCode.VALIDATION_ERROR.value,
            errors=errors,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with a generic message.

        Details are logged server side only.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
