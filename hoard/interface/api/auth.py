"""Caller authentication for routes."""

import logfire
from fastapi import HTTPException, status

from hoard.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from hoard.domain.error import NotFoundError
from hoard.util.jwt import JWTError


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the auth cookie or a Bearer header.

    The cookie wins when both are present.
    """
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return None


async def authenticate(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    authorization: str | None,
) -> GetCurrentUserResponse:
    """Resolve the caller from the request credentials.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie
        authorization: Authorization header

    Returns:
        The authenticated caller

    Raises:
        HTTPException: 401 if the token is missing or invalid, or names a
            user that is not in the directory
    """
    token = extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError:
        logfire.warn("Token for unknown user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
