"""Caller token domain service."""

from uuid import UUID

import logfire

from hoard.config import AuthSettings
from hoard.domain.value import UserId
from hoard.util.jwt import JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Turns a caller token into the directory id it was issued for."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def caller_id(self, token: str) -> UserId:
        """Verify a token and return the caller it names.

        Args:
            token: Encoded JWT from the cookie or Authorization header

        Returns:
            Directory id of the caller

        Raises:
            JWTError: If the token is invalid, expired, or its `user_id`
                claim is not a UUID
        """
        with logfire.span("jwt_service.caller_id"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", reason=str(e))
                raise

            try:
                user_id = UserId(UUID(payload.user_id))
            except ValueError:
                logfire.warn("Token subject is not a user id")
                raise JWTError("Invalid token subject")

            return user_id
