"""Get current user use case."""

from pydantic import BaseModel

from hoard.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT from cookie or Authorization header


class GetCurrentUserResponse(BaseModel):
    """The authenticated caller as known to the directory."""

    user_id: str
    email: str
    name: str | None


class GetCurrentUserUseCase:
    """Use case for identifying the authenticated caller."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: Caller token domain service
            user_service: User directory domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Identify the caller behind a token.

        The email returned is the directory's rather than the token's, since
        that is the identity an invite is checked against.

        Args:
            request: Request with the caller's token

        Returns:
            Directory record of the caller

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the token names a user missing from the directory
        """
        caller_id = self.jwt_service.caller_id(request.token)
        user = await self.user_service.get_by_id(caller_id)
        return GetCurrentUserResponse(
            user_id=str(user.id), email=user.email, name=user.name
        )
