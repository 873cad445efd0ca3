"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccessDeniedError(DomainError):
    """Raised when a user lacks the role an operation on a chest requires."""

    def __init__(self, action: str, chest_id: str, user_id: str):
        self.action = action
        self.chest_id = chest_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} on chest {chest_id}"
        )


class ForbiddenError(AccessDeniedError):
    """Raised when an invite is redeemed by someone other than the invitee."""

    def __init__(self, chest_id: str, user_id: str):
        super().__init__(
            "accept an invite addressed to another email", chest_id, user_id
        )


class ConflictError(DomainError):
    """Raised when an operation would violate a uniqueness rule."""

    def __init__(self, message: str):
        super().__init__(message)


class ExpiredError(DomainError):
    """Raised when an invite is redeemed after its expiry."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} has expired: {identifier}")
