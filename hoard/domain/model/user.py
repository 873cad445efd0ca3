"""User entity.

Users are owned by the external identity provider. Hoard only reads them
to authorize requests and to show collaborator identities.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hoard.domain.model.common import DomainModel
from hoard.domain.value import UserId
from hoard.util.clock import utcnow


class User(DomainModel):
    """User identity as known to the directory.

    The email is unique and compared case-sensitively; it is the identity an
    invite is addressed to.
    """

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
