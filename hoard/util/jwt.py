"""Caller tokens.

Tokens are HS256 JWTs minted by the identity provider integration. Hoard
reads two claims besides the standard timestamps: `user_id`, the directory
id of the caller, and `email`, the address invites are matched against.
"""

from datetime import datetime, timedelta

import jwt
from pydantic import BaseModel, ValidationError

from hoard.config import AuthSettings
from hoard.util.clock import utcnow

REQUIRED_CLAIMS = ["exp", "iat", "user_id", "email"]


class TokenPayload(BaseModel):
    """Decoded caller token."""

    user_id: str
    email: str
    exp: datetime
    iat: datetime


class JWTError(Exception):
    """Token could not be trusted."""

    pass


def create_token(
    user_id: str,
    email: str,
    settings: AuthSettings,
    expires_in: timedelta | None = None,
) -> str:
    """Mint a caller token.

    Production tokens are minted by the identity provider with the shared
    secret; this is used by tests and for seeding local sessions.

    Args:
        user_id: Directory id of the caller
        email: Verified email of the caller
        settings: Authentication settings
        expires_in: Token lifetime, `jwt_expiry_days` if omitted

    Returns:
        Encoded JWT
    """
    issued_at = utcnow()
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {
        "user_id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and lifetime of a token and decode it.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Decoded payload

    Raises:
        JWTError: If the token is expired, forged, malformed or lacks a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the {e.claim} claim")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Invalid token payload")
