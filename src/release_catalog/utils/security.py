"""Security utilities for JWT handling and caller identity resolution."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from release_catalog.config import get_settings
from release_catalog.database import get_db
from release_catalog.models.user import User
from release_catalog.schemas.common import CallerTier, ResponseShape
from release_catalog.services.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer token extraction; a missing header yields None instead of a 401
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token.

    Args:
        data: Payload data to encode in the token. The "sub" (subject) claim
              must be a string (e.g., {"sub": str(user_id)}).
        expires_delta: Optional custom expiration time. Defaults to settings value.

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_access_token_expire_minutes)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT access token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded token payload if valid, None if invalid or expired
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return payload
    except JWTError:
        return None


async def resolve_user(token: str | None, db: AsyncSession) -> User | None:
    """Resolve a bearer token to an active user.

    Missing, invalid or expired tokens, unknown subjects and inactive
    accounts all resolve to None.
    """
    if not token:
        return None

    payload = decode_access_token(token)
    if payload is None:
        logger.debug("Rejected bearer token: invalid or expired")
        return None

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.debug("Rejected bearer token: malformed subject")
        return None

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        logger.debug("Rejected bearer token: no active user %s", user_id)
        return None

    return user


async def get_caller_tier(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: AsyncSession = Depends(get_db),
) -> CallerTier:
    """Resolve the caller tier for endpoints where authentication is optional."""
    token = credentials.credentials if credentials is not None else None
    user = await resolve_user(token, db)
    return CallerTier.AUTHENTICATED if user is not None else CallerTier.ANONYMOUS


async def require_caller_tier(
    tier: Annotated[CallerTier, Depends(get_caller_tier)],
    response_format: str | None = Query(None, alias="format"),
) -> CallerTier:
    """Resolve the caller tier for endpoints that require authentication.

    Raises:
        UnauthorizedError: If no valid identity could be resolved
    """
    if not tier.is_authenticated:
        raise UnauthorizedError(
            "Not authenticated",
            shape=ResponseShape.from_param(response_format),
        )
    return tier


# Type aliases for use in route dependencies
OptionalCaller = Annotated[CallerTier, Depends(get_caller_tier)]
RequiredCaller = Annotated[CallerTier, Depends(require_caller_tier)]
