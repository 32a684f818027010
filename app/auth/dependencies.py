"""FastAPI dependencies for authentication."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.database import get_db
from app.data.users.models import User
from app.auth.utils import decode_access_token

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Dependency to get the current authenticated user.

    Raises 401 if not authenticated, the token is invalid, or the account
    no longer exists or has been deactivated.
    """
    if not credentials:
        raise _unauthorized("Not authorized, no token")

    payload = decode_access_token(credentials.credentials)

    if not payload or not payload.get("sub"):
        raise _unauthorized("Not authorized, token failed")

    result = await db.execute(select(User).where(User.id == payload["sub"]))
    user = result.scalar_one_or_none()

    if not user:
        raise _unauthorized("Not authorized, user not found")

    if not user.is_active:
        raise _unauthorized("Account is deactivated")

    return user
