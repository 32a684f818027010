"""Authentication routes."""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.database import get_db
from app.data.users.models import User
from app.auth import schemas
from app.auth.utils import (
    get_password_hash,
    verify_password,
    create_access_token,
)
from app.auth.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: schemas.RegisterRequest, db: AsyncSession = Depends(get_db)):
    """
    Register a new account.
    Returns a JWT token on success.
    """
    result = await db.execute(select(User).where(User.email == data.email))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists with this email"
        )

    user = User(
        name=data.name,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        age=data.age,
        gender=data.gender,
        country=data.country,
        last_login=datetime.now(timezone.utc),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info(f"Registered user: {user.id}")

    token = create_access_token(user.id, user.email)
    return schemas.AuthResponse(
        message="User registered successfully",
        token=token,
        user=schemas.UserInfo.model_validate(user)
    )


@router.post("/login", response_model=schemas.AuthResponse)
async def login(data: schemas.LoginRequest, db: AsyncSession = Depends(get_db)):
    """
    Authenticate with email and password.
    Returns a JWT token on success.
    """
    result = await db.execute(select(User).where(User.email == data.email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account is deactivated"
        )

    user.last_login = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(user)

    logger.info(f"User logged in: {user.id}")

    token = create_access_token(user.id, user.email)
    return schemas.AuthResponse(
        message="Login successful",
        token=token,
        user=schemas.UserInfo.model_validate(user)
    )


@router.get("/me", response_model=schemas.MeResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current authenticated user info."""
    return schemas.MeResponse(user=schemas.UserInfo.model_validate(current_user))


@router.post("/logout", response_model=schemas.MessageResponse)
async def logout(current_user: User = Depends(get_current_user)):
    """
    Log out the current user.
    Tokens are stateless, so the client simply discards its token.
    """
    logger.info(f"User logged out: {current_user.id}")
    return schemas.MessageResponse(message="Logged out successfully")
