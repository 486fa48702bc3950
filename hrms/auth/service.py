"""Auth service — registration, password login, token-to-user lookup."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from hrms.auth.models import User
from hrms.auth.schemas import LoginRequest, RegisterRequest
from hrms.auth.security import create_access_token, hash_password, verify_password
from hrms.common.exceptions import InvalidCredentials, UnauthorizedException, UserAlreadyExists

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalars().first()


# ── Register ────────────────────────────────────────────────────────

async def register_user(db: AsyncSession, data: RegisterRequest) -> User:
    """Store a new user with a bcrypt-hashed password.

    Every failure, duplicate email included, surfaces as the same
    ``UserAlreadyExists`` error.
    """
    hashed = await run_in_threadpool(hash_password, data.password)
    user = User(name=data.name, email=data.email, password=hashed, role=data.role)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.warning("Registration rejected for %s", data.email)
        raise UserAlreadyExists()
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


# ── Login ───────────────────────────────────────────────────────────

async def authenticate(db: AsyncSession, data: LoginRequest) -> tuple[User, str]:
    """Verify credentials and return ``(user, access_token)``.

    Unknown email and wrong password raise the identical error.
    """
    user = await get_user_by_email(db, data.email)
    if user is None:
        raise InvalidCredentials()

    if not await run_in_threadpool(verify_password, data.password, user.password):
        raise InvalidCredentials()

    token = create_access_token(user.id, user.role)
    logger.info("User id=%s logged in", user.id)
    return user, token


# ── Current user ────────────────────────────────────────────────────

async def get_user_by_id(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise UnauthorizedException("User not found.")
    return user
