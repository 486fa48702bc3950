"""Auth router — register, login, current user profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.auth.dependencies import get_current_user
from hrms.auth.models import User
from hrms.auth.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenData,
    UserOut,
)
from hrms.auth.service import authenticate, register_user
from hrms.database import get_db

router = APIRouter(prefix="")


# ── POST /register ──────────────────────────────────────────────────

@router.post("/register", response_model=RegisterResponse)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    user = await register_user(db, body)
    return RegisterResponse(data=UserOut.model_validate(user))


# ── POST /login ─────────────────────────────────────────────────────

@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    user, token = await authenticate(db, body)
    return LoginResponse(data=TokenData(token=token, role=user.role))


# ── GET /me — Current user profile ─────────────────────────────────

@router.get("/me", response_model=UserOut)
async def me(user: User = Depends(get_current_user)):
    return user
