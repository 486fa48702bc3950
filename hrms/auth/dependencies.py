"""Auth dependencies — bearer token validation."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.auth.models import User
from hrms.auth.security import decode_access_token
from hrms.auth.service import get_user_by_id
from hrms.common.exceptions import UnauthorizedException
from hrms.database import get_db


def _extract_bearer(request: Request) -> str:
    """Extract Bearer token from Authorization header."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise UnauthorizedException("Missing or invalid Authorization header.")
    return auth_header[7:]


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """Validate the JWT and return the user it was issued to."""
    payload = decode_access_token(_extract_bearer(request))
    return await get_user_by_id(db, payload["userId"])
