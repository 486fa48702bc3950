"""Credential hashing (bcrypt) and access-token signing (JWT)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from hrms.common.exceptions import UnauthorizedException
from hrms.config import settings

# bcrypt ignores (or rejects) anything past 72 bytes
BCRYPT_MAX_BYTES = 72


# ── Credential hasher ───────────────────────────────────────────────

def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of ``password``."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check ``password`` against a stored hash; malformed input never matches."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


# ── Token issuer ────────────────────────────────────────────────────

def create_access_token(user_id: int, role: str) -> str:
    """Sign a short-lived bearer token carrying the user id and role."""
    payload = {
        "userId": user_id,
        "role": role,
        "type": "access",
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.TOKEN_EXPIRY_MINUTES),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature, expiry and token type; return the claims."""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise UnauthorizedException("Token has expired.")
    except JWTError:
        raise UnauthorizedException("Invalid token.")

    if payload.get("type") != "access" or not isinstance(payload.get("userId"), int):
        raise UnauthorizedException("Invalid token.")
    return payload
