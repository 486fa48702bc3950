"""Auth Pydantic schemas for request / response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hrms.auth.security import BCRYPT_MAX_BYTES
from hrms.common.schemas import EmailAddress


# ── Requests ────────────────────────────────────────────────────────

class RegisterRequest(BaseModel):
    name: str
    email: EmailAddress
    password: str = Field(min_length=1)
    role: str

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    # Plain str: a malformed address must fail like any unknown email
    email: str
    password: str


# ── Responses ───────────────────────────────────────────────────────

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class TokenData(BaseModel):
    token: str
    role: str


class RegisterResponse(BaseModel):
    success: bool = True
    data: UserOut


class LoginResponse(BaseModel):
    success: bool = True
    data: TokenData
