from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from constants import UTF8
from schemas.base import CamelModel

BCRYPT_MAX_PASSWORD_BYTES = 72


class LoginRequest(CamelModel):
    username: str = Field(default=..., description="Username", min_length=1)
    password: str = Field(default=..., description="Password", min_length=1)


class RegisterRequest(LoginRequest):
    display_name: str = Field(
        default=..., description="Display name", min_length=1, max_length=255
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "username must not be blank"
            raise ValueError(msg)

        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value.encode(UTF8)) > BCRYPT_MAX_PASSWORD_BYTES:
            msg = f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)

        return value


class TokenResponse(CamelModel):
    token: str = Field(default=..., description="Bearer access token")


class UserResponse(CamelModel):
    id: int = Field(default=..., description="ID", gt=0)

    username: str = Field(default=..., description="Username")
    display_name: str = Field(default=..., description="Display name")

    created_at: datetime = Field(default=..., description="Created at")


class Identity(BaseModel):
    user_id: int = Field(default=..., description="Authenticated user ID", gt=0)

    class Config:
        frozen = True
