# helpdesk/api/schemas/user_schema.py
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_serializer

from helpdesk.api.schemas._datetime_serializer import serialize_dt
from helpdesk.entities.user import Role


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=200)
    role: Role | None = None


class LoginRequest(BaseModel):
    email: EmailStr
    # no length rule here: every bad login must look the same
    password: str = Field(min_length=1, max_length=200)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class LogoutRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class TokenPairResponse(BaseModel):
    access_token: str
    refresh_token: str
    expires_at: datetime
    token_type: str = "Bearer"

    @field_serializer("expires_at")
    def serialize_dates(self, value: datetime | None):
        return serialize_dt(value)


class MeResponse(BaseModel):
    id: int
    role: Role


class UserResponse(BaseModel):
    id: int
    email: str
    role: Role


# -------------------------
# ADMIN
# -------------------------

class AdminUpdateUserRequest(BaseModel):
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=200)
    role: Role | None = None


class AdminUserResponse(UserResponse):
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_serializer("created_at", "updated_at")
    def serialize_dates(self, value: datetime | None):
        return serialize_dt(value)
