from datetime import datetime

from pydantic import EmailStr, Field

from realestate.schemas.base import CamelModel, RequestModel
from realestate.schemas.types import BigIntId


class UserProfile(CamelModel):
    id: BigIntId
    email: str
    first_name: str
    last_name: str
    phone_number: str | None = Field(default=None, alias="phone")
    national_id: str | None = None
    user_type: str
    city: str | None = None
    neighborhood: str | None = None
    postal_code: str | None = None
    profile_image: str | None = None
    is_verified: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OwnerLookup(CamelModel):
    id: BigIntId
    first_name: str
    last_name: str
    email: str


class LoginRequest(RequestModel):
    email: str
    password: str


class LoginResponse(CamelModel):
    message: str
    user: UserProfile
    access_token: str
    token_type: str = "bearer"


class SignupRequest(RequestModel):
    email: EmailStr
    first_name: str
    last_name: str
    national_id: str
    phone: str
    password: str
    user_type: str
    city: str | None = None
    neighborhood: str | None = None
    postal_code: str | None = None


class UserUpdateRequest(RequestModel):
    user_id: BigIntId | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    national_id: str | None = None
    phone: str | None = None
    new_password: str | None = None
    current_password: str | None = None


class UserResponse(CamelModel):
    message: str
    user: UserProfile
