from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from typing import Optional

from ekrili.models.user import UserRole, Language


class UserBase(BaseModel):
    email: EmailStr
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: UserRole = UserRole.TENANT
    avatar: Optional[str] = None
    language: Language = Language.FR


class UserCreate(UserBase):
    password: str


class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    role: Optional[UserRole] = None
    avatar: Optional[str] = None
    language: Optional[Language] = None

    @field_validator("first_name", "last_name", "role", "language")
    @classmethod
    def not_null(cls, v, info):
        # phone and avatar may be cleared, the rest may only be replaced
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """User as exposed to clients: everything but the password hash"""
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: UserRole
    avatar: Optional[str] = None
    is_verified: bool
    phone_verified: bool
    language: Language
    created_at: datetime

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
