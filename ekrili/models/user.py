"""
User Model
Marketplace account: a tenant, an owner, or both at once
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class UserRole(str, Enum):
    TENANT = "tenant"
    OWNER = "owner"
    BOTH = "both"


class Language(str, Enum):
    FR = "fr"
    EN = "en"
    AR = "ar"


class User(BaseModel):
    """
    Stored user record.

    `password` holds the hash produced by the auth layer; the store treats it
    as an opaque string and returns it with the record.
    """
    id: int
    email: str
    password: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: UserRole = UserRole.TENANT
    avatar: Optional[str] = None
    is_verified: bool = False
    phone_verified: bool = False
    language: Language = Language.FR
    created_at: datetime

    @property
    def is_owner(self) -> bool:
        return self.role in (UserRole.OWNER, UserRole.BOTH)
