from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from app.models import UserRole
from app.schemas.common import APIModel


class UserOut(APIModel):
    id: str
    name: str
    email: str
    image: str = ""
    role: UserRole
    roll: Optional[int] = None
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = Field(default=None, alias="last_login")


class RoleOut(APIModel):
    role: UserRole


class ProfileOut(APIModel):
    role: UserRole
    profile_data: Optional[Dict[str, Any]] = None
