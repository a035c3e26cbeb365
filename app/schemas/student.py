from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models import UserRole
from app.schemas.common import APIModel, RequiredStr


class ProfileFields(APIModel):
    gender: Optional[str] = None
    your_old: Optional[str] = None
    mobile_number: Optional[str] = None
    country: Optional[str] = None
    division: Optional[str] = None
    district: Optional[str] = None
    village: Optional[str] = None
    guardian_name: Optional[str] = None
    birthday: Optional[str] = None


class StudentRegister(ProfileFields):
    name: RequiredStr
    email: RequiredStr
    image: Optional[str] = None


class StudentUpdate(ProfileFields):
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    roll: Optional[int] = None


class StudentOut(ProfileFields):
    id: str
    name: str
    email: str
    image: str = ""
    role: UserRole
    roll: Optional[int] = None
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = Field(default=None, alias="last_login")


class RegisterResult(APIModel):
    message: str
    roll: int
    user_id: str
    student_id: str
