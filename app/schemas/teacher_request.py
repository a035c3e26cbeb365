from datetime import datetime
from typing import Literal, Optional

from app.models import TeacherRequestStatus
from app.schemas.common import APIModel, ActionResult, RequiredStr
from app.schemas.teacher import TeacherOut


class TeacherRequestCreate(APIModel):
    name: RequiredStr
    email: RequiredStr
    course: RequiredStr
    message: Optional[str] = None


class TeacherRequestOut(APIModel):
    id: str
    name: str
    email: str
    course: str
    message: str = ""
    status: TeacherRequestStatus
    created_at: Optional[datetime] = None


class TeacherRequestStatusUpdate(APIModel):
    status: Literal["Rejected", "Pending"]


class PromotionResult(ActionResult):
    teacher_data: TeacherOut
