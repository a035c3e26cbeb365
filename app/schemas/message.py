from datetime import datetime
from typing import Optional

from app.schemas.common import APIModel, RequiredStr


class MessageCreate(APIModel):
    sender_email: RequiredStr
    receiver_email: RequiredStr
    message: RequiredStr


class MessageOut(APIModel):
    id: str
    sender_email: str
    receiver_email: str
    message: str
    created_at: Optional[datetime] = None


class MessageSent(APIModel):
    inserted_id: str


class AddTeacherRequest(APIModel):
    student_email: RequiredStr
    teacher_email: RequiredStr


class AddStudentRequest(APIModel):
    teacher_email: RequiredStr
    student_email: RequiredStr


class ConversationOut(APIModel):
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    role: Optional[str] = None
    last_message: str = ""
    last_time: Optional[datetime] = None
