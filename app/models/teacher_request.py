import enum
from datetime import datetime

from sqlalchemy import Column, String, DateTime, Enum

from app.db.base import Base, new_id


class TeacherRequestStatus(str, enum.Enum):
    pending = "Pending"
    approved = "Approved"
    rejected = "Rejected"


class TeacherRequest(Base):
    __tablename__ = "teacher_requests"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    course = Column(String, nullable=False)
    message = Column(String, nullable=False, default="")
    status = Column(
        Enum(TeacherRequestStatus, name="teacher_request_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TeacherRequestStatus.pending,
    )
    created_at = Column(DateTime, default=datetime.utcnow)
