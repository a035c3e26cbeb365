from datetime import datetime
from typing import Optional

from app.schemas.common import APIModel


class EnrolledCourseOut(APIModel):
    id: str
    student_email: str
    course_id: str
    course_name: Optional[str] = None
    enrolled_at: Optional[datetime] = None
