from datetime import datetime
from typing import List, Optional

from app.schemas.common import APIModel
from app.schemas.student import StudentOut, StudentUpdate


class CourseEntry(APIModel):
    name: str
    created_at: Optional[datetime] = None
    students: list = []


class TeacherOut(StudentOut):
    courses: List[CourseEntry] = []


class TeacherUpdate(StudentUpdate):
    courses: Optional[List[CourseEntry]] = None
