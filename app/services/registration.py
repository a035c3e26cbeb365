import logging
from datetime import datetime
from typing import Tuple

from app.core.errors import ConflictError
from app.models import User, UserRole, Student
from app.repositories import Repositories
from app.schemas import StudentRegister

logger = logging.getLogger(__name__)


def register_student(repos: Repositories, payload: StudentRegister) -> Tuple[User, Student]:
    if repos.users.get_by_email(payload.email):
        raise ConflictError("Email already registered")

    # Count-then-insert: concurrent registrations may share a roll number.
    roll = repos.students.count() + 1
    now = datetime.utcnow()
    image = payload.image or ""

    user = repos.users.add(
        User(
            name=payload.name,
            email=payload.email,
            image=image,
            role=UserRole.student,
            created_at=now,
            last_login=now,
            roll=roll,
        )
    )
    student = repos.students.add(
        Student(
            **payload.model_dump(exclude={"image"}),
            image=image,
            role=UserRole.student,
            created_at=now,
            last_login=now,
            roll=roll,
        )
    )
    logger.info(f"Student registered: {student.email} (roll {roll})")
    return user, student
