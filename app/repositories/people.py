from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError
from app.models import User, UserRole, Student, Teacher
from app.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User
    not_found_detail = "User not found"

    def get_by_email(self, email: str) -> Optional[User]:
        return self.query().filter(User.email == email).first()

    def get_by_email_and_role(self, email: str, role: UserRole) -> Optional[User]:
        return self.query().filter(User.email == email, User.role == role).first()

    def list_by_emails(self, emails: Iterable[str]) -> List[User]:
        return self.query().filter(User.email.in_(list(emails))).all()

    def add(self, obj: User) -> User:
        self.db.add(obj)
        try:
            self.db.flush()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("Email already registered") from exc
        self._commit()
        self.db.refresh(obj)
        return obj


class StudentRepository(Repository[Student]):
    model = Student
    not_found_detail = "Student not found"

    def get_by_email(self, email: str) -> Optional[Student]:
        return self.query().filter(Student.email == email).first()


class TeacherRepository(Repository[Teacher]):
    model = Teacher
    not_found_detail = "Teacher not found"

    def get_by_email(self, email: str) -> Optional[Teacher]:
        return self.query().filter(Teacher.email == email).first()
