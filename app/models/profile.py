from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Enum, JSON

from app.db.base import Base, new_id
from app.models.user import UserRole


class ProfileMixin:
    """Columns shared by the student and teacher profile documents."""

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    gender = Column(String, nullable=True)
    your_old = Column(String, nullable=True)
    mobile_number = Column(String, nullable=True)
    country = Column(String, nullable=True)
    division = Column(String, nullable=True)
    district = Column(String, nullable=True)
    village = Column(String, nullable=True)
    guardian_name = Column(String, nullable=True)
    birthday = Column(String, nullable=True)
    image = Column(String, nullable=False, default="")
    roll = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    last_login = Column(DateTime, default=datetime.utcnow)


# Fields copied verbatim when a student is promoted to teacher.
PROFILE_FIELDS = (
    "name",
    "email",
    "gender",
    "your_old",
    "mobile_number",
    "country",
    "division",
    "district",
    "village",
    "guardian_name",
    "birthday",
    "image",
    "roll",
    "created_at",
    "last_login",
)


class Student(ProfileMixin, Base):
    __tablename__ = "students"

    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.student)


class Teacher(ProfileMixin, Base):
    __tablename__ = "teachers"

    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.teacher)
    courses = Column(JSON, nullable=False, default=list)
