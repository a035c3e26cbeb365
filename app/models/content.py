from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, JSON

from app.db.base import Base, new_id


class QuizTask(Base):
    __tablename__ = "quizzes_tasks"

    id = Column(String(32), primary_key=True, default=new_id)
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    sent_by = Column(String, nullable=True)
    sent_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class EnrolledCourse(Base):
    __tablename__ = "enrolled_courses"

    id = Column(String(32), primary_key=True, default=new_id)
    student_email = Column(String, index=True, nullable=False)
    course_id = Column(String, nullable=False)
    course_name = Column(String, nullable=True)
    enrolled_at = Column(DateTime, default=datetime.utcnow)
