from datetime import datetime

from sqlalchemy import Column, Float, String, DateTime

from app.db.base import Base, new_id


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(String(32), primary_key=True, default=new_id)
    language = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    uploaded_by = Column(String, index=True, nullable=False)
    file_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)


class AssignmentSubmission(Base):
    __tablename__ = "assignment_submissions"

    id = Column(String(32), primary_key=True, default=new_id)
    # Not a foreign key: the referenced assignment may be deleted later.
    assignment_id = Column(String(32), index=True, nullable=False)
    submission_link = Column(String, nullable=False)
    student_email = Column(String, index=True, nullable=False)
    student_name = Column(String, nullable=False)
    status = Column(String, nullable=False, default="submitted")

    mark = Column(Float, nullable=True)
    admin_comments = Column(String, nullable=True)
    marked_by = Column(String, nullable=True)
    marked_at = Column(DateTime, nullable=True)
    acted_by = Column(String, nullable=True)

    submitted_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)
