from datetime import datetime
from typing import Optional

from app.schemas.common import APIModel, RequiredStr


class AssignmentOut(APIModel):
    id: str
    language: str
    title: str
    description: str = ""
    uploaded_by: str
    file_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AssignmentUpdate(APIModel):
    language: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class SubmissionCreate(APIModel):
    assignment_id: RequiredStr
    submission_link: RequiredStr
    student_email: RequiredStr
    student_name: RequiredStr


class SubmissionOut(APIModel):
    id: str
    assignment_id: str
    submission_link: str
    student_email: str
    student_name: str
    status: str
    mark: Optional[float] = None
    admin_comments: Optional[str] = None
    marked_by: Optional[str] = None
    marked_at: Optional[datetime] = None
    acted_by: Optional[str] = None
    submitted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubmissionStatusUpdate(APIModel):
    """Grading patch.

    Only the fields present in the request body are written; a field sent as
    ``null`` clears the stored value, an omitted field leaves it untouched.
    """

    status: RequiredStr
    mark: Optional[float] = None
    admin_comments: Optional[str] = None
    marked_by: Optional[str] = None
    marked_at: Optional[datetime] = None
    acted_by: Optional[str] = None
