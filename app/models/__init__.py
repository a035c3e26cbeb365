from app.models.user import User, UserRole
from app.models.profile import Student, Teacher, PROFILE_FIELDS
from app.models.video import Video
from app.models.assignment import Assignment, AssignmentSubmission
from app.models.content import QuizTask, Announcement, EnrolledCourse
from app.models.teacher_request import TeacherRequest, TeacherRequestStatus
from app.models.message import Message

__all__ = [
    "User",
    "UserRole",
    "Student",
    "Teacher",
    "PROFILE_FIELDS",
    "Video",
    "Assignment",
    "AssignmentSubmission",
    "QuizTask",
    "Announcement",
    "EnrolledCourse",
    "TeacherRequest",
    "TeacherRequestStatus",
    "Message",
]
