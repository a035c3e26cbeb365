from app.schemas.common import APIModel, ActionResult, InsertResult
from app.schemas.user import UserOut, RoleOut, ProfileOut
from app.schemas.student import StudentRegister, StudentUpdate, StudentOut, RegisterResult
from app.schemas.teacher import CourseEntry, TeacherOut, TeacherUpdate
from app.schemas.video import VideoOut, VideoUpdate
from app.schemas.assignment import (
    AssignmentOut,
    AssignmentUpdate,
    SubmissionCreate,
    SubmissionOut,
    SubmissionStatusUpdate,
)
from app.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementUpdate,
    AnnouncementOut,
    AnnouncementCreated,
)
from app.schemas.teacher_request import (
    TeacherRequestCreate,
    TeacherRequestOut,
    TeacherRequestStatusUpdate,
    PromotionResult,
)
from app.schemas.message import (
    MessageCreate,
    MessageOut,
    MessageSent,
    AddTeacherRequest,
    AddStudentRequest,
    ConversationOut,
)
from app.schemas.course import EnrolledCourseOut

__all__ = [
    "APIModel",
    "ActionResult",
    "InsertResult",
    "UserOut",
    "RoleOut",
    "ProfileOut",
    "StudentRegister",
    "StudentUpdate",
    "StudentOut",
    "RegisterResult",
    "CourseEntry",
    "TeacherOut",
    "TeacherUpdate",
    "VideoOut",
    "VideoUpdate",
    "AssignmentOut",
    "AssignmentUpdate",
    "SubmissionCreate",
    "SubmissionOut",
    "SubmissionStatusUpdate",
    "AnnouncementCreate",
    "AnnouncementUpdate",
    "AnnouncementOut",
    "AnnouncementCreated",
    "TeacherRequestCreate",
    "TeacherRequestOut",
    "TeacherRequestStatusUpdate",
    "PromotionResult",
    "MessageCreate",
    "MessageOut",
    "MessageSent",
    "AddTeacherRequest",
    "AddStudentRequest",
    "ConversationOut",
    "EnrolledCourseOut",
]
