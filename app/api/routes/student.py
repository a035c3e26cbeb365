import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_repos
from app.core.errors import NotFoundError, ValidationError
from app.db.base import is_valid_id
from app.models import AssignmentSubmission, TeacherRequest
from app.repositories import Repositories
from app.schemas import (
    AnnouncementOut,
    AssignmentOut,
    EnrolledCourseOut,
    InsertResult,
    RegisterResult,
    StudentOut,
    StudentRegister,
    SubmissionCreate,
    SubmissionOut,
    TeacherRequestCreate,
    VideoOut,
)
from app.services.registration import register_student

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/students/email/{email}", response_model=StudentOut)
def get_student_by_email(email: str, repos: Repositories = Depends(get_repos)):
    student = repos.students.get_by_email(email)
    if not student:
        raise NotFoundError("Student not found")
    return student


@router.get("/student/announcements", response_model=list[AnnouncementOut])
def student_announcements(repos: Repositories = Depends(get_repos)):
    return repos.announcements.list_newest_first()


@router.get("/videos/{language}", response_model=list[VideoOut])
def videos_by_language(language: str, repos: Repositories = Depends(get_repos)):
    return repos.videos.list_by_language(language)


@router.get("/videos/{language}/{category}", response_model=list[VideoOut])
def videos_by_category(language: str, category: str, repos: Repositories = Depends(get_repos)):
    return repos.videos.list_by_language_and_category(language, category)


@router.get("/quizzes-tasks", response_model=list[dict])
def quizzes_tasks(repos: Repositories = Depends(get_repos)):
    return [{**task.payload, "id": task.id} for task in repos.quiz_tasks.list()]


@router.get("/assignments", response_model=list[AssignmentOut])
def all_assignments(repos: Repositories = Depends(get_repos)):
    return repos.assignments.list()


@router.get("/student/assignments/{email}", response_model=list[SubmissionOut])
def student_submissions(email: str, repos: Repositories = Depends(get_repos)):
    return repos.submissions.list_by_student(email)


@router.get("/my-courses/{email}", response_model=list[EnrolledCourseOut])
def my_courses(email: str, repos: Repositories = Depends(get_repos)):
    return repos.enrolled_courses.list_by_student(email)


@router.post("/students/register", response_model=RegisterResult, status_code=status.HTTP_201_CREATED)
def register(payload: StudentRegister, repos: Repositories = Depends(get_repos)) -> RegisterResult:
    user, student = register_student(repos, payload)
    return RegisterResult(
        message="🎓 Student registered successfully!",
        roll=student.roll,
        user_id=user.id,
        student_id=student.id,
    )


@router.post("/assignments/submit", response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def submit_assignment(payload: SubmissionCreate, repos: Repositories = Depends(get_repos)) -> InsertResult:
    if not is_valid_id(payload.assignment_id):
        raise ValidationError("Invalid assignment ID")
    submission = repos.submissions.add(
        AssignmentSubmission(
            assignment_id=payload.assignment_id,
            submission_link=payload.submission_link,
            student_email=payload.student_email,
            student_name=payload.student_name,
            status="submitted",
        )
    )
    logger.info(f"Assignment {submission.assignment_id} submitted by {submission.student_email}")
    return InsertResult(success=True, message="Assignment submitted successfully", inserted_id=submission.id)


@router.post("/teacher-requests", response_model=InsertResult, status_code=status.HTTP_201_CREATED)
def create_teacher_request(payload: TeacherRequestCreate, repos: Repositories = Depends(get_repos)) -> InsertResult:
    request = repos.teacher_requests.add(
        TeacherRequest(
            name=payload.name,
            email=payload.email,
            course=payload.course,
            message=payload.message or "",
        )
    )
    logger.info(f"Teacher request {request.id} created for {request.email}")
    return InsertResult(success=True, message="Teacher request sent successfully!", inserted_id=request.id)
