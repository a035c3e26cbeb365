import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from app.api.deps import get_repos
from app.core.errors import ValidationError
from app.models import Announcement, QuizTask, TeacherRequestStatus, UserRole
from app.repositories import Repositories
from app.schemas import (
    ActionResult,
    AnnouncementCreate,
    AnnouncementCreated,
    AnnouncementOut,
    AnnouncementUpdate,
    PromotionResult,
    StudentOut,
    StudentUpdate,
    SubmissionOut,
    SubmissionStatusUpdate,
    TeacherOut,
    TeacherRequestOut,
    TeacherRequestStatusUpdate,
    TeacherUpdate,
    VideoOut,
)
from app.services.grading import update_submission_status
from app.services.promotion import approve_teacher_request, set_teacher_request_status

router = APIRouter()
logger = logging.getLogger(__name__)

# Keys a client may echo back from a previous read; never stored in a task payload.
RESERVED_TASK_KEYS = {"id", "_id"}


def task_out(task: QuizTask) -> Dict[str, Any]:
    return {**task.payload, "id": task.id}


def profile_changes(payload: StudentUpdate, exclude=None) -> Dict[str, Any]:
    return payload.model_dump(exclude_unset=True, exclude=exclude)


# -----------------------
# Students
# -----------------------
@router.get("/admin/students", response_model=list[StudentOut])
def list_students(repos: Repositories = Depends(get_repos)):
    return repos.students.list()


@router.get("/admin/students/{student_id}", response_model=StudentOut)
def get_student(student_id: str, repos: Repositories = Depends(get_repos)):
    return repos.students.get_or_404(student_id)


@router.put("/admin/students/{student_id}", response_model=StudentOut)
def update_student(student_id: str, payload: StudentUpdate, repos: Repositories = Depends(get_repos)):
    student = repos.students.get_or_404(student_id)
    return repos.students.patch(student, profile_changes(payload))


@router.delete("/admin/students/{student_id}", response_model=ActionResult)
def delete_student(student_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    student = repos.students.get_or_404(student_id)
    email = student.email
    repos.students.delete(student)

    user = repos.users.get_by_email_and_role(email, UserRole.student)
    if user:
        repos.users.delete(user)
    logger.info(f"Student {email} removed")
    return ActionResult(success=True, message="Student deleted successfully")


# -----------------------
# Teachers
# -----------------------
@router.get("/admin/teachers", response_model=list[TeacherOut])
def list_teachers(repos: Repositories = Depends(get_repos)):
    return repos.teachers.list()


@router.get("/admin/teachers/{teacher_id}", response_model=TeacherOut)
def get_teacher(teacher_id: str, repos: Repositories = Depends(get_repos)):
    return repos.teachers.get_or_404(teacher_id)


@router.put("/admin/teachers/{teacher_id}", response_model=TeacherOut)
def update_teacher(teacher_id: str, payload: TeacherUpdate, repos: Repositories = Depends(get_repos)):
    teacher = repos.teachers.get_or_404(teacher_id)
    if not payload.model_fields_set:
        raise ValidationError("No update data provided")

    values = profile_changes(payload, exclude={"courses"})
    if "courses" in payload.model_fields_set:
        values["courses"] = [course.model_dump(by_alias=True, mode="json") for course in payload.courses or []]
    return repos.teachers.patch(teacher, values)


@router.delete("/admin/teachers/{teacher_id}", response_model=ActionResult)
def delete_teacher(teacher_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    teacher = repos.teachers.get_or_404(teacher_id)
    repos.teachers.delete(teacher)
    return ActionResult(success=True, message="Teacher deleted successfully")


# -----------------------
# Submissions
# -----------------------
@router.get("/admin/assignments", response_model=list[SubmissionOut])
def list_submissions(repos: Repositories = Depends(get_repos)):
    return repos.submissions.list_newest_first()


@router.put("/admin/assignments/{submission_id}/status", response_model=ActionResult)
def grade_submission(
    submission_id: str,
    payload: SubmissionStatusUpdate,
    repos: Repositories = Depends(get_repos),
) -> ActionResult:
    update_submission_status(repos, submission_id, payload)
    return ActionResult(success=True, message="Submission status updated successfully")


@router.delete("/admin/assignments/{submission_id}", response_model=ActionResult)
def delete_submission(submission_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    submission = repos.submissions.get_or_404(submission_id)
    repos.submissions.delete(submission)
    return ActionResult(success=True, message="Submission deleted successfully")


# -----------------------
# Teacher requests
# -----------------------
@router.get("/admin/teacher-requests", response_model=list[TeacherRequestOut])
def list_teacher_requests(repos: Repositories = Depends(get_repos)):
    return repos.teacher_requests.list_newest_first()


@router.put("/teacher-requests/approve/{request_id}", response_model=PromotionResult)
def approve_request(request_id: str, repos: Repositories = Depends(get_repos)) -> PromotionResult:
    teacher = approve_teacher_request(repos, request_id)
    return PromotionResult(
        success=True,
        message="✅ Teacher request approved and student promoted to teacher!",
        teacher_data=TeacherOut.model_validate(teacher),
    )


@router.put("/teacher-requests/{request_id}", response_model=ActionResult)
def update_request_status(
    request_id: str,
    payload: TeacherRequestStatusUpdate,
    repos: Repositories = Depends(get_repos),
) -> ActionResult:
    request = set_teacher_request_status(repos, request_id, TeacherRequestStatus(payload.status))
    return ActionResult(success=True, message=f"Request {request.status.value.lower()} successfully")


@router.delete("/teacher-requests/{request_id}", response_model=ActionResult)
def delete_request(request_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    request = repos.teacher_requests.get_or_404(request_id)
    repos.teacher_requests.delete(request)
    return ActionResult(success=True, message="Request deleted successfully")


# -----------------------
# Videos
# -----------------------
@router.get("/admin/videos", response_model=list[VideoOut])
def list_videos(repos: Repositories = Depends(get_repos)):
    return repos.videos.list()


# -----------------------
# Quizzes / tasks
# -----------------------
@router.get("/admin/quizzes-tasks", response_model=list[dict])
def list_tasks(repos: Repositories = Depends(get_repos)):
    return [task_out(task) for task in repos.quiz_tasks.list()]


@router.post("/admin/quizzes-tasks", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_task(payload: Dict[str, Any] = Body(...), repos: Repositories = Depends(get_repos)):
    data = {key: value for key, value in payload.items() if key not in RESERVED_TASK_KEYS}
    if not data:
        raise ValidationError("Task data is required")
    task = repos.quiz_tasks.add(QuizTask(payload=data))
    logger.info(f"Quiz/task {task.id} created")
    return task_out(task)


@router.put("/admin/quizzes-tasks/{task_id}", response_model=dict)
def update_task(task_id: str, payload: Dict[str, Any] = Body(...), repos: Repositories = Depends(get_repos)):
    task = repos.quiz_tasks.get_or_404(task_id)
    changes = {key: value for key, value in payload.items() if key not in RESERVED_TASK_KEYS}
    task = repos.quiz_tasks.update(task, {"payload": {**task.payload, **changes}})
    return task_out(task)


@router.delete("/admin/quizzes-tasks/{task_id}", response_model=ActionResult)
def delete_task(task_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    task = repos.quiz_tasks.get_or_404(task_id)
    repos.quiz_tasks.delete(task)
    return ActionResult(success=True, message="Task deleted successfully")


# -----------------------
# Announcements
# -----------------------
@router.get("/admin/announcements", response_model=list[AnnouncementOut])
def list_announcements(repos: Repositories = Depends(get_repos)):
    return repos.announcements.list_newest_first()


@router.post("/admin/announcements", response_model=AnnouncementCreated, status_code=status.HTTP_201_CREATED)
def create_announcement(payload: AnnouncementCreate, repos: Repositories = Depends(get_repos)) -> AnnouncementCreated:
    announcement = repos.announcements.add(Announcement(**payload.model_dump()))
    logger.info(f"Announcement {announcement.id} sent by {announcement.sent_by}")
    return AnnouncementCreated(message="Announcement sent", id=announcement.id)


@router.put("/admin/announcements/{announcement_id}", response_model=AnnouncementOut)
def update_announcement(
    announcement_id: str,
    payload: AnnouncementUpdate,
    repos: Repositories = Depends(get_repos),
):
    announcement = repos.announcements.get_or_404(announcement_id)
    return repos.announcements.patch(announcement, payload.model_dump(exclude_unset=True))


@router.delete("/admin/announcements/{announcement_id}", response_model=ActionResult)
def delete_announcement(announcement_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    announcement = repos.announcements.get_or_404(announcement_id)
    repos.announcements.delete(announcement)
    return ActionResult(success=True, message="Announcement deleted successfully")
