"""Teacher-request state machine and the student-to-teacher promotion.

Allowed transitions: ``Pending -> Approved`` and ``Pending -> Rejected``.
Approval runs its writes as separate commits in a fixed order (request
status, user role, new teacher record, student removal). There is no
rollback: a failure part-way leaves the earlier writes in place.
"""

import logging
from datetime import datetime

from app.core.errors import ConflictError, NotFoundError
from app.models import PROFILE_FIELDS, Teacher, TeacherRequest, TeacherRequestStatus, UserRole
from app.repositories import Repositories

logger = logging.getLogger(__name__)

TRANSITIONS = {
    TeacherRequestStatus.pending: {
        TeacherRequestStatus.pending,
        TeacherRequestStatus.approved,
        TeacherRequestStatus.rejected,
    },
    TeacherRequestStatus.approved: set(),
    TeacherRequestStatus.rejected: set(),
}


def ensure_transition(request: TeacherRequest, target: TeacherRequestStatus) -> None:
    if target not in TRANSITIONS[request.status]:
        raise ConflictError(f"Request already {request.status.value.lower()}")


def approve_teacher_request(repos: Repositories, request_id: str) -> Teacher:
    request = repos.teacher_requests.get_or_404(request_id)
    ensure_transition(request, TeacherRequestStatus.approved)

    student = repos.students.get_by_email(request.email)
    if not student:
        raise NotFoundError("Student data not found")

    now = datetime.utcnow()
    repos.teacher_requests.update(request, {"status": TeacherRequestStatus.approved})

    user = repos.users.get_by_email(student.email)
    if user:
        repos.users.update(user, {"role": UserRole.teacher, "last_login": now})

    teacher = repos.teachers.add(
        Teacher(
            **{field: getattr(student, field) for field in PROFILE_FIELDS},
            role=UserRole.teacher,
            courses=[{"name": request.course, "createdAt": now.isoformat(), "students": []}],
        )
    )
    repos.students.delete(student)

    logger.info(f"Teacher request {request.id} approved, {teacher.email} promoted to teacher")
    return teacher


def set_teacher_request_status(
    repos: Repositories, request_id: str, status: TeacherRequestStatus
) -> TeacherRequest:
    request = repos.teacher_requests.get_or_404(request_id)
    ensure_transition(request, status)
    request = repos.teacher_requests.update(request, {"status": status})
    logger.info(f"Teacher request {request.id} set to {status.value}")
    return request
