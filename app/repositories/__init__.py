from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.repositories.people import UserRepository, StudentRepository, TeacherRepository
from app.repositories.content import (
    AnnouncementRepository,
    AssignmentRepository,
    EnrolledCourseRepository,
    QuizTaskRepository,
    SubmissionRepository,
    TeacherRequestRepository,
    VideoRepository,
)
from app.repositories.messages import MessageRepository


@dataclass
class Repositories:
    users: UserRepository
    students: StudentRepository
    teachers: TeacherRepository
    videos: VideoRepository
    assignments: AssignmentRepository
    submissions: SubmissionRepository
    quiz_tasks: QuizTaskRepository
    announcements: AnnouncementRepository
    teacher_requests: TeacherRequestRepository
    enrolled_courses: EnrolledCourseRepository
    messages: MessageRepository

    @classmethod
    def from_session(cls, db: Session) -> "Repositories":
        return cls(
            users=UserRepository(db),
            students=StudentRepository(db),
            teachers=TeacherRepository(db),
            videos=VideoRepository(db),
            assignments=AssignmentRepository(db),
            submissions=SubmissionRepository(db),
            quiz_tasks=QuizTaskRepository(db),
            announcements=AnnouncementRepository(db),
            teacher_requests=TeacherRequestRepository(db),
            enrolled_courses=EnrolledCourseRepository(db),
            messages=MessageRepository(db),
        )


__all__ = ["Repositories"]
