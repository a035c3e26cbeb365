from typing import List

from sqlalchemy import select

from app.models import (
    Announcement,
    Assignment,
    AssignmentSubmission,
    EnrolledCourse,
    QuizTask,
    TeacherRequest,
    Video,
)
from app.repositories.base import Repository


class VideoRepository(Repository[Video]):
    model = Video
    not_found_detail = "Video not found"

    def list_by_language(self, language: str) -> List[Video]:
        return self.query().filter(Video.language == language).all()

    def list_by_language_and_category(self, language: str, category: str) -> List[Video]:
        return self.query().filter(Video.language == language, Video.category == category).all()

    def list_by_uploader(self, email: str) -> List[Video]:
        return self.query().filter(Video.uploaded_by == email).all()


class AssignmentRepository(Repository[Assignment]):
    model = Assignment
    not_found_detail = "Assignment not found"

    def list_by_uploader(self, email: str) -> List[Assignment]:
        return self.query().filter(Assignment.uploaded_by == email).all()


class SubmissionRepository(Repository[AssignmentSubmission]):
    model = AssignmentSubmission
    not_found_detail = "Submission not found"

    def list_newest_first(self) -> List[AssignmentSubmission]:
        return self.query().order_by(AssignmentSubmission.submitted_at.desc()).all()

    def list_by_student(self, email: str) -> List[AssignmentSubmission]:
        return (
            self.query()
            .filter(AssignmentSubmission.student_email == email)
            .order_by(AssignmentSubmission.submitted_at.desc())
            .all()
        )

    def list_for_assignment_owner(self, email: str) -> List[AssignmentSubmission]:
        owned_ids = select(Assignment.id).where(Assignment.uploaded_by == email)
        return self.query().filter(AssignmentSubmission.assignment_id.in_(owned_ids)).all()


class QuizTaskRepository(Repository[QuizTask]):
    model = QuizTask
    not_found_detail = "Task not found"


class AnnouncementRepository(Repository[Announcement]):
    model = Announcement
    not_found_detail = "Announcement not found"

    def list_newest_first(self) -> List[Announcement]:
        return self.query().order_by(Announcement.created_at.desc()).all()


class TeacherRequestRepository(Repository[TeacherRequest]):
    model = TeacherRequest
    not_found_detail = "Request not found"

    def list_newest_first(self) -> List[TeacherRequest]:
        return self.query().order_by(TeacherRequest.created_at.desc()).all()


class EnrolledCourseRepository(Repository[EnrolledCourse]):
    model = EnrolledCourse

    def list_by_student(self, email: str) -> List[EnrolledCourse]:
        return self.query().filter(EnrolledCourse.student_email == email).all()
