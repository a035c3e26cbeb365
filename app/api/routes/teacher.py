from datetime import datetime
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status

from app.api.deps import get_repos
from app.core.errors import NotFoundError, ValidationError
from app.models import Assignment, Video
from app.repositories import Repositories
from app.schemas import (
    ActionResult,
    AnnouncementOut,
    AssignmentOut,
    AssignmentUpdate,
    InsertResult,
    SubmissionOut,
    TeacherOut,
    VideoOut,
    VideoUpdate,
)
from app.services.media import is_video, remove_upload, save_upload

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/teachers/email/{email}", response_model=TeacherOut)
def get_teacher_by_email(email: str, repos: Repositories = Depends(get_repos)):
    teacher = repos.teachers.get_by_email(email)
    if not teacher:
        raise NotFoundError("Teacher not found")
    return teacher


@router.get("/assignments/teacher/{email}", response_model=list[AssignmentOut])
def teacher_assignments(email: str, repos: Repositories = Depends(get_repos)):
    return repos.assignments.list_by_uploader(email)


@router.get("/teacher/announcements", response_model=list[AnnouncementOut])
def teacher_announcements(repos: Repositories = Depends(get_repos)):
    return repos.announcements.list_newest_first()


@router.get("/teacher/submissions/{email}", response_model=list[SubmissionOut])
def teacher_submissions(email: str, repos: Repositories = Depends(get_repos)):
    return repos.submissions.list_for_assignment_owner(email)


@router.get("/teacher/videos/{email}", response_model=list[VideoOut])
def teacher_videos(email: str, repos: Repositories = Depends(get_repos)):
    return repos.videos.list_by_uploader(email)


@router.post("/assignments", response_model=InsertResult, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    language: str = Form(..., min_length=1),
    title: str = Form(..., min_length=1),
    uploaded_by: str = Form(..., alias="uploadedBy", min_length=1),
    description: str = Form(""),
    file: Optional[UploadFile] = File(None),
    repos: Repositories = Depends(get_repos),
) -> InsertResult:
    file_url = await save_upload(file, "assignments") if file and file.filename else None
    assignment = repos.assignments.add(
        Assignment(
            language=language,
            title=title,
            description=description,
            uploaded_by=uploaded_by,
            file_url=file_url,
        )
    )
    logger.info(f"Assignment {assignment.id} created by {uploaded_by}")
    return InsertResult(success=True, message="📝 Assignment created successfully", inserted_id=assignment.id)


@router.post("/teacher/videos", response_model=InsertResult, status_code=status.HTTP_201_CREATED)
async def upload_video(
    language: str = Form(..., min_length=1),
    category: str = Form(..., min_length=1),
    title: str = Form(..., min_length=1),
    uploaded_by: str = Form(..., alias="uploadedBy", min_length=1),
    description: str = Form(""),
    video_file: UploadFile = File(..., alias="videoFile"),
    repos: Repositories = Depends(get_repos),
) -> InsertResult:
    if not is_video(video_file):
        logger.warning(f"Rejected non-video upload {video_file.filename} ({video_file.content_type})")
        raise ValidationError("Only video files are allowed!")

    video_url = await save_upload(video_file, "videos")
    video = repos.videos.add(
        Video(
            language=language,
            category=category,
            title=title,
            description=description,
            uploaded_by=uploaded_by,
            video_url=video_url,
        )
    )
    logger.info(f"Video {video.id} uploaded by {uploaded_by}")
    return InsertResult(success=True, message="🎥 Video uploaded successfully", inserted_id=video.id)


@router.put("/teacher/videos/{video_id}", response_model=ActionResult)
def update_video(video_id: str, payload: VideoUpdate, repos: Repositories = Depends(get_repos)) -> ActionResult:
    video = repos.videos.get_or_404(video_id)
    values = payload.model_dump(exclude_unset=True)
    values["updated_at"] = datetime.utcnow()
    repos.videos.patch(video, values)
    return ActionResult(success=True, message="Video updated successfully")


@router.put("/assignments/{assignment_id}", response_model=ActionResult)
async def update_assignment(
    assignment_id: str,
    request: Request,
    repos: Repositories = Depends(get_repos),
) -> ActionResult:
    assignment = repos.assignments.get_or_404(assignment_id)
    content_type = request.headers.get("content-type", "")

    upload = None
    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        values = {key: form.get(key) for key in ("language", "title", "description") if form.get(key) is not None}
        upload = form.get("file")
    else:
        try:
            payload = AssignmentUpdate.model_validate(await request.json())
        except ValueError as exc:
            raise ValidationError("Invalid assignment data") from exc
        values = payload.model_dump(exclude_unset=True)

    if upload is not None and getattr(upload, "filename", None):
        old_url = assignment.file_url
        values["file_url"] = await save_upload(upload, "assignments")
        if old_url:
            remove_upload(old_url)

    values["updated_at"] = datetime.utcnow()
    repos.assignments.patch(assignment, values)
    return ActionResult(success=True, message="Assignment updated successfully")


@router.delete("/teacher/videos/{video_id}", response_model=ActionResult)
def delete_video(video_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    video = repos.videos.get_or_404(video_id)
    video_url = video.video_url
    repos.videos.delete(video)
    remove_upload(video_url)
    return ActionResult(success=True, message="Video deleted successfully")


@router.delete("/teacher/assignments/{assignment_id}", response_model=ActionResult)
def delete_assignment(assignment_id: str, repos: Repositories = Depends(get_repos)) -> ActionResult:
    assignment = repos.assignments.get_or_404(assignment_id)
    file_url = assignment.file_url
    repos.assignments.delete(assignment)
    if file_url:
        remove_upload(file_url)
    return ActionResult(success=True, message="Assignment deleted successfully")
