from datetime import datetime

from app.models import AssignmentSubmission
from app.repositories import Repositories
from app.schemas import SubmissionStatusUpdate


def update_submission_status(
    repos: Repositories, submission_id: str, patch: SubmissionStatusUpdate
) -> AssignmentSubmission:
    submission = repos.submissions.get_or_404(submission_id)
    values = patch.model_dump(exclude_unset=True)
    values["updated_at"] = datetime.utcnow()
    return repos.submissions.update(submission, values)
