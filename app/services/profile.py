from app.core.errors import NotFoundError
from app.models import UserRole
from app.repositories import Repositories
from app.schemas import ProfileOut, StudentOut, TeacherOut, UserOut


def resolve_profile(repos: Repositories, email: str) -> ProfileOut:
    """Join the user's role with the matching profile document.

    Admins have no separate profile collection, their user record is the
    profile. ``profile_data`` is ``None`` when the role-specific document is
    missing.
    """
    user = repos.users.get_by_email(email)
    if not user:
        raise NotFoundError("User not found")

    if user.role == UserRole.student:
        profile, schema = repos.students.get_by_email(email), StudentOut
    elif user.role == UserRole.teacher:
        profile, schema = repos.teachers.get_by_email(email), TeacherOut
    else:
        profile, schema = user, UserOut

    profile_data = None
    if profile is not None:
        profile_data = schema.model_validate(profile).model_dump(by_alias=True, mode="json")
    return ProfileOut(role=user.role, profile_data=profile_data)
