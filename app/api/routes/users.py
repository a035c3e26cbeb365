from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_repos
from app.core.errors import NotFoundError, ValidationError
from app.repositories import Repositories
from app.schemas import ProfileOut, RoleOut, UserOut
from app.services.profile import resolve_profile

router = APIRouter()


@router.get("/users/email/{email}", response_model=UserOut)
def get_user_by_email(email: str, repos: Repositories = Depends(get_repos)):
    user = repos.users.get_by_email(email)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/users/role", response_model=RoleOut)
def get_user_role(email: Optional[str] = Query(None), repos: Repositories = Depends(get_repos)):
    if not email:
        raise ValidationError("Email is required")
    user = repos.users.get_by_email(email)
    if not user:
        raise NotFoundError("User not found")
    return RoleOut(role=user.role)


@router.get("/profile/{email}", response_model=ProfileOut)
def get_profile(email: str, repos: Repositories = Depends(get_repos)) -> ProfileOut:
    return resolve_profile(repos, email)
