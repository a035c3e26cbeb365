import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_repos
from app.models import Message, UserRole
from app.repositories import Repositories
from app.schemas import (
    ActionResult,
    AddStudentRequest,
    AddTeacherRequest,
    ConversationOut,
    MessageCreate,
    MessageOut,
    MessageSent,
)
from app.services.messaging import add_contact, list_conversations

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/messages/{user1}/{user2}", response_model=list[MessageOut])
def get_thread(user1: str, user2: str, repos: Repositories = Depends(get_repos)):
    return repos.messages.thread(user1, user2)


@router.get("/conversations/{user_email}", response_model=list[ConversationOut])
def get_conversations(user_email: str, repos: Repositories = Depends(get_repos)):
    return list_conversations(repos, user_email)


@router.post("/messages", response_model=MessageSent, status_code=status.HTTP_201_CREATED)
def send_message(payload: MessageCreate, repos: Repositories = Depends(get_repos)) -> MessageSent:
    message = repos.messages.add(
        Message(
            sender_email=payload.sender_email,
            receiver_email=payload.receiver_email,
            message=payload.message,
        )
    )
    logger.debug(f"Message {message.id} sent from {message.sender_email} to {message.receiver_email}")
    return MessageSent(inserted_id=message.id)


@router.post("/addTeacher", response_model=ActionResult)
def add_teacher(payload: AddTeacherRequest, repos: Repositories = Depends(get_repos)) -> ActionResult:
    return add_contact(repos, payload.student_email, payload.teacher_email, UserRole.teacher)


@router.post("/addStudent", response_model=ActionResult)
def add_student(payload: AddStudentRequest, repos: Repositories = Depends(get_repos)) -> ActionResult:
    return add_contact(repos, payload.teacher_email, payload.student_email, UserRole.student)
