import logging
from typing import Dict, List

from app.core.errors import NotFoundError
from app.models import Message, UserRole
from app.repositories import Repositories
from app.schemas import ActionResult, ConversationOut

logger = logging.getLogger(__name__)

SEED_MESSAGE = "👋 Conversation started"


def add_contact(
    repos: Repositories, owner_email: str, contact_email: str, contact_role: UserRole
) -> ActionResult:
    """Open a conversation by sending the seed message, once per pair."""
    label = contact_role.value.capitalize()
    contact = repos.users.get_by_email_and_role(contact_email.strip().lower(), contact_role)
    if not contact:
        raise NotFoundError(f"{label} not found")

    if repos.messages.first_between(owner_email, contact_email):
        return ActionResult(success=False, message=f"{label} already added")

    repos.messages.add(Message(sender_email=owner_email, receiver_email=contact_email, message=SEED_MESSAGE))
    logger.info(f"Conversation started between {owner_email} and {contact_email}")
    return ActionResult(success=True, message=f"{label} added successfully")


def list_conversations(repos: Repositories, email: str) -> List[ConversationOut]:
    messages = sorted(repos.messages.touching(email), key=lambda m: m.created_at, reverse=True)

    latest: Dict[str, Message] = {}
    for msg in messages:
        partner = msg.receiver_email if msg.sender_email == email else msg.sender_email
        latest.setdefault(partner, msg)

    users = {user.email: user for user in repos.users.list_by_emails(latest)}

    conversations = []
    for partner, msg in latest.items():
        user = users.get(partner)
        conversations.append(
            ConversationOut(
                email=partner,
                name=user.name if user else None,
                image=user.image if user else None,
                role=user.role.value if user else None,
                last_message=msg.message,
                last_time=msg.created_at,
            )
        )
    return conversations
