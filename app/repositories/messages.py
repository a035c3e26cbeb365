from typing import List, Optional

from sqlalchemy import and_, or_

from app.models import Message
from app.repositories.base import Repository


def _between(first: str, second: str):
    return or_(
        and_(Message.sender_email == first, Message.receiver_email == second),
        and_(Message.sender_email == second, Message.receiver_email == first),
    )


class MessageRepository(Repository[Message]):
    model = Message
    not_found_detail = "Message not found"

    def thread(self, first: str, second: str) -> List[Message]:
        return self.query().filter(_between(first, second)).order_by(Message.created_at.asc()).all()

    def first_between(self, first: str, second: str) -> Optional[Message]:
        return self.query().filter(_between(first, second)).first()

    def touching(self, email: str) -> List[Message]:
        return self.query().filter(or_(Message.sender_email == email, Message.receiver_email == email)).all()
