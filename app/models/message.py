from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime

from app.db.base import Base, new_id


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(32), primary_key=True, default=new_id)
    sender_email = Column(String, index=True, nullable=False)
    receiver_email = Column(String, index=True, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
