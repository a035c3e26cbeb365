from datetime import datetime

from sqlalchemy import Column, String, DateTime

from app.db.base import Base, new_id


class Video(Base):
    __tablename__ = "videos"

    id = Column(String(32), primary_key=True, default=new_id)
    language = Column(String, index=True, nullable=False)
    category = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    uploaded_by = Column(String, index=True, nullable=False)
    video_url = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True)
