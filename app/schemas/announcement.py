from datetime import datetime
from typing import Optional

from app.schemas.common import APIModel, RequiredStr


class AnnouncementCreate(APIModel):
    title: RequiredStr
    message: RequiredStr
    sent_by: Optional[str] = None
    sent_at: Optional[datetime] = None


class AnnouncementUpdate(APIModel):
    title: Optional[str] = None
    message: Optional[str] = None
    sent_by: Optional[str] = None
    sent_at: Optional[datetime] = None


class AnnouncementOut(APIModel):
    id: str
    title: str
    message: str
    sent_by: Optional[str] = None
    sent_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class AnnouncementCreated(APIModel):
    message: str
    id: str
