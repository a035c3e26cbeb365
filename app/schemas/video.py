from datetime import datetime
from typing import Optional

from app.schemas.common import APIModel


class VideoOut(APIModel):
    id: str
    language: str
    category: str
    title: str
    description: str = ""
    uploaded_by: str
    video_url: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class VideoUpdate(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
