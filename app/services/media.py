import logging
import os
from datetime import datetime
from typing import Optional

from fastapi import UploadFile

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def is_video(upload: UploadFile) -> bool:
    return (upload.content_type or "").startswith("video/")


def _kind_dir(kind: str) -> str:
    return os.path.join(get_settings().files_dir, kind)


async def save_upload(upload: UploadFile, kind: str) -> str:
    """Write the upload under ``<files_dir>/<kind>/`` and return its public URL."""
    settings = get_settings()
    directory = _kind_dir(kind)
    os.makedirs(directory, exist_ok=True)

    original = os.path.basename(upload.filename or "upload")
    filename = f"{int(datetime.utcnow().timestamp() * 1000)}-{original}"
    with open(os.path.join(directory, filename), "wb") as output:
        output.write(await upload.read())

    logger.info(f"Stored {kind} upload {filename}")
    return f"{settings.files_base_url}/{kind}/{filename}"


def path_for_url(url: str) -> Optional[str]:
    settings = get_settings()
    prefix = f"{settings.files_base_url}/"
    if not url or not url.startswith(prefix):
        return None
    relative = url[len(prefix):]
    return os.path.join(settings.files_dir, *relative.split("/"))


def remove_upload(url: str) -> None:
    path = path_for_url(url)
    if path and os.path.exists(path):
        os.remove(path)
        logger.info(f"Removed upload {path}")
