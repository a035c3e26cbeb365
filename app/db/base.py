import re
import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()

_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str) -> bool:
    return bool(value) and bool(_ID_PATTERN.fullmatch(value))
