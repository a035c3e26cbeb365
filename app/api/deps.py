from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.repositories import Repositories


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_repos(db: Session = Depends(get_db)) -> Repositories:
    return Repositories.from_session(db)
