import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import get_settings
from app.db.base import Base
from app.api.deps import get_db
from app.models import Assignment, Message, Student, TeacherRequest, User, UserRole


@pytest.fixture(scope="session")
def db_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("data") / "test.db"
    os.environ["DATABASE_URL"] = f"sqlite:///{db_path}"
    os.environ["FILES_DIR"] = str(tmp_path_factory.mktemp("uploads"))
    get_settings.cache_clear()
    settings = get_settings()
    engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture()
def db_session(db_engine):
    session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = session_local()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.main import app

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def files_dir(db_engine):
    return get_settings().files_dir


@pytest.fixture()
def make_student(db_session):
    def factory(name="Ana", email="ana@x.com", roll=1):
        now = datetime.utcnow()
        user = User(name=name, email=email, role=UserRole.student, roll=roll, created_at=now, last_login=now)
        student = Student(
            name=name,
            email=email,
            gender="female",
            your_old="15",
            role=UserRole.student,
            roll=roll,
            created_at=now,
            last_login=now,
        )
        db_session.add_all([user, student])
        db_session.commit()
        return student

    return factory


@pytest.fixture()
def make_teacher_user(db_session):
    def factory(name="Ivan", email="ivan@x.com"):
        user = User(name=name, email=email, role=UserRole.teacher)
        db_session.add(user)
        db_session.commit()
        return user

    return factory


@pytest.fixture()
def make_request(db_session):
    def factory(email="ana@x.com", course="Physics"):
        request = TeacherRequest(name="Ana", email=email, course=course, message="please")
        db_session.add(request)
        db_session.commit()
        return request

    return factory


@pytest.fixture()
def make_assignment(db_session):
    def factory(uploaded_by="ivan@x.com", title="Essay"):
        assignment = Assignment(language="English", title=title, uploaded_by=uploaded_by)
        db_session.add(assignment)
        db_session.commit()
        return assignment

    return factory


@pytest.fixture()
def make_message(db_session):
    def factory(sender, receiver, text, created_at):
        message = Message(sender_email=sender, receiver_email=receiver, message=text, created_at=created_at)
        db_session.add(message)
        db_session.commit()
        return message

    return factory
