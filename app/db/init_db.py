import logging
from datetime import datetime

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import Announcement, Assignment, Student, Teacher, User, UserRole

logger = logging.getLogger(__name__)


def seed_demo_data(db=None) -> None:
    own_session = db is None
    db = db or SessionLocal()
    try:
        if db.query(User).first():
            logger.info("Users already present, skipping demo data")
            return

        now = datetime.utcnow()
        admin = User(
            name="School Admin",
            email="admin@schoolmate.dev",
            role=UserRole.admin,
            created_at=now,
            last_login=now,
        )
        student_user = User(
            name="Ana Petrova",
            email="ana@schoolmate.dev",
            role=UserRole.student,
            roll=1,
            created_at=now,
            last_login=now,
        )
        teacher_user = User(
            name="Ivan Ivanov",
            email="ivan@schoolmate.dev",
            role=UserRole.teacher,
            created_at=now,
            last_login=now,
        )
        db.add_all([admin, student_user, teacher_user])

        db.add(
            Student(
                name=student_user.name,
                email=student_user.email,
                gender="female",
                your_old="14",
                country="Bangladesh",
                guardian_name="Maria Petrova",
                role=UserRole.student,
                roll=1,
                created_at=now,
                last_login=now,
            )
        )
        db.add(
            Teacher(
                name=teacher_user.name,
                email=teacher_user.email,
                role=UserRole.teacher,
                created_at=now,
                last_login=now,
                courses=[{"name": "English", "createdAt": now.isoformat(), "students": []}],
            )
        )
        db.add(
            Announcement(
                title="Welcome",
                message="Classes start on Monday.",
                sent_by=admin.email,
                sent_at=now,
            )
        )
        db.add(
            Assignment(
                language="English",
                title="Essay #1",
                description="Describe your school in 300 words",
                uploaded_by=teacher_user.email,
            )
        )

        db.commit()
        logger.info(f"Seeded demo data: admin {admin.email}, student {student_user.email}, teacher {teacher_user.email}")
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level="INFO")
    Base.metadata.create_all(bind=engine)
    seed_demo_data()
