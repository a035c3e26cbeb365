from app.db.init_db import seed_demo_data
from app.models import Announcement, Assignment, Student, Teacher, User, UserRole


def test_seed_demo_data(db_session):
    seed_demo_data(db_session)

    roles = {user.email: user.role for user in db_session.query(User).all()}
    assert roles == {
        "admin@schoolmate.dev": UserRole.admin,
        "ana@schoolmate.dev": UserRole.student,
        "ivan@schoolmate.dev": UserRole.teacher,
    }
    assert db_session.query(Student).one().roll == 1
    assert db_session.query(Teacher).one().courses[0]["name"] == "English"
    assert db_session.query(Announcement).count() == 1
    assert db_session.query(Assignment).count() == 1


def test_seed_is_skipped_when_users_exist(db_session, make_teacher_user):
    make_teacher_user()
    seed_demo_data(db_session)
    assert db_session.query(User).count() == 1
    assert db_session.query(Student).count() == 0
