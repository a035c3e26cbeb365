import importlib.util
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[2]


def alembic_config(url):
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", url)
    return config


def load_initial_revision():
    path = ROOT / "alembic" / "versions" / "0001_initial.py"
    spec = importlib.util.spec_from_file_location("initial_revision", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_upgrade_and_downgrade(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = alembic_config(url)

    command.upgrade(config, "head")
    tables = set(inspect(create_engine(url)).get_table_names())
    assert {
        "users",
        "students",
        "teachers",
        "videos",
        "assignments",
        "assignment_submissions",
        "quizzes_tasks",
        "announcements",
        "enrolled_courses",
        "teacher_requests",
        "messages",
    } <= tables

    command.downgrade(config, "base")
    assert set(inspect(create_engine(url)).get_table_names()) <= {"alembic_version"}


def test_enum_columns_do_not_create_types():
    revision = load_initial_revision()
    # Shared by users, students and teachers; the type is created once up front.
    assert revision.user_role_type.create_type is False
    assert revision.request_status_type.create_type is False
