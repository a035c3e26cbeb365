"""initial schema

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-18 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


user_role_enum = sa.Enum("student", "teacher", "admin", name="user_role")
request_status_enum = sa.Enum("Pending", "Approved", "Rejected", name="teacher_request_status")

# Column types never emit CREATE TYPE; the types are created once in upgrade().
user_role_type = postgresql.ENUM("student", "teacher", "admin", name="user_role", create_type=False)
request_status_type = postgresql.ENUM("Pending", "Approved", "Rejected", name="teacher_request_status", create_type=False)


def profile_columns():
    return [
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, index=True),
        sa.Column("gender", sa.String(), nullable=True),
        sa.Column("your_old", sa.String(), nullable=True),
        sa.Column("mobile_number", sa.String(), nullable=True),
        sa.Column("country", sa.String(), nullable=True),
        sa.Column("division", sa.String(), nullable=True),
        sa.Column("district", sa.String(), nullable=True),
        sa.Column("village", sa.String(), nullable=True),
        sa.Column("guardian_name", sa.String(), nullable=True),
        sa.Column("birthday", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=False),
        sa.Column("roll", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("last_login", sa.DateTime(), nullable=True),
        sa.Column("role", user_role_type, nullable=False),
    ]


def upgrade() -> None:
    user_role_enum.create(op.get_bind(), checkfirst=True)
    request_status_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("image", sa.String(), nullable=False),
        sa.Column("role", user_role_type, nullable=False),
        sa.Column("roll", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("last_login", sa.DateTime(), nullable=True),
    )

    op.create_table("students", *profile_columns())
    op.create_table("teachers", *profile_columns(), sa.Column("courses", sa.JSON(), nullable=False))

    op.create_table(
        "videos",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("language", sa.String(), nullable=False, index=True),
        sa.Column("category", sa.String(), nullable=False, index=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("uploaded_by", sa.String(), nullable=False, index=True),
        sa.Column("video_url", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "assignments",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("language", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("uploaded_by", sa.String(), nullable=False, index=True),
        sa.Column("file_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "assignment_submissions",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("assignment_id", sa.String(32), nullable=False, index=True),
        sa.Column("submission_link", sa.String(), nullable=False),
        sa.Column("student_email", sa.String(), nullable=False, index=True),
        sa.Column("student_name", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("mark", sa.Float(), nullable=True),
        sa.Column("admin_comments", sa.String(), nullable=True),
        sa.Column("marked_by", sa.String(), nullable=True),
        sa.Column("marked_at", sa.DateTime(), nullable=True),
        sa.Column("acted_by", sa.String(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "quizzes_tasks",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "announcements",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("sent_by", sa.String(), nullable=True),
        sa.Column("sent_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "enrolled_courses",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("student_email", sa.String(), nullable=False, index=True),
        sa.Column("course_id", sa.String(), nullable=False),
        sa.Column("course_name", sa.String(), nullable=True),
        sa.Column("enrolled_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "teacher_requests",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, index=True),
        sa.Column("course", sa.String(), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("status", request_status_type, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("sender_email", sa.String(), nullable=False, index=True),
        sa.Column("receiver_email", sa.String(), nullable=False, index=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True, index=True),
    )


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("teacher_requests")
    op.drop_table("enrolled_courses")
    op.drop_table("announcements")
    op.drop_table("quizzes_tasks")
    op.drop_table("assignment_submissions")
    op.drop_table("assignments")
    op.drop_table("videos")
    op.drop_table("teachers")
    op.drop_table("students")
    op.drop_table("users")

    request_status_enum.drop(op.get_bind(), checkfirst=True)
    user_role_enum.drop(op.get_bind(), checkfirst=True)
