from fastapi import status

from app.db.base import is_valid_id
from app.models import EnrolledCourse, Student, Teacher, User


def test_root(client):
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert "Running" in response.json()["message"]


def test_list_and_get_students(client, make_student):
    student = make_student()

    listed = client.get("/admin/students").json()
    assert [s["email"] for s in listed] == ["ana@x.com"]

    response = client.get(f"/admin/students/{student.id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["yourOld"] == "15"


def test_student_lookup_errors(client):
    assert client.get("/admin/students/not-an-id").status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/admin/students/{'0' * 32}").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/students/email/nobody@x.com").status_code == status.HTTP_404_NOT_FOUND


def test_update_student(client, make_student):
    student = make_student()
    response = client.put(f"/admin/students/{student.id}", json={"village": "Rampur", "name": None})
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["village"] == "Rampur"
    assert body["name"] == "Ana"
    assert body["gender"] == "female"


def test_delete_student_removes_student_user(client, db_session, make_student):
    student = make_student()
    response = client.delete(f"/admin/students/{student.id}")
    assert response.status_code == status.HTTP_200_OK

    db_session.expire_all()
    assert db_session.query(Student).count() == 0
    assert db_session.query(User).filter(User.email == "ana@x.com").count() == 0


def test_teacher_crud(client, db_session, make_student, make_request):
    make_student()
    request = make_request()
    client.put(f"/teacher-requests/approve/{request.id}")
    teacher = db_session.query(Teacher).one()

    assert client.get("/teachers/email/ana@x.com").json()["id"] == teacher.id
    assert [t["id"] for t in client.get("/admin/teachers").json()] == [teacher.id]

    assert client.put(f"/admin/teachers/{teacher.id}", json={}).status_code == status.HTTP_400_BAD_REQUEST

    response = client.put(
        f"/admin/teachers/{teacher.id}",
        json={"mobileNumber": "555-0101", "courses": [{"name": "Physics"}, {"name": "Maths"}]},
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["mobileNumber"] == "555-0101"
    assert [c["name"] for c in body["courses"]] == ["Physics", "Maths"]

    assert client.delete(f"/admin/teachers/{teacher.id}").status_code == status.HTTP_200_OK
    assert client.get(f"/admin/teachers/{teacher.id}").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/teachers/email/ana@x.com").status_code == status.HTTP_404_NOT_FOUND


def test_announcements(client):
    response = client.post("/admin/announcements", json={"title": "Exams", "message": "Start Monday", "sentBy": "admin@x.com"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["message"] == "Announcement sent"
    announcement_id = response.json()["id"]

    client.post("/admin/announcements", json={"title": "Holiday", "message": "No classes Friday"})

    assert [a["title"] for a in client.get("/student/announcements").json()] == ["Holiday", "Exams"]
    assert client.get("/teacher/announcements").json() == client.get("/admin/announcements").json()

    response = client.put(f"/admin/announcements/{announcement_id}", json={"message": "Start Tuesday"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Start Tuesday"
    assert response.json()["title"] == "Exams"

    assert client.delete(f"/admin/announcements/{announcement_id}").status_code == status.HTTP_200_OK
    assert len(client.get("/student/announcements").json()) == 1


def test_announcement_requires_title(client):
    response = client.post("/admin/announcements", json={"message": "No title"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_quizzes_tasks(client):
    response = client.post(
        "/admin/quizzes-tasks",
        json={"title": "Quiz 1", "questions": [{"q": "2+2", "a": "4"}], "id": "ignored"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    task = response.json()
    assert task["title"] == "Quiz 1"
    assert task["id"] != "ignored"

    response = client.put(f"/admin/quizzes-tasks/{task['id']}", json={"title": "Quiz 1 (revised)"})
    assert response.json()["questions"] == [{"q": "2+2", "a": "4"}]

    listed = client.get("/quizzes-tasks").json()
    assert listed == [{"title": "Quiz 1 (revised)", "questions": [{"q": "2+2", "a": "4"}], "id": task["id"]}]
    assert client.get("/admin/quizzes-tasks").json() == listed

    assert client.delete(f"/admin/quizzes-tasks/{task['id']}").status_code == status.HTTP_200_OK
    assert client.get("/quizzes-tasks").json() == []


def test_empty_task_rejected(client):
    assert client.post("/admin/quizzes-tasks", json={}).status_code == status.HTTP_400_BAD_REQUEST


def test_my_courses_empty(client):
    assert client.get("/my-courses/ana@x.com").json() == []


def test_update_announcement_ignores_null_for_required_fields(client):
    announcement_id = client.post("/admin/announcements", json={"title": "Exams", "message": "Start Monday"}).json()["id"]

    response = client.put(f"/admin/announcements/{announcement_id}", json={"title": None, "message": None, "sentBy": None})
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["title"] == "Exams"
    assert body["message"] == "Start Monday"
    assert body["sentBy"] is None


def test_my_courses_filters_by_student(client, db_session):
    db_session.add_all(
        [
            EnrolledCourse(student_email="ana@x.com", course_id="c-101", course_name="Physics"),
            EnrolledCourse(student_email="ana@x.com", course_id="c-102"),
            EnrolledCourse(student_email="bob@x.com", course_id="c-101", course_name="Physics"),
        ]
    )
    db_session.commit()

    courses = client.get("/my-courses/ana@x.com").json()
    assert sorted(c["courseId"] for c in courses) == ["c-101", "c-102"]
    assert {c["studentEmail"] for c in courses} == {"ana@x.com"}
    physics = next(c for c in courses if c["courseId"] == "c-101")
    assert physics["courseName"] == "Physics"
    assert physics["enrolledAt"] is not None
    assert next(c for c in courses if c["courseId"] == "c-102")["courseName"] is None


def test_id_with_trailing_newline_is_rejected(client, make_student):
    student = make_student()
    assert not is_valid_id(student.id + "\n")
    assert client.get(f"/admin/students/{student.id}%0A").status_code == status.HTTP_400_BAD_REQUEST
