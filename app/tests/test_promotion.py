from fastapi import status

from app.models import Student, Teacher, TeacherRequest, TeacherRequestStatus, User, UserRole


def test_create_teacher_request(client, db_session):
    response = client.post(
        "/teacher-requests",
        json={"name": "Ana", "email": "ana@x.com", "course": "Physics"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    request = db_session.query(TeacherRequest).filter(TeacherRequest.id == response.json()["insertedId"]).one()
    assert request.status == TeacherRequestStatus.pending
    assert request.message == ""


def test_create_teacher_request_requires_course(client):
    response = client.post("/teacher-requests", json={"name": "Ana", "email": "ana@x.com"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_approve_promotes_student(client, db_session, make_student, make_request):
    make_student(email="ana@x.com", roll=3)
    request = make_request(email="ana@x.com", course="Physics")

    response = client.put(f"/teacher-requests/approve/{request.id}")
    assert response.status_code == status.HTTP_200_OK
    teacher_data = response.json()["teacherData"]
    assert teacher_data["role"] == "teacher"
    assert [course["name"] for course in teacher_data["courses"]] == ["Physics"]

    db_session.expire_all()
    assert db_session.query(Student).filter(Student.email == "ana@x.com").count() == 0

    teacher = db_session.query(Teacher).filter(Teacher.email == "ana@x.com").one()
    assert len(teacher.courses) == 1
    assert teacher.courses[0]["name"] == "Physics"
    assert teacher.courses[0]["students"] == []
    assert teacher.your_old == "15"

    user = db_session.query(User).filter(User.email == "ana@x.com").one()
    assert user.role == UserRole.teacher

    stored = db_session.query(TeacherRequest).filter(TeacherRequest.id == request.id).one()
    assert stored.status == TeacherRequestStatus.approved


def test_approve_missing_student(client, db_session, make_request):
    request = make_request(email="ghost@x.com")
    response = client.put(f"/teacher-requests/approve/{request.id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Student data not found"

    db_session.expire_all()
    assert db_session.query(TeacherRequest).one().status == TeacherRequestStatus.pending


def test_approve_unknown_request(client):
    response = client.put(f"/teacher-requests/approve/{'0' * 32}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_approve_malformed_id(client):
    response = client.put("/teacher-requests/approve/not-an-id")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_reject_changes_only_status(client, db_session, make_student, make_request):
    student = make_student(email="ana@x.com")
    request = make_request(email="ana@x.com")

    response = client.put(f"/teacher-requests/{request.id}", json={"status": "Rejected"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == "Request rejected successfully"

    listed = client.get("/admin/teacher-requests").json()
    assert [r["status"] for r in listed] == ["Rejected"]

    db_session.expire_all()
    assert db_session.query(Student).filter(Student.id == student.id).count() == 1
    assert db_session.query(Teacher).count() == 0
    assert db_session.query(User).filter(User.email == "ana@x.com").one().role == UserRole.student


def test_rejected_request_is_terminal(client, make_student, make_request):
    make_student(email="ana@x.com")
    request = make_request(email="ana@x.com")
    client.put(f"/teacher-requests/{request.id}", json={"status": "Rejected"})

    assert client.put(f"/teacher-requests/approve/{request.id}").status_code == status.HTTP_409_CONFLICT
    response = client.put(f"/teacher-requests/{request.id}", json={"status": "Pending"})
    assert response.status_code == status.HTTP_409_CONFLICT


def test_status_update_rejects_unknown_status(client, make_request):
    request = make_request()
    response = client.put(f"/teacher-requests/{request.id}", json={"status": "Approved"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_delete_request(client, db_session, make_request):
    request = make_request()
    assert client.delete(f"/teacher-requests/{request.id}").status_code == status.HTTP_200_OK
    assert client.delete(f"/teacher-requests/{request.id}").status_code == status.HTTP_404_NOT_FOUND


def test_approved_request_is_terminal(client, db_session, make_student, make_request):
    make_student(email="ana@x.com")
    request = make_request(email="ana@x.com")
    assert client.put(f"/teacher-requests/approve/{request.id}").status_code == status.HTTP_200_OK

    response = client.put(f"/teacher-requests/approve/{request.id}")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "Request already approved"
    for target in ("Rejected", "Pending"):
        response = client.put(f"/teacher-requests/{request.id}", json={"status": target})
        assert response.status_code == status.HTTP_409_CONFLICT

    db_session.expire_all()
    assert db_session.query(TeacherRequest).one().status == TeacherRequestStatus.approved
    assert db_session.query(Teacher).count() == 1
