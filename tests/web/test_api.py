from __future__ import annotations

from src.school_attendance.school_attendance.attendance.qr import student_qr_payload


def _add_student(client, **overrides):
    payload = {
        "studentId": "S001",
        "name": "Alex Johnson",
        "class": "Grade 10-A",
        "parentName": "Sarah Johnson",
        "parentEmail": "parent@school.com",
        "parentPhone": "1234567892",
    }
    payload.update(overrides)
    return client.post("/api/teacher/students", json=payload)


def test_login_returns_user_and_dashboard(client, login):
    res = login("admin@school.com", "admin")

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["user"]["id"] == "admin-1"
    assert body["redirect"] == "/admin"

    me = client.get("/api/me").get_json()
    assert me["user"]["email"] == "admin@school.com"


def test_login_failures(client, login):
    assert client.post("/api/login", json={"email": "admin@school.com"}).status_code == 400

    res = login("admin@school.com", "teacher")
    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid credentials or user not found"


def test_form_login_is_accepted(client):
    res = client.post("/api/login", data={"email": "parent@school.com", "role": "parent"})
    assert res.status_code == 200


def test_guards(client, login):
    assert client.get("/api/me").status_code == 401
    assert client.get("/admin").status_code == 401

    login("parent@school.com", "parent")
    assert client.get("/admin").status_code == 403
    assert client.post("/api/teacher/students", json={}).status_code == 403


def test_logout(client, login):
    login("teacher@school.com", "teacher")
    assert client.post("/api/logout").status_code == 200
    assert client.post("/api/logout").status_code == 200
    assert client.get("/teacher").status_code == 401


def test_admin_manages_teachers_and_classes(client, login, app):
    login("admin@school.com", "admin")

    res = client.post(
        "/api/admin/teachers",
        json={"teacherId": "T002", "name": "Ada Lovelace", "email": "ada@school.com", "phone": "555"},
    )
    assert res.status_code == 201
    assert res.get_json()["teacher"]["teacherId"] == "T002"

    assert client.post("/api/admin/teachers", json={"name": "No Code"}).status_code == 400

    res = client.post("/api/admin/classes", json={"name": "Grade 12-A", "subjects": ["Physics", "Biology"]})
    assert res.status_code == 201
    assert client.post("/api/admin/classes", json={"name": "Grade 12-B", "subjects": ["Physics", ""]}).status_code == 400

    dashboard = client.get("/admin").get_json()
    assert [t["teacherId"] for t in dashboard["teachers"]] == ["T001", "T002"]
    assert dashboard["classes"][-1]["subjects"] == ["Physics", "Biology"]

    client.post("/api/logout")
    assert login("ada@school.com", "teacher").status_code == 200


def test_teacher_flow_and_parent_report(client, login):
    login("teacher@school.com", "teacher")

    res = _add_student(client)
    assert res.status_code == 201
    student = res.get_json()["student"]
    assert student["teacherId"] == "teacher-1"
    assert _add_student(client, parentEmail="").status_code == 400

    res = client.post("/api/teacher/attendance", json={"studentId": student["id"]})
    assert res.status_code == 201
    assert res.get_json()["message"] == "Alex Johnson marked as present"

    res = client.post("/api/teacher/attendance", json={"studentId": student["id"], "status": "Absent"})
    assert res.status_code == 201

    res = client.post("/api/teacher/attendance/scan", json={"qr_code": student_qr_payload(student["id"])})
    assert res.status_code == 201
    assert client.post("/api/teacher/attendance/scan", json={"qr_code": "garbage"}).status_code == 400

    res = client.post("/api/teacher/grades", json={"studentId": student["id"], "subject": "Mathematics", "marks": 85})
    assert res.status_code == 201
    assert client.post("/api/teacher/grades", json={"studentId": student["id"], "subject": "Art", "marks": 120}).status_code == 400

    dashboard = client.get("/teacher").get_json()
    assert dashboard["todayCount"] == 3
    assert len(client.get("/api/teacher/attendance").get_json()["records"]) == 3
    assert len(client.get(f"/api/teacher/students/{student['id']}/grades").get_json()["grades"]) == 1

    res = client.post("/api/teacher/notify", json={"studentId": student["id"], "channel": "sms"})
    assert res.get_json()["recipient"] == "1234567892"

    client.post("/api/logout")
    login("parent@school.com", "parent")

    report = client.get("/api/parent/report").get_json()
    assert report["student"]["id"] == student["id"]
    assert report["presentCount"] == 2
    assert report["absentCount"] == 1
    assert report["attendancePercentage"] == 67
    assert report["averageGrade"] == 85
    assert report["grades"][0]["band"] == "good"

    assert client.get("/parent").get_json() == report


def test_student_qr_image(client, login):
    login("teacher@school.com", "teacher")
    student = _add_student(client).get_json()["student"]

    res = client.get(f"/api/teacher/students/{student['id']}/qr")
    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert res.data[:8] == b"\x89PNG\r\n\x1a\n"

    assert client.get("/api/teacher/students/student-missing/qr").status_code == 404


def test_filter_students_by_class(client, login):
    login("teacher@school.com", "teacher")
    _add_student(client)
    _add_student(client, studentId="S002", name="Bo", **{"class": "Grade 11-A"})

    students = client.get("/api/teacher/students", query_string={"class": "Grade 11-A"}).get_json()["students"]
    assert [s["name"] for s in students] == ["Bo"]


def test_parent_without_students_sees_demo_student(client, login):
    login("parent@school.com", "parent")

    report = client.get("/api/parent/report").get_json()
    assert report["student"]["id"] == "demo-student-1"
    assert report["student"]["parentName"] == "Sarah Johnson"
    assert [g["marks"] for g in report["grades"]] == [85, 92, 78, 88]
    assert report["averageGrade"] == 86
    assert report["attendance"] == []

    assert client.get("/api/parent/report").get_json()["grades"] == report["grades"]


def test_malformed_numbers_and_lists_are_rejected(client, login):
    login("admin@school.com", "admin")
    assert client.post("/api/admin/classes", json={"name": "Grade 12-A", "subjects": 5}).status_code == 400

    client.post("/api/logout")
    login("teacher@school.com", "teacher")
    student = _add_student(client).get_json()["student"]
    res = client.post("/api/teacher/grades", json={"studentId": student["id"], "subject": "Art", "marks": 10**400})
    assert res.status_code == 400


def test_unknown_route_is_json(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert res.get_json()["success"] is False
