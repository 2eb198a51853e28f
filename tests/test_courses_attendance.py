import unittest
from datetime import datetime, timedelta, timezone

from api_support import ApiTestCase


class CourseApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.staff, self.staff_headers = self.register_and_auth(
            name="Alice Lecturer", email="alice@university.edu", role="staff"
        )
        self.student, self.headers = self.register_and_auth()

    def test_create_and_list(self):
        course = self.create_course(self.staff_headers, code="wd101")
        self.assertEqual(course["course_code"], "WD101")
        self.assertEqual(course["staff_id"], self.staff["id"])

        _, other_staff = self.register_and_auth(name="Carl", email="carl@university.edu", role="staff")
        self.create_course(other_staff, name="Databases", code="DB201")

        everything = self.client.get("/api/courses/").json()["data"]
        self.assertEqual(len(everything), 2)
        mine = self.client.get("/api/courses/", params={"staff_id": self.staff["id"]}).json()["data"]
        self.assertEqual([c["course_code"] for c in mine], ["WD101"])

    def test_duplicate_code_conflicts(self):
        self.create_course(self.staff_headers)
        r = self.client.post(
            "/api/courses/", json={"course_name": "Again", "course_code": "WD101"}, headers=self.staff_headers
        )
        self.assertEqual(r.status_code, 409)
        self.assertEqual(r.json()["error"]["message"], "Course code already exists")

    def test_students_cannot_create_courses(self):
        r = self.client.post("/api/courses/", json={"course_name": "X", "course_code": "X1"}, headers=self.headers)
        self.assertEqual(r.status_code, 403)

    def test_read_single_course(self):
        course = self.create_course(self.staff_headers)
        self.assertEqual(self.client.get(f"/api/courses/{course['id']}").json()["data"]["course_name"], "Web Development")
        self.assertEqual(self.client.get("/api/courses/999").status_code, 404)

    def test_enroll_once(self):
        course = self.create_course(self.staff_headers)
        r = self.client.post(f"/api/courses/{course['id']}/enroll", headers=self.headers)
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["data"]["student_id"], self.student["id"])
        r = self.client.post(f"/api/courses/{course['id']}/enroll", headers=self.headers)
        self.assertEqual(r.status_code, 409)


class AttendanceApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        _, self.staff_headers = self.register_and_auth(name="Alice", email="alice@university.edu", role="staff")
        self.student, self.headers = self.register_and_auth()
        self.course = self.create_course(self.staff_headers)

    def record(self, date, status="present"):
        r = self.client.post(
            "/api/attendance/",
            json={
                "student_id": self.student["id"],
                "course_id": self.course["id"],
                "attendance_date": date,
                "status": status,
            },
            headers=self.staff_headers,
        )
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()["data"]

    def test_list_newest_first_with_student_name(self):
        self.record("2025-03-01T09:00:00")
        self.record("2025-03-08T09:00:00", status="late")

        r = self.client.get("/api/attendance/", params={"course_id": self.course["id"]}, headers=self.staff_headers)
        data = r.json()["data"]
        self.assertEqual(data["total"], 2)
        self.assertEqual(data["by_status"], {"late": 1, "present": 1})
        self.assertEqual([a["status"] for a in data["attendance"]], ["late", "present"])
        self.assertEqual(data["attendance"][0]["student_name"], "Bob Student")

    def test_students_only_see_their_own(self):
        self.record("2025-03-01T09:00:00")
        _, other = self.register_and_auth(name="Eve", email="eve@student.edu")
        r = self.client.get("/api/attendance/", params={"course_id": self.course["id"]}, headers=other)
        self.assertEqual(r.json()["data"]["total"], 0)
        r = self.client.get("/api/attendance/", params={"course_id": self.course["id"]}, headers=self.headers)
        self.assertEqual(r.json()["data"]["total"], 1)

    def test_missing_date_defaults_to_current_utc_time(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        record = self.record(None)
        stamp = datetime.fromisoformat(record["attendance_date"])
        self.assertIsNone(stamp.tzinfo)
        self.assertLess(abs(stamp - before), timedelta(minutes=1))

    def test_update_status(self):
        record = self.record("2025-03-01T09:00:00")
        r = self.client.patch(f"/api/attendance/{record['id']}", json={"status": "absent"}, headers=self.staff_headers)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["status"], "absent")

    def test_update_rules(self):
        record = self.record("2025-03-01T09:00:00")
        r = self.client.patch(f"/api/attendance/{record['id']}", json={"status": "asleep"}, headers=self.staff_headers)
        self.assertEqual(r.status_code, 422)
        r = self.client.patch(f"/api/attendance/{record['id']}", json={"status": "absent"}, headers=self.headers)
        self.assertEqual(r.status_code, 403)
        r = self.client.patch("/api/attendance/999", json={"status": "absent"}, headers=self.staff_headers)
        self.assertEqual(r.status_code, 404)


class ReviewApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        _, self.headers = self.register_and_auth()

    def save(self, semester_id, **body):
        r = self.client.put(f"/api/reviews/{semester_id}", json=body, headers=self.headers)
        self.assertEqual(r.status_code, 200, r.text)
        return r.json()["data"]

    def test_save_replaces_same_semester(self):
        self.save("Y1S1", gpa=2.8, time_management=2)
        review = self.save("Y1S1", gpa=3.6, engagement=5)
        self.assertEqual(review["gpa"], 3.6)
        self.assertIn("engagement", review["insight"])
        self.assertEqual(len(self.client.get("/api/reviews/", headers=self.headers).json()["data"]), 1)

    def test_summary(self):
        self.save("Y1S1", gpa=2.5, time_management=2)
        self.save("Y1S2", gpa=3.5, time_management=4)
        data = self.client.get("/api/reviews/summary", headers=self.headers).json()["data"]
        self.assertEqual([r["semester_id"] for r in data["reviews"]], ["Y1S1", "Y1S2"])
        self.assertIn("Your average GPA is 3.00.", data["summary"])

    def test_empty_summary(self):
        data = self.client.get("/api/reviews/summary", headers=self.headers).json()["data"]
        self.assertEqual(data, {"reviews": [], "summary": "No reviews available."})

    def test_delete(self):
        self.save("Y2S1", gpa=3.0)
        self.assertEqual(self.client.delete("/api/reviews/Y2S1", headers=self.headers).status_code, 200)
        self.assertEqual(self.client.delete("/api/reviews/Y2S1", headers=self.headers).status_code, 404)

    def test_rating_bounds(self):
        r = self.client.put("/api/reviews/Y1S1", json={"gpa": 3.0, "difficulty": 6}, headers=self.headers)
        self.assertEqual(r.status_code, 422)


if __name__ == "__main__":
    unittest.main()
