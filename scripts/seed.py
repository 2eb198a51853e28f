import csv
import os

from sqlalchemy.orm import Session

from database.db import Base, SessionLocal, engine
from models.attendance import Attendance as AttendanceModel
from models.courses import Course as CourseModel
from models.enrollments import Enrollment as EnrollmentModel
from models.results import Result as ResultModel
from models.reviews import SemesterReview as ReviewModel  # noqa: F401  (registers the table)
from models.users import User as UserModel
from services.gpa import grade_to_point
from utils.security import hash_password

RESULTS_CSV_PATH = "data/results.csv"  # ✅ optional: student_email,course_code,grade,credit,semester


def _get_or_create_user(db: Session, name: str, email: str, role: str) -> UserModel:
    user = db.query(UserModel).filter(UserModel.email == email).first()
    if user is None:
        user = UserModel(name=name, email=email, password=hash_password("password123"), role=role)
        db.add(user)
        db.flush()
    return user


def _import_results_csv(db: Session, path: str) -> int:
    count = 0
    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            student = db.query(UserModel).filter(UserModel.email == row["student_email"]).first()
            course = db.query(CourseModel).filter(CourseModel.course_code == row["course_code"]).first()
            if student is None or course is None:
                print(f"⚠️ skipped row, unknown student or course: {row}")
                continue
            try:
                grade_point = grade_to_point(row["grade"])   # same table as the API
                credit = int(row["credit"])
            except (ValueError, TypeError):
                print(f"⚠️ skipped row, invalid grade or credit: {row}")
                continue
            if credit <= 0:
                print(f"⚠️ skipped row, credit must be positive: {row}")
                continue
            db.add(ResultModel(
                student_id=student.id,
                course_id=course.id,
                grade=row["grade"].strip().upper(),
                grade_point=grade_point,
                credit=credit,
                semester=(row.get("semester") or "").strip() or None,
            ))
            count += 1
    return count


def seed():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        # 1) staff + student
        staff = _get_or_create_user(db, "Alice Lecturer", "alice@university.edu", "staff")
        student = _get_or_create_user(db, "Bob Student", "bob@student.edu", "student")

        # 2) course
        course = db.query(CourseModel).filter(CourseModel.course_code == "WD101").first()
        if course is None:
            course = CourseModel(course_name="Web Development", course_code="WD101", staff_id=staff.id)
            db.add(course)
            db.flush()

        # 3) enrollment + attendance
        enrolled = (
            db.query(EnrollmentModel)
            .filter(EnrollmentModel.student_id == student.id, EnrollmentModel.course_id == course.id)
            .first()
        )
        if enrolled is None:
            db.add(EnrollmentModel(student_id=student.id, course_id=course.id))
            db.add(AttendanceModel(student_id=student.id, course_id=course.id))

        # 4) results from CSV, when present
        imported = _import_results_csv(db, RESULTS_CSV_PATH) if os.path.exists(RESULTS_CSV_PATH) else 0

        db.commit()
    finally:
        db.close()
    print(f"✅ Seed data inserted successfully ({imported} results imported)")


if __name__ == "__main__":
    seed()
