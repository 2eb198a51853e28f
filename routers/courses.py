from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_current_user, require_staff
from models.courses import Course as CourseModel
from models.enrollments import Enrollment as EnrollmentModel
from models.users import User as UserModel
from schemas.courses import CourseCreate, Course as CourseSchema, Enrollment as EnrollmentSchema

router = APIRouter(prefix="/courses", tags=["courses"])


# ✅ [READ] all courses, or one lecturer's courses
@router.get("/")
def read_courses(
    staff_id: Optional[int] = Query(None, description="only courses taught by this staff member"),
    db: Session = Depends(get_db),
):
    query = db.query(CourseModel)
    if staff_id:
        query = query.filter(CourseModel.staff_id == staff_id)
    records = query.order_by(CourseModel.id).all()
    return {
        "success": True,
        "data": [CourseSchema.model_validate(c).model_dump() for c in records],
    }


# ✅ [CREATE] staff creates a course they own
@router.post("/", status_code=201)
def create_course(course: CourseCreate, db: Session = Depends(get_db), staff: UserModel = Depends(require_staff)):
    code = course.course_code.strip().upper()
    if db.query(CourseModel).filter(CourseModel.course_code == code).first():
        raise HTTPException(status_code=409, detail="Course code already exists")

    db_course = CourseModel(course_name=course.course_name.strip(), course_code=code, staff_id=staff.id)
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    return {
        "success": True,
        "data": CourseSchema.model_validate(db_course).model_dump(),
        "message": "Course created",
    }


# ✅ [READ] single course
@router.get("/{course_id}")
def read_course(course_id: int, db: Session = Depends(get_db)):
    course = db.query(CourseModel).filter(CourseModel.id == course_id).first()
    if course is None:
        raise HTTPException(status_code=404, detail="Course not found")
    return {"success": True, "data": CourseSchema.model_validate(course).model_dump()}


# ✅ [ENROLL] current student joins a course
@router.post("/{course_id}/enroll", status_code=201)
def enroll(course_id: int, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    if db.query(CourseModel).filter(CourseModel.id == course_id).first() is None:
        raise HTTPException(status_code=404, detail="Course not found")

    existing = (
        db.query(EnrollmentModel)
        .filter(EnrollmentModel.student_id == user.id, EnrollmentModel.course_id == course_id)
        .first()
    )
    if existing:
        raise HTTPException(status_code=409, detail="Already enrolled")

    enrollment = EnrollmentModel(student_id=user.id, course_id=course_id)
    db.add(enrollment)
    db.commit()
    db.refresh(enrollment)
    return {
        "success": True,
        "data": EnrollmentSchema.model_validate(enrollment).model_dump(),
        "message": "Enrolled successfully",
    }
