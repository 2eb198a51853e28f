from collections import Counter

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session, joinedload

from database.db import get_db, utc_now
from dependencies.security import get_current_user, require_staff
from models.attendance import Attendance as AttendanceModel
from models.courses import Course as CourseModel
from models.users import User as UserModel
from schemas.attendance import Attendance as AttendanceSchema, AttendanceCreate, AttendanceUpdate

router = APIRouter(prefix="/attendance", tags=["attendance"])


def _serialize(record: AttendanceModel) -> dict:
    out = AttendanceSchema.model_validate(record)
    out.student_name = record.student.name if record.student else None
    return out.model_dump(mode="json")


# ==========================================================
# [1] read
# ==========================================================

# ✅ [READ] attendance of one course, newest first
@router.get("/")
def read_course_attendance(
    course_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    user: UserModel = Depends(get_current_user),
):
    query = (
        db.query(AttendanceModel)
        .options(joinedload(AttendanceModel.student))
        .filter(AttendanceModel.course_id == course_id)
    )
    if user.role != "staff":
        query = query.filter(AttendanceModel.student_id == user.id)
    records = query.order_by(AttendanceModel.attendance_date.desc(), AttendanceModel.id.desc()).all()

    status_counter = Counter(r.status for r in records)
    return {
        "success": True,
        "data": {
            "course_id": course_id,
            "total": len(records),
            "by_status": dict(status_counter),
            "attendance": [_serialize(r) for r in records],
        },
    }


# ==========================================================
# [2] write (staff)
# ==========================================================

# ✅ [CREATE] record one student's attendance
@router.post("/", status_code=201)
def create_attendance(body: AttendanceCreate, db: Session = Depends(get_db), staff: UserModel = Depends(require_staff)):
    if db.query(CourseModel).filter(CourseModel.id == body.course_id).first() is None:
        raise HTTPException(status_code=404, detail="Course not found")
    if db.query(UserModel).filter(UserModel.id == body.student_id).first() is None:
        raise HTTPException(status_code=404, detail="Student not found")

    record = AttendanceModel(
        student_id=body.student_id,
        course_id=body.course_id,
        attendance_date=body.attendance_date or utc_now(),
        status=body.status,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return {"success": True, "data": _serialize(record), "message": "Attendance record created successfully"}


# ✅ [UPDATE] change status only
@router.patch("/{attendance_id}")
def update_attendance(
    attendance_id: int,
    body: AttendanceUpdate,
    db: Session = Depends(get_db),
    staff: UserModel = Depends(require_staff),
):
    record = db.query(AttendanceModel).filter(AttendanceModel.id == attendance_id).first()
    if record is None:
        raise HTTPException(status_code=404, detail="Attendance record not found")

    record.status = body.status
    db.commit()
    db.refresh(record)
    return {"success": True, "data": _serialize(record), "message": "Attendance updated"}
