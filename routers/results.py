import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_current_user, require_staff, resolve_student_id
from models.courses import Course as CourseModel
from models.results import Result as ResultModel
from models.users import User as UserModel
from schemas.results import ResultCreate, ResultUpdate, GradeCount
from services.gpa import grade_to_point, grade_distribution
from services.result_service import query_results, serialize_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/results", tags=["results"])


def _get_owned_result(db: Session, result_id: int, user: UserModel) -> ResultModel:
    result = db.query(ResultModel).filter(ResultModel.id == result_id).first()
    if result is None:
        raise HTTPException(status_code=404, detail="Result not found")
    if result.student_id != user.id and user.role != "staff":
        raise HTTPException(status_code=403, detail="Not allowed to modify this result")
    return result


# ==========================================================
# [1] read
# ==========================================================

# ✅ [READ] results of the current student (staff: any student_id)
@router.get("/")
def read_results(
    student_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    user: UserModel = Depends(get_current_user),
):
    target = resolve_student_id(user, student_id)
    return {"success": True, "data": [serialize_result(r) for r in query_results(db, target)]}


# ✅ [STATS] grade distribution of one course
@router.get("/stats")
def read_grade_stats(
    course_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
    staff: UserModel = Depends(require_staff),
):
    grades = [row.grade for row in db.query(ResultModel.grade).filter(ResultModel.course_id == course_id).all()]
    distribution = grade_distribution(grades)
    return {
        "success": True,
        "data": {
            "course_id": course_id,
            "total": len(grades),
            "stats": [GradeCount(grade=g, count=c).model_dump() for g, c in distribution.items()],
        },
    }


# ==========================================================
# [2] write
# ==========================================================

# ✅ [CREATE] grade_point always comes from the grade table
@router.post("/", status_code=201)
def create_result(body: ResultCreate, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    student_id = resolve_student_id(user, body.student_id)
    if db.query(CourseModel).filter(CourseModel.id == body.course_id).first() is None:
        raise HTTPException(status_code=404, detail="Course not found")

    result = ResultModel(
        student_id=student_id,
        course_id=body.course_id,
        grade=body.grade,
        grade_point=grade_to_point(body.grade),
        credit=body.credit,
        semester=body.semester,
    )
    db.add(result)
    db.commit()
    db.refresh(result)
    logger.info("Result %s created for student %s", result.id, student_id)
    return {"success": True, "data": serialize_result(result), "message": "Result added successfully"}


# ✅ [UPDATE] last write wins
@router.put("/{result_id}")
def update_result(
    result_id: int,
    body: ResultUpdate,
    db: Session = Depends(get_db),
    user: UserModel = Depends(get_current_user),
):
    result = _get_owned_result(db, result_id, user)
    result.grade = body.grade
    result.grade_point = grade_to_point(body.grade)
    result.credit = body.credit
    result.semester = body.semester
    db.commit()
    db.refresh(result)
    return {"success": True, "data": serialize_result(result), "message": "Result updated successfully"}


# ✅ [DELETE]
@router.delete("/{result_id}")
def delete_result(result_id: int, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    result = _get_owned_result(db, result_id, user)
    db.delete(result)
    db.commit()
    return {"success": True, "data": {"result_id": result_id}, "message": "Deleted"}
