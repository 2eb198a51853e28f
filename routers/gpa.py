from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_current_user, resolve_student_id
from models.users import User as UserModel
from schemas.gpa import (
    GpaSummary, GradeScale, SemesterGpa, SemesterGroup, TargetPlan, TargetPlanRequest,
)
from services.gpa import GRADE_POINTS, UNKNOWN_SEMESTER, plan_target, semester_gpa, summarize_results
from services.result_service import query_results, serialize_result, to_record

router = APIRouter(prefix="/gpa", tags=["gpa"])


# ✅ [SCALE] letter grade -> grade point table
@router.get("/scale")
def read_grade_scale():
    return {"success": True, "data": GradeScale(points=GRADE_POINTS).model_dump()}


# ✅ [SUMMARY] CGPA, semester trend and results grouped by semester
@router.get("/summary")
def read_summary(
    student_id: Optional[int] = Query(None),
    numeric_order: bool = Query(False, description='order "Y{n}S{n}" tokens numerically instead of as strings'),
    db: Session = Depends(get_db),
    user: UserModel = Depends(get_current_user),
):
    target = resolve_student_id(user, student_id)
    rows = query_results(db, target)
    summary = summarize_results([to_record(r) for r in rows], numeric=numeric_order)

    rows_by_semester = {}
    for row in rows:
        rows_by_semester.setdefault(row.semester or UNKNOWN_SEMESTER, []).append(row)

    grouped = [
        SemesterGroup(
            semester=sem.semester,
            gpa=semester_gpa(summary.grouped[sem.semester]),
            credits=sum(r.credit for r in summary.grouped[sem.semester]),
            results=[serialize_result(r) for r in rows_by_semester[sem.semester]],
        )
        for sem in summary.semesters
    ]
    data = GpaSummary(
        cgpa=summary.cgpa,
        total_credits=summary.total_credits,
        total_points=summary.total_points,
        semesters=[SemesterGpa.model_validate(s) for s in summary.semesters],
        grouped=grouped,
    )
    return {"success": True, "data": data.model_dump(mode="json")}


# ✅ [TARGET] GPA needed in the remaining semesters to reach a target CGPA
@router.post("/target")
def plan_target_cgpa(body: TargetPlanRequest, db: Session = Depends(get_db), user: UserModel = Depends(get_current_user)):
    target = resolve_student_id(user, body.student_id)
    records = [to_record(r) for r in query_results(db, target)]
    plan = plan_target(records, body.target_cgpa, body.remaining_semesters, body.avg_credits_per_semester)
    message = None if plan.applicable else "No remaining credits: target planning is not applicable"
    return {"success": True, "data": TargetPlan.model_validate(plan).model_dump(), "message": message}
