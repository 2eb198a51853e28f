from typing import List

from sqlalchemy.orm import Session, joinedload

from models.results import Result as ResultModel
from schemas.results import Result as ResultSchema
from services.gpa import ResultRecord


def query_results(db: Session, student_id: int) -> List[ResultModel]:
    return (
        db.query(ResultModel)
        .options(joinedload(ResultModel.course))
        .filter(ResultModel.student_id == student_id)
        .order_by(ResultModel.created_at.asc(), ResultModel.id.asc())
        .all()
    )


def to_record(result: ResultModel) -> ResultRecord:
    return ResultRecord(
        grade_point=result.grade_point,
        credit=result.credit,
        semester=result.semester,
        grade=result.grade,
    )


def load_records(db: Session, student_id: int) -> List[ResultRecord]:
    return [to_record(r) for r in query_results(db, student_id)]


def serialize_result(result: ResultModel) -> dict:
    out = ResultSchema.model_validate(result)
    out.course_name = result.course.course_name if result.course else None
    return out.model_dump(mode="json")
