from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.gpa import grade_to_point


class _GradeFields(BaseModel):
    grade: str = Field(..., description="letter grade, e.g. A+, B-, F")
    credit: int = Field(..., gt=0, description="credit hours, must be positive")
    semester: Optional[str] = Field(default=None, max_length=20, description='e.g. "Y1S1"')

    @field_validator("grade")
    @classmethod
    def _known_grade(cls, v: str) -> str:
        # InvalidGradeError is a ValueError, so pydantic reports it as a 422
        grade_to_point(v)
        return v.strip().upper()

    @field_validator("semester")
    @classmethod
    def _strip_semester(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


# ✅ input: POST /results
class ResultCreate(_GradeFields):
    course_id: int
    student_id: Optional[int] = Field(default=None, description="staff only; students always write their own")


# ✅ input: PUT /results/{id}
class ResultUpdate(_GradeFields):
    pass


# ✅ output
class Result(BaseModel):
    id: int
    student_id: int
    course_id: int
    course_name: Optional[str] = None
    grade: str
    grade_point: float
    credit: int
    semester: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GradeCount(BaseModel):
    grade: str
    count: int
