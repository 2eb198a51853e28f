from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.results import Result


class SemesterGpa(BaseModel):
    semester: str
    gpa: float
    trend: Literal["up", "down", "same"]
    prev_gpa: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class SemesterGroup(BaseModel):
    semester: str
    gpa: float
    credits: int
    results: List[Result]


class GpaSummary(BaseModel):
    cgpa: float
    total_credits: int
    total_points: float
    semesters: List[SemesterGpa]
    grouped: List[SemesterGroup]


# ✅ input: POST /gpa/target
class TargetPlanRequest(BaseModel):
    target_cgpa: float = Field(..., ge=0, le=4.0)
    remaining_semesters: int = Field(1, description="<= 0 is accepted and reported as not applicable")
    avg_credits_per_semester: int = Field(10)
    student_id: Optional[int] = None


class TargetPlan(BaseModel):
    current_cgpa: float
    current_credits: int
    current_points: float
    target_cgpa: float
    remaining_semesters: int
    avg_credits_per_semester: int
    remaining_credits: int
    required_gpa: float
    applicable: bool
    achievable: bool
    difficulty: str

    model_config = ConfigDict(from_attributes=True)


class GradeScale(BaseModel):
    points: Dict[str, float]
