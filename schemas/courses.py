from pydantic import BaseModel, ConfigDict, Field


# ✅ input: POST /courses
class CourseCreate(BaseModel):
    course_name: str = Field(..., min_length=1, max_length=150)
    course_code: str = Field(..., min_length=1, max_length=30)


# ✅ output
class Course(BaseModel):
    id: int
    course_name: str
    course_code: str
    staff_id: int

    model_config = ConfigDict(from_attributes=True)


class Enrollment(BaseModel):
    id: int
    student_id: int
    course_id: int

    model_config = ConfigDict(from_attributes=True)
