from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

AttendanceStatus = Literal["present", "absent", "late", "excused"]


# ✅ input: POST /attendance
class AttendanceCreate(BaseModel):
    student_id: int
    course_id: int
    attendance_date: Optional[datetime] = None
    status: AttendanceStatus = "present"


# ✅ input: PATCH /attendance/{id}
class AttendanceUpdate(BaseModel):
    status: AttendanceStatus


# ✅ output
class Attendance(BaseModel):
    id: int
    student_id: int
    student_name: Optional[str] = None
    course_id: int
    attendance_date: datetime
    status: str

    model_config = ConfigDict(from_attributes=True)
