from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base, utc_now


class Attendance(Base):
    __tablename__ = "attendance"  # attendance records per course session

    id = Column(Integer, primary_key=True, index=True)                         # attendance ID (PK)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)       # student
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)      # course
    attendance_date = Column(DateTime, default=utc_now, nullable=False)
    status = Column(String(20), nullable=False, default="present")            # present | absent | late | excused

    student = relationship("User")
