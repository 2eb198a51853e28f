from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from database.db import Base, utc_now


class Result(Base):
    __tablename__ = "results"  # one graded course per row
    __table_args__ = (CheckConstraint("credit > 0", name="ck_results_credit_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    grade = Column(String(5), nullable=False)                          # letter grade, e.g. A-, B+
    grade_point = Column(Float, nullable=False)                        # table lookup of grade at write time
    credit = Column(Integer, nullable=False)                           # credit hours
    semester = Column(String(20))                                      # token such as Y1S1
    created_at = Column(DateTime, default=utc_now, nullable=False)

    course = relationship("Course")
