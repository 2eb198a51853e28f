from sqlalchemy import Column, Integer, Float, String, Text, ForeignKey, UniqueConstraint
from database.db import Base


class SemesterReview(Base):
    __tablename__ = "semester_reviews"  # student self-review, one per semester
    __table_args__ = (UniqueConstraint("student_id", "semester_id", name="uq_review_student_semester"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    semester_id = Column(String(20), nullable=False)      # e.g. Y2S1
    gpa = Column(Float, nullable=False)
    time_management = Column(Integer, nullable=False)     # 1-5
    difficulty = Column(Integer, nullable=False)          # 1-5
    engagement = Column(Integer, nullable=False)          # 1-5
    notes = Column(Text, default="")
