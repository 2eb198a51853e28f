from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database.db import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)                 # course ID (PK)
    course_name = Column(String(150), nullable=False)                  # e.g. Web Development
    course_code = Column(String(30), unique=True, nullable=False)      # e.g. WD101
    staff_id = Column(Integer, ForeignKey("users.id"), nullable=False) # owning lecturer

    staff = relationship("User")
