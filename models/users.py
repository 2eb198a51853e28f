from sqlalchemy import Column, Integer, String, DateTime
from database.db import Base, utc_now


class User(Base):
    __tablename__ = "users"  # students and staff share one table

    id = Column(Integer, primary_key=True, index=True)                 # user ID (PK)
    name = Column(String(100), nullable=False)                         # display name
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)                     # bcrypt hash, never plain text
    role = Column(String(20), nullable=False, default="student")       # student | staff
    created_at = Column(DateTime, default=utc_now, nullable=False)
