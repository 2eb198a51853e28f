from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["student", "staff"]


# ✅ input: registration
class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)
    role: Role


# ✅ input: login
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# ✅ input: profile update (password excluded)
class ProfileUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1, max_length=72)


# ✅ output: never exposes the password hash
class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    user: UserOut
    token: str
    token_type: str = "bearer"


class UserStats(BaseModel):
    cgpa: float
    credit_hours: int
