from typing import List

from pydantic import BaseModel, ConfigDict, Field


# ✅ input: PUT /reviews/{semester_id}
class ReviewUpsert(BaseModel):
    gpa: float = Field(..., ge=0, le=4.0)
    time_management: int = Field(3, ge=1, le=5)
    difficulty: int = Field(3, ge=1, le=5)
    engagement: int = Field(3, ge=1, le=5)
    notes: str = ""


# ✅ output
class Review(BaseModel):
    id: int
    semester_id: str
    gpa: float
    time_management: int
    difficulty: int
    engagement: int
    notes: str = ""
    insight: str

    model_config = ConfigDict(from_attributes=True)


class ReviewSummary(BaseModel):
    reviews: List[Review]
    summary: str
