"""
Semester self-review insights.
- generate_insight: one rule-based sentence per review
- generate_summary: short paragraph across all of a student's reviews
"""

from typing import Protocol, Sequence


class ReviewLike(Protocol):
    semester_id: str
    gpa: float
    time_management: int
    difficulty: int
    engagement: int


def generate_insight(review: ReviewLike) -> str:
    if review.gpa < 3.0 and review.time_management <= 2:
        return "Low GPA may be related to poor time management."
    if review.gpa >= 3.5 and review.engagement >= 4:
        return "High engagement correlates with strong academic performance."
    if review.difficulty >= 4 and review.gpa >= 3.5:
        return "You perform well under challenging academic conditions."
    return "Your academic performance is stable this semester."


def generate_summary(reviews: Sequence[ReviewLike]) -> str:
    if not reviews:
        return "No reviews available."

    avg_gpa = sum(r.gpa for r in reviews) / len(reviews)
    avg_time = sum(r.time_management for r in reviews) / len(reviews)
    low_gpa = [r for r in reviews if r.gpa < 3.0]
    high_gpa = [r for r in reviews if r.gpa >= 3.5]
    hard_semesters = [r for r in reviews if r.difficulty >= 4 and r.gpa >= 3.5]

    parts = [
        f"You have completed {len(reviews)} semester(s).",
        f"Your average GPA is {avg_gpa:.2f}.",
    ]
    if low_gpa:
        parts.append("Some semesters had GPA below 3.0, consider reviewing time management.")
    if high_gpa:
        parts.append("Several semesters were strong (GPA >= 3.5), well done!")
    parts.append(f"Your average time management rating is {avg_time:.1f}.")
    if hard_semesters:
        parts.append("You handled high difficulty semesters well, showing strong resilience.")
    return " ".join(parts)
