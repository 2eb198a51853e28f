"""
services/gpa.py

GPA aggregation and target planning over a student's course results.
Everything here is pure: no DB access, no logging, no HTTP.

- Points and credits are accumulated un-rounded; each public function rounds
  only its own output to 2 decimals.
- Zero total credits yields 0.0 instead of raising.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

UNKNOWN_SEMESTER = "Unknown"
MAX_GRADE_POINT = 4.0

GRADE_POINTS: dict[str, float] = {
    "A+": 4.00,
    "A": 4.00,
    "A-": 3.67,
    "B+": 3.33,
    "B": 3.00,
    "B-": 2.67,
    "C+": 2.33,
    "C": 2.00,
    "F": 0.00,
}

_SEMESTER_TOKEN = re.compile(r"^Y(\d+)S(\d+)$", re.IGNORECASE)


class InvalidGradeError(ValueError):
    """Raised when a letter grade is not in GRADE_POINTS."""

    def __init__(self, grade: object) -> None:
        self.grade = grade
        super().__init__(f"Unsupported letter grade: {grade!r}")


@dataclass(frozen=True)
class ResultRecord:
    grade_point: float
    credit: int
    semester: Optional[str] = None
    grade: Optional[str] = None


@dataclass(frozen=True)
class SemesterGpa:
    semester: str
    gpa: float
    trend: str = "same"
    prev_gpa: Optional[float] = None


@dataclass(frozen=True)
class TargetPlan:
    current_cgpa: float
    current_credits: int
    current_points: float
    target_cgpa: float
    remaining_semesters: int
    avg_credits_per_semester: int
    remaining_credits: int
    required_gpa: float
    applicable: bool
    achievable: bool
    difficulty: str


@dataclass(frozen=True)
class GpaSummary:
    cgpa: float
    total_credits: int
    total_points: float
    semesters: list[SemesterGpa] = field(default_factory=list)
    grouped: dict[str, list[ResultRecord]] = field(default_factory=dict)


def grade_to_point(grade: str) -> float:
    try:
        return GRADE_POINTS[grade.strip().upper()]
    except (KeyError, AttributeError) as exc:
        raise InvalidGradeError(grade) from exc


def point_to_grades(point: float) -> list[str]:
    """Letters that map to ``point``. 4.00 is shared by A+ and A."""
    return [letter for letter, value in GRADE_POINTS.items() if abs(value - point) < 1e-9]


def _totals(results: Iterable[ResultRecord]) -> tuple[float, int]:
    points = 0.0
    credits = 0
    for r in results:
        points += r.grade_point * r.credit
        credits += r.credit
    return points, credits


def _weighted_average(points: float, credits: int) -> float:
    if credits <= 0:
        return 0.0
    return points / credits


def cumulative_gpa(results: Iterable[ResultRecord]) -> float:
    points, credits = _totals(results)
    return round(_weighted_average(points, credits), 2)


def semester_gpa(results_in_semester: Iterable[ResultRecord]) -> float:
    points, credits = _totals(results_in_semester)
    return round(_weighted_average(points, credits), 2)


def group_by_semester(results: Iterable[ResultRecord]) -> dict[str, list[ResultRecord]]:
    groups: dict[str, list[ResultRecord]] = {}
    for r in results:
        groups.setdefault(r.semester or UNKNOWN_SEMESTER, []).append(r)
    return groups


def semester_sort_key(semester: str, *, numeric: bool = False):
    """
    Sort key for semester tokens.

    The default is plain string order, which is only chronological while
    year and semester numbers stay single-digit ("Y1S1" < "Y1S2" < "Y2S1").
    ``numeric=True`` parses "Y{year}S{sem}" into integers instead; tokens that
    do not follow that pattern sort after all parsed ones, by string.
    """
    if not numeric:
        return semester
    match = _SEMESTER_TOKEN.match(semester)
    if match is None:
        return (1, 0, 0, semester)
    return (0, int(match.group(1)), int(match.group(2)), semester)


def _trend(current: float, previous: Optional[float]) -> str:
    if previous is None:
        return "same"
    if current > previous:
        return "up"
    if current < previous:
        return "down"
    return "same"


def semester_trend_series(results: Iterable[ResultRecord], *, numeric: bool = False) -> list[SemesterGpa]:
    groups = group_by_semester(results)
    ordered = sorted(groups, key=lambda sem: semester_sort_key(sem, numeric=numeric))

    series: list[SemesterGpa] = []
    previous: Optional[float] = None
    for sem in ordered:
        gpa = semester_gpa(groups[sem])
        series.append(SemesterGpa(semester=sem, gpa=gpa, trend=_trend(gpa, previous), prev_gpa=previous))
        previous = gpa
    return series


def _required_gpa(
    current_points: float,
    current_credits: float,
    target_cgpa: float,
    remaining_credits: float,
) -> float:
    if remaining_credits <= 0:
        return 0.0
    target_total_points = target_cgpa * (current_credits + remaining_credits)
    return (target_total_points - current_points) / remaining_credits


def required_future_gpa(
    current_points: float,
    current_credits: float,
    target_cgpa: float,
    remaining_semesters: int,
    avg_credits_per_semester: float,
) -> float:
    remaining_credits = remaining_semesters * avg_credits_per_semester
    return round(_required_gpa(current_points, current_credits, target_cgpa, remaining_credits), 2)


def target_difficulty(required_gpa: float) -> str:
    if required_gpa > MAX_GRADE_POINT:
        return "not achievable"
    if required_gpa > 3.5:
        return "challenging"
    if required_gpa > 3.0:
        return "moderate"
    return "achievable"


def plan_target(
    results: Iterable[ResultRecord],
    target_cgpa: float,
    remaining_semesters: int,
    avg_credits_per_semester: int,
) -> TargetPlan:
    points, credits = _totals(results)
    remaining_credits = remaining_semesters * avg_credits_per_semester
    # labels are judged on the exact value; only the reported figure is rounded
    required = _required_gpa(points, credits, target_cgpa, remaining_credits)
    return TargetPlan(
        current_cgpa=round(_weighted_average(points, credits), 2),
        current_credits=credits,
        current_points=round(points, 2),
        target_cgpa=target_cgpa,
        remaining_semesters=remaining_semesters,
        avg_credits_per_semester=avg_credits_per_semester,
        remaining_credits=max(remaining_credits, 0),
        required_gpa=round(required, 2),
        applicable=remaining_credits > 0,
        achievable=required <= MAX_GRADE_POINT,
        difficulty=target_difficulty(required),
    )


def grade_distribution(grades: Iterable[str]) -> dict[str, int]:
    counts = Counter(grades)
    return {grade: counts[grade] for grade in sorted(counts)}


def summarize_results(results: Iterable[ResultRecord], *, numeric: bool = False) -> GpaSummary:
    records = list(results)
    points, credits = _totals(records)
    return GpaSummary(
        cgpa=round(_weighted_average(points, credits), 2),
        total_credits=credits,
        total_points=round(points, 2),
        semesters=semester_trend_series(records, numeric=numeric),
        grouped=group_by_semester(records),
    )
