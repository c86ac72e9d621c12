"""
Graduation Estimator.

Projects a graduation term from the units on a student's record.
"""

import math
from datetime import date
from typing import Callable, Optional

from ..config import (
    TOTAL_GRADUATION_UNITS,
    UNITS_PER_SEMESTER,
    UPPER_DIVISION_MIN_UNITS,
    percent_of,
)
from ..models import GraduationEstimate, StudentProfile, is_upper_division


def first_semester(today: date) -> tuple:
    """
    The next regular semester a student can enroll in.

    January-May counts toward the current Spring, June-August toward the
    coming Fall, September-December toward next year's Spring.

    Returns:
        (season, year) with season "Spring" or "Fall"
    """
    if today.month <= 5:
        return "Spring", today.year
    if today.month <= 8:
        return "Fall", today.year
    return "Spring", today.year + 1


def nth_semester(start: tuple, n: int) -> tuple:
    """Semester reached after counting n regular semesters from start (n=1 is start)."""
    season, year = start
    for _ in range(n - 1):
        if season == "Spring":
            season = "Fall"
        else:
            season, year = "Spring", year + 1
    return season, year


def semester_label(season: str, year: int) -> str:
    """Commencement label for a semester: Spring ends in May, Fall in December."""
    return f"May {year}" if season == "Spring" else f"Dec {year}"


class GraduationEstimator:
    """
    Estimates when a student will finish the 120-unit degree.

    ASSUMPTIONS:
    ------------
    - Every in-progress course will be passed
    - 15 units per regular semester, no summer terms
    - The 42-unit upper-division minimum is reported, not projected

    The clock is injected so estimates are reproducible:
        GraduationEstimator(clock=lambda: date(2026, 3, 1))
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        self.clock = clock or date.today

    def estimate(self, profile: StudentProfile, today: Optional[date] = None) -> GraduationEstimate:
        """
        Project a graduation term.

        Args:
            profile: Student to project
            today: Evaluation date, defaults to the injected clock

        Returns:
            GraduationEstimate with label "Ready" when nothing remains
        """
        completed_units = sum(c.units for c in profile.completed_courses)
        in_progress_units = sum(c.units for c in profile.current_courses)
        upper_units = sum(c.units for c in profile.completed_courses if is_upper_division(c.code))

        remaining = max(0, TOTAL_GRADUATION_UNITS - completed_units - in_progress_units)
        percent = min(100, percent_of(TOTAL_GRADUATION_UNITS - remaining, TOTAL_GRADUATION_UNITS))

        if remaining <= 0:
            return GraduationEstimate(
                label="Ready",
                percent=100,
                remaining_units=0,
                semesters_needed=0,
                completed_units=completed_units,
                in_progress_units=in_progress_units,
                upper_division_units=upper_units,
                upper_division_min=UPPER_DIVISION_MIN_UNITS,
            )

        semesters = math.ceil(remaining / UNITS_PER_SEMESTER)
        start = first_semester(today or self.clock())
        season, year = nth_semester(start, semesters)

        return GraduationEstimate(
            label=semester_label(season, year),
            percent=percent,
            remaining_units=remaining,
            semesters_needed=semesters,
            completed_units=completed_units,
            in_progress_units=in_progress_units,
            upper_division_units=upper_units,
            upper_division_min=UPPER_DIVISION_MIN_UNITS,
        )
