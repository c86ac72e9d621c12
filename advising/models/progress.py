"""
Progress result data models.

Contains dataclasses for representing the results of gen-ed, major, minor
and graduation evaluations. These are the view-models handed to the
presentation layer.
"""

from dataclasses import dataclass, field
from typing import Optional

from .course import CourseStatus


@dataclass
class DomainStatus:
    """
    Result of evaluating a single gen-ed domain.

    Satisfaction is by unit sum only: one 4-unit course satisfies a 3-unit
    domain on its own. min_courses is reported for display but not enforced.

    Example for the Artist domain:
        key: "A"
        name: "The Artist"
        units_completed: 3.0
        min_units: 3
        satisfied: True
        completed_codes: ["MUS 109"]
    """
    key: str
    name: str
    label: str
    units_completed: float
    min_units: float
    min_courses: int
    satisfied: bool
    completed_codes: list       # Completed course codes tagged with this domain
    available_courses: int = 0  # How many catalog courses carry this tag


@dataclass
class GenEdProgress:
    """
    Counts for each gen-ed bucket plus one overall percentage.

    overall_percent is computed from a fixed 14-slot model, see
    GenEdProgressEngine.calculate.
    """
    foundations_complete: int
    foundations_total: int
    language_complete: int
    language_total: int
    univ_complete: int
    univ_total: int
    ep_domains_complete: int
    ep_domains_total: int
    bc_units_complete: float
    bc_units_total: float
    overall_percent: int
    domains: list = field(default_factory=list)          # DomainStatus for EP domains
    building_connections: Optional[DomainStatus] = None


@dataclass
class MajorProgress:
    """
    Completion of a declared major.

    known=False means the major has no modeled requirements and the numbers
    are a rough estimate; the UI should say so instead of showing a precise
    progress bar.
    """
    name: str
    completed_courses: int
    total_courses: int
    percent: int
    known: bool


@dataclass
class RequirementCourse:
    """One course inside a requirement group, with its status."""
    code: str
    name: str
    units: float
    status: CourseStatus

    @property
    def done(self) -> bool:
        return self.status == CourseStatus.COMPLETED


@dataclass
class RequirementGroup:
    """
    A named list of requirement courses.

    kind is "core", "required" or "emphasis".
    """
    key: str
    label: str
    kind: str
    courses: list           # RequirementCourse
    target_units: float = 0

    @property
    def completed_count(self) -> int:
        return sum(1 for c in self.courses if c.done)


@dataclass
class MajorBreakdown:
    """Major progress plus the detailed requirement groups behind it."""
    progress: MajorProgress
    program: str = ""                                   # Full program name, "" when unknown
    groups: list = field(default_factory=list)          # RequirementGroup
    electives: list = field(default_factory=list)       # {"label", "units", "pick"} dicts
    emphasis_key: Optional[str] = None

    @property
    def known(self) -> bool:
        return self.progress.known


@dataclass
class MinorProgress:
    """
    Completion of a selected minor, measured in units.

    Double-dip rules are reported, not enforced: a course may count here and
    toward gen ed at the same time.
    """
    name: str
    completed_units: float
    total_units: float
    percent: int
    known: bool
    upper_division_units: float = 0
    upper_division_min: float = 0
    allows_double_dip: Optional[bool] = None
    double_dip_warning: str = ""


@dataclass
class GraduationEstimate:
    """
    Projected graduation term.

    label is "Ready" once no units remain, otherwise "May <year>" or
    "Dec <year>".
    """
    label: str
    percent: int
    remaining_units: float
    semesters_needed: int
    completed_units: float
    in_progress_units: float
    upper_division_units: float
    upper_division_min: float

    @property
    def ready(self) -> bool:
        return self.remaining_units <= 0
