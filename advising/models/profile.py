"""
Student profile data models.

The StudentProfile is the root aggregate of the system: every progress
number shown anywhere is derived from it, nothing derived is stored on it.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Optional

from ..config import PROFILE_SCHEMA_VERSION
from .course import CompletedCourse


@dataclass(frozen=True)
class GenEdChecks:
    """
    Checklist items the student ticks off by hand.

    These are never inferred from completed courses: placement exams,
    transfer credit and waivers all satisfy them without a course record.
    """
    engl101: bool = False
    engl102: bool = False
    math: bool = False
    lang1: bool = False
    lang2: bool = False
    univ101: bool = False
    univ301: bool = False

    @classmethod
    def keys(cls) -> list:
        return [f.name for f in fields(cls)]

    def merged(self, **changes) -> "GenEdChecks":
        """Return a copy with the given items updated; unknown keys raise."""
        unknown = set(changes) - set(self.keys())
        if unknown:
            raise ValueError(f"Unknown gen ed checklist item(s): {', '.join(sorted(unknown))}")
        return replace(self, **{k: bool(v) for k, v in changes.items()})

    def to_dict(self) -> dict:
        return {k: getattr(self, k) for k in self.keys()}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "GenEdChecks":
        data = data or {}
        return cls(**{k: bool(data.get(k, False)) for k in cls.keys()})


@dataclass
class StudentProfile:
    """
    A single student's record.

    Persisted as one JSON object per profile (camelCase keys). Majors are an
    ordered list of 1-3 names; the first is treated as the primary major
    for display.
    """
    id: str
    name: str
    majors: list                                       # Major names, in declared order
    interests: str = ""                                # Free text, weak relevance signal
    created_at: str = ""                               # ISO date (YYYY-MM-DD)
    completed_courses: list = field(default_factory=list)  # CompletedCourse
    current_courses: list = field(default_factory=list)    # CompletedCourse, in progress
    selected_minors: list = field(default_factory=list)
    gen_ed_checks: GenEdChecks = field(default_factory=GenEdChecks)
    emphasis: Optional[str] = None                     # Preferred emphasis track
    catalog_year: str = ""
    plan_semester: str = ""
    schema_version: int = PROFILE_SCHEMA_VERSION

    @property
    def primary_major(self) -> str:
        return self.majors[0] if self.majors else ""

    @property
    def completed_codes(self) -> set:
        return {c.code for c in self.completed_courses}

    @property
    def current_codes(self) -> set:
        return {c.code for c in self.current_courses}

    @property
    def taken_codes(self) -> set:
        """Codes that are completed or currently enrolled."""
        return self.completed_codes | self.current_codes

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "majors": list(self.majors),
            "interests": self.interests,
            "catalogYear": self.catalog_year,
            "completedCourses": [c.to_dict() for c in self.completed_courses],
            "currentCourses": [c.to_dict() for c in self.current_courses],
            "selectedMinors": list(self.selected_minors),
            "planSemester": self.plan_semester,
            "createdAt": self.created_at,
            "genEdChecks": self.gen_ed_checks.to_dict(),
            "schemaVersion": self.schema_version,
        }
        if self.emphasis:
            data["emphasis"] = self.emphasis
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "StudentProfile":
        """
        Build a profile from its persisted form.

        Expects the current record shape; older records must be passed
        through storage.migrations.upgrade_profile_record first.
        """
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            majors=list(data.get("majors") or []),
            interests=data.get("interests") or "",
            created_at=data.get("createdAt", ""),
            completed_courses=[CompletedCourse.from_dict(c) for c in data.get("completedCourses") or []],
            current_courses=[CompletedCourse.from_dict(c) for c in data.get("currentCourses") or []],
            selected_minors=list(data.get("selectedMinors") or []),
            gen_ed_checks=GenEdChecks.from_dict(data.get("genEdChecks")),
            emphasis=data.get("emphasis"),
            catalog_year=data.get("catalogYear", ""),
            plan_semester=data.get("planSemester", ""),
            schema_version=data.get("schemaVersion", PROFILE_SCHEMA_VERSION),
        )
