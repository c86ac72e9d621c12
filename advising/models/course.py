"""
Course data models.

Contains the CompletedCourse record stored on a student profile, the
catalog entry types loaded from the bundled JSON data, and the
CourseStatus enum used in requirement breakdowns.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..config import UPPER_DIVISION_COURSE_NUMBER

_COURSE_NUMBER = re.compile(r"\s(\d{3})")


def is_upper_division(code: str) -> bool:
    """True for 300- and 400-level codes ("MUS 327", "ISTA 498")."""
    match = _COURSE_NUMBER.search(code)
    return bool(match) and int(match.group(1)) >= UPPER_DIVISION_COURSE_NUMBER


class CourseStatus(Enum):
    """
    State of a requirement course relative to a student's record.

    COMPLETED: On the completed-courses list
    IN_PROGRESS: On the current-courses list (enrolled, no grade yet)
    NOT_TAKEN: Neither completed nor enrolled (used for gap analysis)
    """
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    NOT_TAKEN = "not_taken"


@dataclass(frozen=True)
class CompletedCourse:
    """
    A single course on a student's record.

    Used for both completed and in-progress enrollment; in-progress entries
    usually have no grade. Instances are never mutated: to change a course,
    remove it and add a new one.

    Attributes:
        code: Canonical "DEPT NUM" code (e.g., "ENGL 101")
        name: Display name, may be empty for transcript imports
        units: Unit count (typically 1-5)
        grade: Letter grade if known (e.g., "B+")
        semester: Term label (e.g., "Fall 2024")
    """
    code: str
    name: str
    units: float
    grade: Optional[str] = None
    semester: Optional[str] = None

    @property
    def department(self) -> str:
        """Department prefix of the code ("ENGL 101" -> "ENGL")."""
        return self.code.split(" ")[0]

    def to_dict(self) -> dict:
        data = {"code": self.code, "name": self.name, "units": self.units}
        if self.grade is not None:
            data["grade"] = self.grade
        if self.semester is not None:
            data["semester"] = self.semester
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedCourse":
        return cls(
            code=data["code"],
            name=data.get("name", ""),
            units=float(data.get("units", 0) or 0),
            grade=data.get("grade"),
            semester=data.get("semester"),
        )


@dataclass(frozen=True)
class GenEdCourse:
    """
    An entry of the general-education course list.

    Domain tags:
        A = The Artist, H = The Humanist, N = The Natural Scientist,
        S = The Social Scientist, B = Building Connections
    """
    code: str
    name: str
    units: float
    domains: tuple                      # Domain keys this course counts toward
    attributes: tuple = ()              # "writing", "quant", "world_culture"
    description: str = ""
    prerequisite: Optional[str] = None  # Free-text prerequisite note

    @classmethod
    def from_dict(cls, data: dict) -> "GenEdCourse":
        return cls(
            code=data["code"],
            name=data["name"],
            units=float(data["units"]),
            domains=tuple(data.get("domains", [])),
            attributes=tuple(data.get("attributes") or []),
            description=data.get("description", ""),
            prerequisite=data.get("prerequisite"),
        )


@dataclass(frozen=True)
class CatalogCourse:
    """An entry of the all-undergraduate course catalog."""
    code: str
    name: str
    units: float
    department: str = field(default="")

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogCourse":
        return cls(
            code=data["code"],
            name=data["name"],
            units=float(data["units"]),
            department=data.get("department") or data["code"].split(" ")[0],
        )
