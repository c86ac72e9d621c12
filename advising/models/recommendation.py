"""
Recommendation data models.

Contains dataclasses for suggested minors and recommended next courses.
"""

from dataclasses import dataclass


@dataclass
class SuggestedMinor:
    """
    A minor the student has not selected but might like.

    reason is the highest-priority signal that fired:
    interests > major complement > related courses > generic description.
    """
    name: str
    reason: str
    overlap: int        # Department prefixes already covered by completed courses
    score: int          # Relevance score used for ranking


@dataclass
class RecommendedCourse:
    """
    A course suggested for an upcoming semester.

    Priority is a plain integer, higher first. The category tells the UI
    which requirement the course would move forward:
        "seminar", "building_connections", "exploring_perspectives",
        "emphasis", "major", "minor"
    """
    code: str
    name: str
    units: float
    priority: int
    category: str
    reason: str
