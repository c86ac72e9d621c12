"""
Data models for the advising system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the engines, the store and the UI.
"""

from .course import CompletedCourse, CatalogCourse, GenEdCourse, CourseStatus, is_upper_division
from .profile import StudentProfile, GenEdChecks
from .progress import (
    DomainStatus,
    GenEdProgress,
    MajorProgress,
    RequirementCourse,
    RequirementGroup,
    MajorBreakdown,
    MinorProgress,
    GraduationEstimate,
)
from .recommendation import SuggestedMinor, RecommendedCourse

__all__ = [
    # Course models
    "CompletedCourse",
    "CatalogCourse",
    "GenEdCourse",
    "CourseStatus",
    "is_upper_division",
    # Profile
    "StudentProfile",
    "GenEdChecks",
    # Progress results
    "DomainStatus",
    "GenEdProgress",
    "MajorProgress",
    "RequirementCourse",
    "RequirementGroup",
    "MajorBreakdown",
    "MinorProgress",
    "GraduationEstimate",
    # Recommendation models
    "SuggestedMinor",
    "RecommendedCourse",
]
