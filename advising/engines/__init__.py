"""
Progress and recommendation engines.

This package contains the engines that perform the core business logic of
the advising system. All of them are pure functions of (profile, catalog).
"""

from .gen_ed import GenEdProgressEngine
from .degree import DegreeProgressEngine
from .recommendation import RecommendationEngine, interest_keywords
from .graduation import GraduationEstimator

__all__ = [
    "GenEdProgressEngine",
    "DegreeProgressEngine",
    "RecommendationEngine",
    "GraduationEstimator",
    "interest_keywords",
]
