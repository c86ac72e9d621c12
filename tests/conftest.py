"""Shared fixtures for the advising test suite."""

from datetime import date, datetime, timezone

import pytest

from advising.data import CatalogLoader
from advising.engines import (
    DegreeProgressEngine,
    GenEdProgressEngine,
    GraduationEstimator,
    RecommendationEngine,
)
from advising.models import CompletedCourse, GenEdChecks, StudentProfile
from advising.storage import MemoryStore, ProfileStore

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def catalog():
    return CatalogLoader()


@pytest.fixture
def gen_ed_engine(catalog):
    return GenEdProgressEngine(catalog)


@pytest.fixture
def degree_engine(catalog):
    return DegreeProgressEngine(catalog)


@pytest.fixture
def recommendation_engine(catalog, gen_ed_engine, degree_engine):
    return RecommendationEngine(catalog, gen_ed_engine, degree_engine)


@pytest.fixture
def graduation_estimator():
    return GraduationEstimator(clock=lambda: date(2026, 3, 1))


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def backend():
    return MemoryStore()


@pytest.fixture
def store(backend, clock):
    return ProfileStore(backend, clock=clock)


@pytest.fixture
def make_profile():
    """
    Build a StudentProfile without going through the store.

    completed/current accept CompletedCourse objects, (code, units) pairs
    or bare codes (3 units each).
    """
    def _make(completed=(), current=(), checks=None, majors=None, minors=(),
              interests="", emphasis=None, name="Test Student"):
        def as_course(c):
            if isinstance(c, str):
                return CompletedCourse(code=c, name="", units=3)
            if isinstance(c, tuple):
                return CompletedCourse(code=c[0], name="", units=c[1])
            return c

        return StudentProfile(
            id="test-1",
            name=name,
            majors=list(majors) if majors is not None else ["BS Information Science"],
            interests=interests,
            completed_courses=[as_course(c) for c in completed],
            current_courses=[as_course(c) for c in current],
            selected_minors=list(minors),
            gen_ed_checks=GenEdChecks(**(checks or {})),
            emphasis=emphasis,
        )

    return _make
