"""
Catalog data loading and caching.

This module handles loading the bundled catalog and requirement files with
caching so every evaluator call reads from memory.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import CATALOG_DIR
from ..models import CatalogCourse, GenEdCourse

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads and caches all static catalog and requirement data.

    WHY CACHING: Evaluators run on every refresh of every view. Loading the
    JSON once and keeping the parsed tables around makes them plain lookups.

    WHY LAZY LOADING: Properties only load files when first accessed.
    The transcript parser never touches the major definitions, so they are
    never read in that flow.

    DATA SOURCES (advising/data/catalog/):
    - gen_ed_rules.json: Checklist items, EP domains, Building Connections
    - gen_ed_courses.json: Gen-ed course list with domain tags
    - undergrad_courses.json: All undergraduate courses (search & add)
    - majors.json: Modeled major requirements, keyed by program key
    - minors.json: Modeled minor requirements, keyed by lowercase name
    - minor_suggestions.json: Candidate minors with matching keywords
    - seed_profile.json: Demo student created on first run

    Everything here is read-only; callers must not mutate returned objects.

    Usage:
        catalog = CatalogLoader()
        artist = catalog.gen_ed_courses_for_domain("A")
        key, major = catalog.find_major("BS Information Science")
    """

    def __init__(self, catalog_dir: Optional[Path] = None):
        self.catalog_dir = Path(catalog_dir) if catalog_dir else CATALOG_DIR
        # Private cache variables - None means "not loaded yet"
        self._gen_ed_rules = None
        self._gen_ed_courses = None
        self._undergrad_courses = None
        self._majors = None
        self._minors = None
        self._minor_suggestions = None
        self._seed_profile = None
        self._course_index = None

    def _load_json(self, filename: str):
        filepath = self.catalog_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Catalog file not found: {filepath}")
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loaded catalog file %s", filepath)
        return data

    @property
    def gen_ed_rules(self) -> dict:
        """
        Shape of the gen-ed requirements.

        Defines which checklist items exist and the unit thresholds for
        each Exploring Perspectives domain and Building Connections.
        """
        if self._gen_ed_rules is None:
            self._gen_ed_rules = self._load_json("gen_ed_rules.json")
        return self._gen_ed_rules

    @property
    def gen_ed_courses(self) -> list:
        """Gen-ed course list as GenEdCourse objects, in catalog order."""
        if self._gen_ed_courses is None:
            raw = self._load_json("gen_ed_courses.json")
            self._gen_ed_courses = [GenEdCourse.from_dict(c) for c in raw]
        return self._gen_ed_courses

    @property
    def undergrad_courses(self) -> list:
        """All-undergraduate catalog as CatalogCourse objects."""
        if self._undergrad_courses is None:
            raw = self._load_json("undergrad_courses.json")
            self._undergrad_courses = [CatalogCourse.from_dict(c) for c in raw]
        return self._undergrad_courses

    @property
    def majors(self) -> dict:
        if self._majors is None:
            self._majors = self._load_json("majors.json")
        return self._majors

    @property
    def minors(self) -> dict:
        if self._minors is None:
            self._minors = self._load_json("minors.json")
        return self._minors

    @property
    def minor_suggestions(self) -> list:
        if self._minor_suggestions is None:
            self._minor_suggestions = self._load_json("minor_suggestions.json")
        return self._minor_suggestions

    @property
    def seed_profile(self) -> dict:
        """Demo profile data (without id, createdAt or genEdChecks)."""
        if self._seed_profile is None:
            self._seed_profile = self._load_json("seed_profile.json")
        return self._seed_profile

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def gen_ed_courses_for_domain(self, domain_key: str) -> list:
        """Gen-ed courses tagged with a domain key ("A", "H", "N", "S", "B")."""
        return [c for c in self.gen_ed_courses if domain_key in c.domains]

    def _build_course_index(self) -> dict:
        """
        Build a lookup table of course_code -> CatalogCourse.

        Gen-ed entries are folded in so that every course the engines may
        recommend resolves to a name and unit count. The undergrad catalog
        wins when a code appears in both.
        """
        if self._course_index is not None:
            return self._course_index

        index = {}
        for course in self.gen_ed_courses:
            index[course.code] = CatalogCourse(
                code=course.code,
                name=course.name,
                units=course.units,
                department=course.code.split(" ")[0],
            )
        for course in self.undergrad_courses:
            index[course.code] = course

        self._course_index = index
        return index

    def lookup_course(self, code: str) -> Optional[CatalogCourse]:
        """Catalog entry for an exact course code, or None."""
        return self._build_course_index().get(code)

    def search_courses(self, query: str, limit: int = 12) -> list:
        """
        Search the catalog by code or name (case-insensitive substring).

        Queries shorter than two characters return nothing so that a single
        keystroke doesn't list the whole catalog.
        """
        query = query.strip().lower()
        if len(query) < 2:
            return []
        matches = [
            c for c in self._build_course_index().values()
            if query in c.code.lower() or query in c.name.lower()
        ]
        matches.sort(key=lambda c: c.code)
        return matches[:limit]

    def find_major(self, major_name: str) -> Optional[tuple]:
        """
        Find a modeled major by free-text name.

        Uses case-insensitive SUBSTRING matching against each program's
        match terms, so "BS Information Science", "information science (BS)"
        and "BSIS" all resolve to the same program.

        Returns:
            (program_key, program_data) or None if the major isn't modeled
        """
        normalized = major_name.lower()
        for key, major in self.majors.items():
            if any(term in normalized for term in major.get("match", [])):
                return key, major
        return None

    def find_minor(self, minor_name: str) -> Optional[dict]:
        """Find a modeled minor by exact (lowercased) name."""
        return self.minors.get(minor_name.strip().lower())

    def list_major_names(self) -> list:
        return sorted(m["name"] for m in self.majors.values())

    def list_minor_names(self) -> list:
        return sorted(m["name"] for m in self.minors.values())
