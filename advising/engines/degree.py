"""
Major and Minor Progress Engine.

This module measures a student's progress through declared majors and
selected minors using the modeled program requirements.
"""

from typing import Optional

from ..config import (
    ESTIMATED_MAJOR_COURSES,
    ESTIMATED_MINOR_UNITS,
    MAJOR_ELECTIVE_SLOTS,
    MAJOR_EMPHASIS_CREDIT_CAP,
    MAJOR_EMPHASIS_SLOTS,
    percent_of,
)
from ..models import (
    CourseStatus,
    MajorBreakdown,
    MajorProgress,
    MinorProgress,
    RequirementCourse,
    RequirementGroup,
    StudentProfile,
    is_upper_division,
)
from ..data import CatalogLoader


class DegreeProgressEngine:
    """
    Measures progress through majors and minors.

    MAJOR RECOGNITION:
    ------------------
    Majors are free text on the profile. A major is "known" when any of a
    modeled program's match terms appears in it (case-insensitive
    substring), see CatalogLoader.find_major.

    KNOWN MAJOR MODEL:
    ------------------
    total = core + additional required + 3 elective slots + 5 emphasis slots
    completed = core/additional courses completed
              + min(3, completed courses in the best-matching emphasis)

    Electives are never matched against courses, so a known major tops out
    below 100% until the student's record says otherwise.

    UNKNOWN MAJOR ESTIMATE:
    -----------------------
    Every completed course counts against a nominal 15-course program.
    Results carry known=False so the UI can label them as an estimate.

    MINORS:
    -------
    Measured in units. Only courses on the minor's counted list (required,
    lower/upper division, double-dip list) contribute; units come from the
    student's own course records.
    """

    def __init__(self, catalog: CatalogLoader):
        self.catalog = catalog

    # =========================================================================
    # EMPHASIS
    # =========================================================================

    def best_emphasis(self, major: dict, codes: set) -> Optional[tuple]:
        """
        Pick the emphasis track with the most courses in `codes`.

        Ties (including all-zero) keep the first declared track.

        Returns:
            (track_key, track_data, overlap) or None if the major has no tracks
        """
        best = None
        for key, track in major.get("emphases", {}).items():
            overlap = sum(1 for code in track["courses"] if code in codes)
            if best is None or overlap > best[2]:
                best = (key, track, overlap)
        return best

    def find_emphasis(self, major: dict, emphasis: Optional[str]) -> Optional[tuple]:
        """Resolve a track by key or display name (case-insensitive)."""
        if not emphasis:
            return None
        wanted = emphasis.strip().lower()
        for key, track in major.get("emphases", {}).items():
            if wanted in (key.lower(), track["name"].lower()):
                return key, track
        return None

    # =========================================================================
    # MAJORS
    # =========================================================================

    @staticmethod
    def required_courses(major: dict) -> list:
        return list(major.get("core", [])) + list(major.get("additional_required", []))

    def major_progress(self, profile: StudentProfile, major_name: str) -> MajorProgress:
        """
        Completion of one declared major.

        Args:
            profile: Student whose completed courses are measured
            major_name: Free-text major name as declared on the profile

        Returns:
            MajorProgress; known=False for majors without modeled requirements
        """
        found = self.catalog.find_major(major_name)
        if found is None:
            count = min(len(profile.completed_courses), ESTIMATED_MAJOR_COURSES)
            return MajorProgress(
                name=major_name,
                completed_courses=count,
                total_courses=ESTIMATED_MAJOR_COURSES,
                percent=min(100, percent_of(len(profile.completed_courses), ESTIMATED_MAJOR_COURSES)),
                known=False,
            )

        _, major = found
        completed_codes = profile.completed_codes
        required = self.required_courses(major)

        completed = sum(1 for c in required if c["code"] in completed_codes)
        best = self.best_emphasis(major, completed_codes)
        if best is not None:
            completed += min(MAJOR_EMPHASIS_CREDIT_CAP, best[2])

        total = len(required) + MAJOR_ELECTIVE_SLOTS + MAJOR_EMPHASIS_SLOTS
        return MajorProgress(
            name=major_name,
            completed_courses=completed,
            total_courses=total,
            percent=percent_of(completed, total),
            known=True,
        )

    def _status(self, profile: StudentProfile, code: str) -> CourseStatus:
        if code in profile.completed_codes:
            return CourseStatus.COMPLETED
        if code in profile.current_codes:
            return CourseStatus.IN_PROGRESS
        return CourseStatus.NOT_TAKEN

    def _requirement_course(self, profile: StudentProfile, entry: dict) -> RequirementCourse:
        return RequirementCourse(
            code=entry["code"],
            name=entry.get("name", ""),
            units=float(entry.get("units", 0)),
            status=self._status(profile, entry["code"]),
        )

    def _emphasis_course(self, profile: StudentProfile, code: str) -> RequirementCourse:
        # Track lists hold bare codes; names come from the catalog
        course = self.catalog.lookup_course(code)
        return RequirementCourse(
            code=code,
            name=course.name if course else "",
            units=course.units if course else 0.0,
            status=self._status(profile, code),
        )

    def major_breakdown(self, profile: StudentProfile, major_name: str) -> MajorBreakdown:
        """
        Major progress plus the requirement groups behind it.

        Known majors get three groups (core, additional required and the
        best-matching emphasis) with a status per course, plus the elective
        categories. Unknown majors get the estimate and nothing else.
        """
        progress = self.major_progress(profile, major_name)
        found = self.catalog.find_major(major_name)
        if found is None:
            return MajorBreakdown(progress=progress)

        _, major = found
        groups = [
            RequirementGroup(
                key="core",
                label="Core",
                kind="core",
                courses=[self._requirement_course(profile, c) for c in major.get("core", [])],
            ),
            RequirementGroup(
                key="additional_required",
                label="Additional Required",
                kind="required",
                courses=[self._requirement_course(profile, c) for c in major.get("additional_required", [])],
            ),
        ]

        emphasis_key = None
        best = self.best_emphasis(major, profile.completed_codes)
        if best is not None:
            emphasis_key, track, _ = best
            groups.append(RequirementGroup(
                key=emphasis_key,
                label=f"Emphasis: {track['name']}",
                kind="emphasis",
                courses=[self._emphasis_course(profile, code) for code in track["courses"]],
                target_units=track.get("units", 0),
            ))

        return MajorBreakdown(
            progress=progress,
            program=major["name"],
            groups=groups,
            electives=list(major.get("electives", [])),
            emphasis_key=emphasis_key,
        )

    # =========================================================================
    # MINORS
    # =========================================================================

    @staticmethod
    def minor_course_codes(minor: dict) -> list:
        """
        Every course code that counts toward a minor, in listed order.

        Music counts its required course and its double-dip list; Business
        counts its lower- and upper-division lists.
        """
        codes = []
        for section in ("required", "lower_division", "upper_division", "double_dip_courses"):
            for entry in minor.get(section, []):
                if entry["code"] not in codes:
                    codes.append(entry["code"])
        return codes

    def minor_progress(self, profile: StudentProfile, minor_name: str) -> MinorProgress:
        """
        Completion of one selected minor, in units.

        Unknown minors report 0 of 18 units with known=False.
        """
        minor = self.catalog.find_minor(minor_name)
        if minor is None:
            return MinorProgress(
                name=minor_name,
                completed_units=0,
                total_units=ESTIMATED_MINOR_UNITS,
                percent=0,
                known=False,
            )

        counted = set(self.minor_course_codes(minor))
        counted_courses = [c for c in profile.completed_courses if c.code in counted]
        completed_units = sum(c.units for c in counted_courses)
        upper_units = sum(c.units for c in counted_courses if is_upper_division(c.code))
        total = minor["total_units"]

        return MinorProgress(
            name=minor_name,
            completed_units=completed_units,
            total_units=total,
            percent=percent_of(completed_units, total),
            known=True,
            upper_division_units=upper_units,
            upper_division_min=minor.get("upper_division_min", 0),
            allows_double_dip=minor.get("allows_double_dip"),
            double_dip_warning=minor.get("double_dip_warning", ""),
        )
