"""
Recommendation Engine.

This module suggests minors a student might like and the courses that
would move the most requirements forward next semester.
"""

import re

from ..config import DEFAULT_MAX_RECOMMENDATIONS, EXIT_SEMINAR_CODE, MAX_SUGGESTED_MINORS
from ..models import RecommendedCourse, StudentProfile, SuggestedMinor
from ..data import CatalogLoader
from .degree import DegreeProgressEngine
from .gen_ed import GenEdProgressEngine

# Words too common in free-text interests to say anything about a course
INTEREST_STOPWORDS = {
    "want", "work", "with", "that", "this", "interested", "interest",
    "about", "like", "would", "from", "into", "have", "learn",
}

_WORD = re.compile(r"[a-z]+")


def interest_keywords(interests: str) -> list:
    """
    Meaningful words of a free-text interests field.

    Lowercase words of four or more letters, minus stopwords, in first-seen
    order.

    Example:
        >>> interest_keywords("I want to work in AI and music technology")
        ['music', 'technology']
    """
    keywords = []
    for word in _WORD.findall((interests or "").lower()):
        if len(word) >= 4 and word not in INTEREST_STOPWORDS and word not in keywords:
            keywords.append(word)
    return keywords


class RecommendationEngine:
    """
    Suggests minors and next courses.

    MINOR SUGGESTIONS:
    ------------------
    Each candidate minor is scored on three signals:
        3 x interest keyword hits   (substring of the interests text)
        2 x major keyword hits      (substring of the joined major names)
        2 x department overlap      (candidate prefixes among completed courses)
    Selected minors and zero scores are dropped; the top 3 are returned.

    NEXT COURSES (priority, higher first):
    --------------------------------------
        10  Exit seminar, if not taken and not checked off
         8  Up to 2 Building Connections courses
         7  One course per unsatisfied Exploring Perspectives domain
         6  Up to 2 emphasis courses per known major
         5  Every open core/required course per known major
         4  First open course of each known selected minor

    "Taken" means completed OR currently enrolled. Interests only break ties
    between gen-ed candidates; they never add or remove a course.
    """

    def __init__(
        self,
        catalog: CatalogLoader,
        gen_ed_engine: GenEdProgressEngine,
        degree_engine: DegreeProgressEngine,
    ):
        self.catalog = catalog
        self.gen_ed = gen_ed_engine
        self.degree = degree_engine

    # =========================================================================
    # MINOR SUGGESTIONS
    # =========================================================================

    def suggest_minors(self, profile: StudentProfile) -> list:
        """
        Rank candidate minors for a profile.

        Returns:
            At most 3 SuggestedMinor, highest score first; equal scores keep
            catalog order
        """
        selected = {m.lower() for m in profile.selected_minors}
        interests = (profile.interests or "").lower()
        majors = " ".join(m.lower() for m in profile.majors)
        completed_depts = {c.department for c in profile.completed_courses}

        scored = []
        for candidate in self.catalog.minor_suggestions:
            if candidate["name"].lower() in selected:
                continue

            score = 0
            reasons = []

            interest_hits = [k for k in candidate["keywords"] if k in interests]
            if interest_hits:
                score += 3 * len(interest_hits)
                reasons.append("Matches your interests")

            major_hits = [k for k in candidate["major_keywords"] if k in majors]
            if major_hits:
                score += 2 * len(major_hits)
                reasons.append("Complements your major")

            dept_hits = [d for d in candidate["dept_prefixes"] if d in completed_depts]
            if dept_hits:
                score += 2 * len(dept_hits)
                reasons.append("You already have related courses")

            if score > 0:
                scored.append(SuggestedMinor(
                    name=candidate["name"],
                    reason=reasons[0] if reasons else candidate["description"],
                    overlap=len(dept_hits),
                    score=score,
                ))

        # sort() is stable, so ties keep catalog order
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored[:MAX_SUGGESTED_MINORS]

    # =========================================================================
    # NEXT COURSES
    # =========================================================================

    @staticmethod
    def _prefer_interests(courses: list, keywords: list) -> list:
        """Stable reorder: courses whose description hits a keyword first."""
        if not keywords:
            return list(courses)

        def misses(course) -> int:
            text = f"{course.name} {course.description}".lower()
            return 0 if any(k in text for k in keywords) else 1

        return sorted(courses, key=misses)

    def _catalog_name(self, code: str) -> tuple:
        course = self.catalog.lookup_course(code)
        if course is None:
            return "", 0.0
        return course.name, course.units

    def _gen_ed_recommendations(self, profile: StudentProfile, taken: set, keywords: list) -> list:
        recs = []

        bc_key = self.catalog.gen_ed_rules["building_connections"]["key"]
        bc_open = [c for c in self.gen_ed.courses_for_domain(bc_key) if c.code not in taken]
        for course in self._prefer_interests(bc_open, keywords)[:2]:
            recs.append(RecommendedCourse(
                code=course.code,
                name=course.name,
                units=course.units,
                priority=8,
                category="building_connections",
                reason="Counts toward Building Connections",
            ))

        for domain in self.gen_ed.calculate(profile).domains:
            if domain.satisfied:
                continue
            open_courses = [c for c in self.gen_ed.courses_for_domain(domain.key) if c.code not in taken]
            if not open_courses:
                continue
            course = self._prefer_interests(open_courses, keywords)[0]
            recs.append(RecommendedCourse(
                code=course.code,
                name=course.name,
                units=course.units,
                priority=7,
                category="exploring_perspectives",
                reason=f"Fills {domain.name}",
            ))

        return recs

    def _emphasis_for(self, profile: StudentProfile, major: dict):
        """
        Track to recommend from: the profile's chosen emphasis when it names
        a track of this major, else the best-matching one.
        """
        chosen = self.degree.find_emphasis(major, profile.emphasis)
        if chosen is not None:
            return chosen
        best = self.degree.best_emphasis(major, profile.completed_codes)
        return (best[0], best[1]) if best else None

    def _major_recommendations(self, profile: StudentProfile, taken: set) -> list:
        recs = []
        for major_name in profile.majors:
            found = self.catalog.find_major(major_name)
            if found is None:
                continue
            _, major = found

            emphasis = self._emphasis_for(profile, major)
            if emphasis is not None:
                _, track = emphasis
                open_codes = [code for code in track["courses"] if code not in taken]
                for code in open_codes[:2]:
                    name, units = self._catalog_name(code)
                    recs.append(RecommendedCourse(
                        code=code,
                        name=name,
                        units=units,
                        priority=6,
                        category="emphasis",
                        reason=f"{track['name']} emphasis",
                    ))

            for entry in self.degree.required_courses(major):
                if entry["code"] in taken:
                    continue
                recs.append(RecommendedCourse(
                    code=entry["code"],
                    name=entry.get("name", ""),
                    units=float(entry.get("units", 0)),
                    priority=5,
                    category="major",
                    reason=f"Required for {major.get('short_name', major['name'])}",
                ))
        return recs

    def _minor_recommendations(self, profile: StudentProfile, taken: set) -> list:
        recs = []
        for minor_name in profile.selected_minors:
            minor = self.catalog.find_minor(minor_name)
            if minor is None:
                continue
            for code in self.degree.minor_course_codes(minor):
                if code in taken:
                    continue
                name, units = self._catalog_name(code)
                recs.append(RecommendedCourse(
                    code=code,
                    name=name,
                    units=units,
                    priority=4,
                    category="minor",
                    reason=f"Counts toward the {minor['name']} minor",
                ))
                break
        return recs

    def recommend_next_courses(
        self,
        profile: StudentProfile,
        max_results: int = DEFAULT_MAX_RECOMMENDATIONS,
    ) -> list:
        """
        Courses to consider next, highest priority first.

        Args:
            profile: Student to plan for
            max_results: Upper bound on the returned list

        Returns:
            List of RecommendedCourse with unique codes, len <= max_results
        """
        taken = profile.taken_codes
        keywords = interest_keywords(profile.interests)

        candidates = []
        if EXIT_SEMINAR_CODE not in taken and not profile.gen_ed_checks.univ301:
            name, units = self._catalog_name(EXIT_SEMINAR_CODE)
            candidates.append(RecommendedCourse(
                code=EXIT_SEMINAR_CODE,
                name=name,
                units=units,
                priority=10,
                category="seminar",
                reason="Exit seminar required for graduation",
            ))
        candidates.extend(self._gen_ed_recommendations(profile, taken, keywords))
        candidates.extend(self._major_recommendations(profile, taken))
        candidates.extend(self._minor_recommendations(profile, taken))

        # First occurrence of a code wins
        unique = []
        seen = set()
        for rec in candidates:
            if rec.code in seen:
                continue
            seen.add(rec.code)
            unique.append(rec)

        unique.sort(key=lambda r: r.priority, reverse=True)
        return unique[:max(0, max_results)]
