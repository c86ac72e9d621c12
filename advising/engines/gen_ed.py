"""
Gen Ed (General Education) Progress Engine.

This module evaluates a student profile against the university-wide
general-education pattern.
"""

import math
from typing import Optional

from ..config import BC_SLOTS, BC_UNITS_PER_SLOT, percent_of
from ..models import DomainStatus, GenEdProgress, StudentProfile
from ..data import CatalogLoader


class GenEdProgressEngine:
    """
    Evaluates gen-ed progress for a profile.

    THE FIVE BUCKETS:
    -----------------
    - Foundations (3 checklist items): ENGL 101, ENGL 102, math
    - Second Language (2 checklist items): two semesters or placement
    - Entry/Exit (2 checklist items): UNIV 101, UNIV 301
    - Exploring Perspectives (4 domains): Artist, Humanist, Natural
      Scientist, Social Scientist; each needs 3 units of tagged coursework
    - Building Connections: 9 units of tagged coursework

    Checklist buckets come ONLY from the profile's gen_ed_checks. Having
    ENGL 101 on the completed list does not tick the ENGL 101 box; students
    tick it themselves (placement and transfer credit satisfy it too).

    DOMAIN SATISFACTION (UNIT-SUM ONLY):
    ------------------------------------
    A domain is satisfied when the summed catalog units of completed courses
    tagged with it reach the domain's minimum. Course count is NOT checked,
    so a single 4-unit Artist course satisfies the Artist domain alone.
    min_courses is carried in the results for display only.

    OVERALL PERCENTAGE:
    -------------------
    Fixed slot model, 14 slots total:
        3 foundations + 2 language + 2 seminars + 4 EP domains + 3 BC
    BC slots are earned per 3 units (floor), capped at 3.
    """

    def __init__(self, catalog: CatalogLoader):
        self.catalog = catalog

    # =========================================================================
    # DOMAIN HELPERS
    # =========================================================================

    def _domain_info(self, domain_key: str) -> Optional[dict]:
        rules = self.catalog.gen_ed_rules
        bc = rules["building_connections"]
        if domain_key == bc["key"]:
            return bc
        for domain in rules["exploring_perspectives"]["domains"]:
            if domain["key"] == domain_key:
                return domain
        return None

    def courses_for_domain(self, domain_key: str) -> list:
        """All gen-ed courses tagged with the domain."""
        return self.catalog.gen_ed_courses_for_domain(domain_key)

    def completed_for_domain(self, profile: StudentProfile, domain_key: str) -> list:
        """Codes of completed courses tagged with the domain, in profile order."""
        domain_codes = {c.code for c in self.courses_for_domain(domain_key)}
        return [c.code for c in profile.completed_courses if c.code in domain_codes]

    def domain_units_completed(self, profile: StudentProfile, domain_key: str) -> float:
        """
        Units earned toward a domain.

        Unit counts come from the gen-ed catalog, not from the profile's
        course record, so a transcript import with a wrong unit count can't
        inflate a domain.
        """
        completed_codes = profile.completed_codes
        return sum(
            c.units for c in self.courses_for_domain(domain_key)
            if c.code in completed_codes
        )

    def is_domain_satisfied(self, profile: StudentProfile, domain_key: str) -> bool:
        info = self._domain_info(domain_key)
        if info is None:
            return False
        return self.domain_units_completed(profile, domain_key) >= info["min_units"]

    def domain_status(self, profile: StudentProfile, domain_key: str) -> DomainStatus:
        """Full status of a single domain for display."""
        info = self._domain_info(domain_key)
        if info is None:
            raise KeyError(f"Unknown gen ed domain: {domain_key}")

        units = self.domain_units_completed(profile, domain_key)
        return DomainStatus(
            key=domain_key,
            name=info["name"],
            label=info["label"],
            units_completed=units,
            min_units=info["min_units"],
            min_courses=info.get("min_courses", 1),
            satisfied=units >= info["min_units"],
            completed_codes=self.completed_for_domain(profile, domain_key),
            available_courses=len(self.courses_for_domain(domain_key)),
        )

    def ep_domain_keys(self) -> list:
        return [d["key"] for d in self.catalog.gen_ed_rules["exploring_perspectives"]["domains"]]

    # =========================================================================
    # CHECKLISTS
    # =========================================================================

    def _checklist_counts(self, profile: StudentProfile, checklist: str) -> tuple:
        """(checked, total) for one checklist group of the rules file."""
        items = self.catalog.gen_ed_rules["checklists"][checklist]["items"]
        checks = profile.gen_ed_checks
        checked = sum(1 for item in items if getattr(checks, item["key"], False))
        return checked, len(items)

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def calculate(self, profile: StudentProfile) -> GenEdProgress:
        """
        Compute gen-ed progress for a profile.

        Pure function of (profile, catalog): calling it twice with the same
        inputs yields equal results.

        Returns:
            GenEdProgress with per-bucket counts, per-domain statuses and
            overall_percent in [0, 100]
        """
        foundations_complete, foundations_total = self._checklist_counts(profile, "foundations")
        language_complete, language_total = self._checklist_counts(profile, "second_language")
        univ_complete, univ_total = self._checklist_counts(profile, "entry_exit")

        domains = [self.domain_status(profile, key) for key in self.ep_domain_keys()]
        ep_complete = sum(1 for d in domains if d.satisfied)

        bc = self.domain_status(profile, self.catalog.gen_ed_rules["building_connections"]["key"])
        bc_slots_complete = min(BC_SLOTS, math.floor(bc.units_completed / BC_UNITS_PER_SLOT))

        total_slots = foundations_total + language_total + univ_total + len(domains) + BC_SLOTS
        completed_slots = (
            foundations_complete
            + language_complete
            + univ_complete
            + ep_complete
            + bc_slots_complete
        )

        return GenEdProgress(
            foundations_complete=foundations_complete,
            foundations_total=foundations_total,
            language_complete=language_complete,
            language_total=language_total,
            univ_complete=univ_complete,
            univ_total=univ_total,
            ep_domains_complete=ep_complete,
            ep_domains_total=len(domains),
            bc_units_complete=bc.units_completed,
            bc_units_total=bc.min_units,
            overall_percent=percent_of(completed_slots, total_slots),
            domains=domains,
            building_connections=bc,
        )
