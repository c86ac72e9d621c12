"""
Degree Advisor - Main Orchestrator.

This module contains the DegreeAdvisor class that connects the
algorithm layer and the profile store to the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import logging
from datetime import date
from typing import Callable, Optional

from .config import STORAGE_DIR
from .chat import AdvisorChatClient, ChatMessage, build_system_prompt
from .data import CatalogLoader, TranscriptParser
from .engines import (
    DegreeProgressEngine,
    GenEdProgressEngine,
    GraduationEstimator,
    RecommendationEngine,
)
from .models import StudentProfile
from .storage import JsonFileStore, ProfileStore
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class DegreeAdvisor:
    """
    Main interface for the degree-progress system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Reads the current profile from the ProfileStore
    2. Calls the engines to get progress results (pure data)
    3. Passes that data to the Presentation layer for display

    Every show_* method also returns the data it displayed, so the same
    calls work for a non-terminal front end.

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = DegreeAdvisor()
        advisor.store.ensure_seeded(advisor.catalog.seed_profile)
        advisor.show_dashboard()
    """

    def __init__(
        self,
        store: Optional[ProfileStore] = None,
        catalog: Optional[CatalogLoader] = None,
        clock: Optional[Callable[[], date]] = None,
        chat_client: Optional[AdvisorChatClient] = None,
    ):
        # All engines share one CatalogLoader so catalog files load once
        self.catalog = catalog or CatalogLoader()
        self.store = store or ProfileStore(JsonFileStore(STORAGE_DIR))

        self.gen_ed_engine = GenEdProgressEngine(self.catalog)
        self.degree_engine = DegreeProgressEngine(self.catalog)
        self.recommendation_engine = RecommendationEngine(
            self.catalog, self.gen_ed_engine, self.degree_engine
        )
        self.graduation_estimator = GraduationEstimator(clock)
        self.parser = TranscriptParser()

        self.chat_client = chat_client or AdvisorChatClient()
        self.chat_history = []
        self._chat_profile_id = None

        self.display = TerminalDisplay()

    # =========================================================================
    # DATA
    # =========================================================================

    def _require_profile(self) -> Optional[StudentProfile]:
        profile = self.store.current_profile()
        if profile is None:
            self.display.print_error("No profile selected. Create one first.")
        return profile

    def snapshot(self, profile: StudentProfile) -> dict:
        """
        Every derived number for a profile, as data.

        Returns:
            {
                "gen_ed": GenEdProgress,
                "majors": [MajorBreakdown, ...],
                "minors": [MinorProgress, ...],
                "recommendations": [RecommendedCourse, ...],
                "suggested_minors": [SuggestedMinor, ...],
                "graduation": GraduationEstimate,
            }
        """
        return {
            "gen_ed": self.gen_ed_engine.calculate(profile),
            "majors": [self.degree_engine.major_breakdown(profile, m) for m in profile.majors],
            "minors": [self.degree_engine.minor_progress(profile, m) for m in profile.selected_minors],
            "recommendations": self.recommendation_engine.recommend_next_courses(profile),
            "suggested_minors": self.recommendation_engine.suggest_minors(profile),
            "graduation": self.graduation_estimator.estimate(profile),
        }

    # =========================================================================
    # VIEWS
    # =========================================================================

    def show_dashboard(self) -> Optional[dict]:
        """Print the full progress report for the current profile."""
        profile = self._require_profile()
        if profile is None:
            return None

        data = self.snapshot(profile)
        self.display.print_profile_info(profile)
        self.display.print_graduation(data["graduation"])
        self.display.print_gen_ed_progress(data["gen_ed"])
        for breakdown in data["majors"]:
            self.display.print_major_breakdown(breakdown)
        self.display.print_minor_progress(data["minors"])
        self.display.print_suggested_minors(data["suggested_minors"])
        self.display.print_recommendations(data["recommendations"])
        return data

    def show_gen_ed(self):
        profile = self._require_profile()
        if profile is None:
            return None
        progress = self.gen_ed_engine.calculate(profile)
        self.display.print_gen_ed_progress(progress)
        return progress

    def show_recommendations(self, max_results: int = 5):
        profile = self._require_profile()
        if profile is None:
            return None
        recs = self.recommendation_engine.recommend_next_courses(profile, max_results)
        self.display.print_recommendations(recs)
        self.display.print_suggested_minors(self.recommendation_engine.suggest_minors(profile))
        return recs

    def show_courses(self):
        profile = self._require_profile()
        if profile is None:
            return None
        self.display.print_course_list("Completed Courses", profile.completed_courses)
        self.display.print_course_list("Current Courses", profile.current_courses)
        return profile

    def show_profiles(self) -> list:
        profiles = self.store.list_profiles()
        self.display.print_profiles(profiles, self.store.current_id)
        return profiles

    # =========================================================================
    # COURSE ENTRY
    # =========================================================================

    def parse_transcript(self, text: str) -> list:
        """Parse pasted transcript text and show what was found."""
        courses = self.parser.parse(text)
        self.display.print_parsed_courses(courses)
        return courses

    def import_courses(self, courses: list) -> int:
        added = self.store.import_courses(courses)
        self.display.print_success(f"Imported {added} course(s)")
        return added

    def search_courses(self, query: str) -> list:
        results = self.catalog.search_courses(query)
        self.display.print_search_results(results)
        return results

    # =========================================================================
    # CHAT
    # =========================================================================

    def ask(self, text: str) -> Optional[ChatMessage]:
        """
        Send a question to the advisor chat for the current profile.

        The conversation resets whenever the current profile changes.
        """
        profile = self._require_profile()
        if profile is None:
            return None

        if profile.id != self._chat_profile_id:
            self.chat_history = []
            self._chat_profile_id = profile.id

        prompt = build_system_prompt(profile, self.gen_ed_engine.calculate(profile))
        reply = self.chat_client.send(list(self.chat_history), text, system_prompt=prompt)
        if reply is None:
            return None

        question = ChatMessage("user", text.strip())
        self.chat_history.extend([question, reply])
        self.display.print_chat_message(question)
        self.display.print_chat_message(reply)
        return reply
