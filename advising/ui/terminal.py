"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    CourseStatus,
    GenEdProgress,
    GraduationEstimate,
    MajorBreakdown,
    MinorProgress,
    StudentProfile,
)


class TerminalDisplay:
    """
    Pretty terminal output for progress results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Create an APIFormatter class that converts dataclasses to JSON.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_info(cls, message: str):
        print(f"  {cls.DIM}{message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}{message}{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool, pending: bool = False) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ COMPLETE {cls.RESET}"
        elif pending:
            return f"{cls.BG_YELLOW}{cls.WHITE} ⏳ IN PROGRESS {cls.RESET}"
        else:
            return f"{cls.BG_RED}{cls.WHITE} ✗ MISSING {cls.RESET}"

    @classmethod
    def progress_bar(cls, percent: int, width: int = 30) -> str:
        """Fixed-width bar colored by how far along it is."""
        filled = round(width * max(0, min(100, percent)) / 100)
        if percent >= 100:
            color = cls.GREEN
        elif percent >= 50:
            color = cls.YELLOW
        else:
            color = cls.RED
        return f"{color}{'█' * filled}{cls.DIM}{'░' * (width - filled)}{cls.RESET} {percent:>3}%"

    @staticmethod
    def _units(value: float) -> str:
        return f"{value:g}"

    # =========================================================================
    # PROFILE
    # =========================================================================

    @classmethod
    def print_profile_info(cls, profile: StudentProfile):
        """Print student identification information."""
        cls.print_header("STUDENT")
        print(f"  {cls.BOLD}Name:{cls.RESET} {profile.name}")
        print(f"  {cls.BOLD}Major(s):{cls.RESET} {', '.join(profile.majors)}")
        if profile.selected_minors:
            print(f"  {cls.BOLD}Minor(s):{cls.RESET} {', '.join(profile.selected_minors)}")
        if profile.emphasis:
            print(f"  {cls.BOLD}Emphasis:{cls.RESET} {profile.emphasis}")
        if profile.catalog_year:
            print(f"  {cls.BOLD}Catalog Year:{cls.RESET} {profile.catalog_year}")
        if profile.interests:
            print(f"  {cls.BOLD}Interests:{cls.RESET} {cls.DIM}{profile.interests}{cls.RESET}")

    @classmethod
    def print_profiles(cls, profiles: list, current_id):
        cls.print_header("PROFILES")
        if not profiles:
            cls.print_info("No profiles yet.")
            return
        for i, profile in enumerate(profiles, 1):
            marker = f"{cls.GREEN}●{cls.RESET}" if profile.id == current_id else " "
            print(f"  {marker} {i}. {cls.BOLD}{profile.name}{cls.RESET} "
                  f"{cls.DIM}({', '.join(profile.majors)}) [{profile.id}]{cls.RESET}")

    @classmethod
    def print_course_list(cls, title: str, courses: list):
        """Print completed or current courses as a table."""
        cls.print_subheader(f"{title} ({len(courses)})")
        if not courses:
            cls.print_info("None yet.")
            return
        print(f"  {cls.BOLD}{'CODE':<11} {'NAME':<40} {'UNITS':>5}  {'GRADE':<5} {'TERM'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 72}{cls.RESET}")
        for c in courses:
            name = c.name[:38] + ".." if len(c.name) > 40 else c.name
            print(f"  {c.code:<11} {name:<40} {cls._units(c.units):>5}  {c.grade or '':<5} {c.semester or ''}")

    # =========================================================================
    # GEN ED
    # =========================================================================

    @classmethod
    def print_gen_ed_progress(cls, progress: GenEdProgress):
        """Print gen-ed buckets, then one row per domain."""
        cls.print_header("GENERAL EDUCATION")
        print(f"\n  {cls.BOLD}Overall:{cls.RESET} {cls.progress_bar(progress.overall_percent)}")

        print()
        rows = [
            ("Foundations", progress.foundations_complete, progress.foundations_total),
            ("Second Language", progress.language_complete, progress.language_total),
            ("Entry/Exit Seminars", progress.univ_complete, progress.univ_total),
            ("Exploring Perspectives", progress.ep_domains_complete, progress.ep_domains_total),
        ]
        for label, done, total in rows:
            color = cls.GREEN if done >= total else cls.YELLOW
            print(f"  {label:<24} {color}{done}/{total}{cls.RESET}")
        bc_done = progress.bc_units_complete >= progress.bc_units_total
        bc_color = cls.GREEN if bc_done else cls.YELLOW
        print(f"  {'Building Connections':<24} {bc_color}"
              f"{cls._units(progress.bc_units_complete)}/{cls._units(progress.bc_units_total)} units{cls.RESET}")

        cls.print_subheader("Domains")
        print(f"  {cls.BOLD}{'KEY':<4} {'DOMAIN':<28} {'UNITS':<10} {'COURSES'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        domains = list(progress.domains)
        if progress.building_connections is not None:
            domains.append(progress.building_connections)
        for d in domains:
            color = cls.GREEN if d.satisfied else cls.RED
            units = f"{cls._units(d.units_completed)}/{cls._units(d.min_units)}"
            courses = ", ".join(d.completed_codes) or f"{cls.DIM}{d.available_courses} available{cls.RESET}"
            print(f"  {color}{d.key:<4}{cls.RESET} {d.name:<28} {units:<10} {courses}")

    # =========================================================================
    # MAJORS & MINORS
    # =========================================================================

    @classmethod
    def _status_icon(cls, status: CourseStatus) -> str:
        if status == CourseStatus.COMPLETED:
            return f"{cls.GREEN}✓{cls.RESET}"
        elif status == CourseStatus.IN_PROGRESS:
            return f"{cls.YELLOW}⏳{cls.RESET}"
        return f"{cls.RED}✗{cls.RESET}"

    @classmethod
    def print_major_breakdown(cls, breakdown: MajorBreakdown):
        """
        Print a major's progress and requirement groups.

        Unknown majors show the estimate with a warning instead of groups.
        """
        progress = breakdown.progress
        cls.print_header(f"MAJOR: {progress.name.upper()}")
        print(f"\n  {cls.BOLD}Completion:{cls.RESET} {cls.progress_bar(progress.percent)} "
              f"{cls.DIM}({progress.completed_courses}/{progress.total_courses} courses){cls.RESET}")

        if not breakdown.known:
            print(f"\n  {cls.YELLOW}⚠ ESTIMATE{cls.RESET}: requirements for this major aren't modeled yet.")
            print(f"    {cls.DIM}Check your degree audit for the real requirement list.{cls.RESET}")
            return

        print(f"  {cls.BOLD}Program:{cls.RESET} {breakdown.program}")
        for group in breakdown.groups:
            label = f"{group.label} ({group.completed_count}/{len(group.courses)})"
            if group.target_units:
                label += f" {cls.DIM}{cls._units(group.target_units)} units{cls.RESET}"
            cls.print_subheader(label)
            pending = any(c.status == CourseStatus.IN_PROGRESS for c in group.courses)
            print(f"     {cls.status_badge(group.completed_count == len(group.courses), pending)}")
            for course in group.courses:
                print(f"     {cls._status_icon(course.status)} {course.code:<10} {cls.DIM}{course.name}{cls.RESET}")

        if breakdown.electives:
            cls.print_subheader("Elective Categories")
            for e in breakdown.electives:
                print(f"     • {e['label']} {cls.DIM}(pick {e.get('pick', 1)}, {e.get('units', 0)} units){cls.RESET}")

    @classmethod
    def print_minor_progress(cls, minors: list):
        cls.print_header("MINORS")
        if not minors:
            cls.print_info("No minors selected.")
            return
        for m in minors:
            cls._print_minor(m)

    @classmethod
    def _print_minor(cls, minor: MinorProgress):
        print(f"\n  {cls.BOLD}{minor.name}{cls.RESET}  {cls.progress_bar(minor.percent, width=20)} "
              f"{cls.DIM}({cls._units(minor.completed_units)}/{cls._units(minor.total_units)} units){cls.RESET}")
        if not minor.known:
            print(f"    {cls.YELLOW}⚠ ESTIMATE{cls.RESET} {cls.DIM}requirements not modeled{cls.RESET}")
            return
        if minor.upper_division_min:
            print(f"    {cls.DIM}Upper division: {cls._units(minor.upper_division_units)}"
                  f"/{cls._units(minor.upper_division_min)} units{cls.RESET}")
        if minor.allows_double_dip is False and minor.double_dip_warning:
            print(f"    {cls.YELLOW}⚠ {minor.double_dip_warning}{cls.RESET}")

    # =========================================================================
    # RECOMMENDATIONS
    # =========================================================================

    @classmethod
    def print_recommendations(cls, recommendations: list):
        """Print next-course recommendations, highest priority first."""
        cls.print_header("RECOMMENDED NEXT COURSES")
        if not recommendations:
            cls.print_info("Nothing to recommend. Your requirements look covered!")
            return
        for i, rec in enumerate(recommendations, 1):
            color = cls.MAGENTA if rec.priority >= 8 else cls.CYAN
            units = f"{cls._units(rec.units)} units" if rec.units else ""
            print(f"\n  {i}. {cls.BOLD}{color}{rec.code}{cls.RESET} {rec.name} {cls.DIM}{units}{cls.RESET}")
            print(f"     {cls.DIM}└─ {rec.reason}{cls.RESET}")

    @classmethod
    def print_suggested_minors(cls, suggestions: list):
        cls.print_subheader("Minors You Might Like")
        if not suggestions:
            cls.print_info("No suggestions yet. Add interests to your profile.")
            return
        for s in suggestions:
            print(f"  • {cls.BOLD}{s.name}{cls.RESET} {cls.DIM}({s.reason}){cls.RESET}")

    # =========================================================================
    # GRADUATION
    # =========================================================================

    @classmethod
    def print_graduation(cls, estimate: GraduationEstimate):
        cls.print_header("GRADUATION")
        if estimate.ready:
            print(f"\n  {cls.GREEN}{cls.BOLD}🎉 Ready to graduate!{cls.RESET}")
        else:
            print(f"\n  {cls.BOLD}Projected:{cls.RESET} {cls.CYAN}{estimate.label}{cls.RESET} "
                  f"{cls.DIM}({estimate.semesters_needed} semester(s) at full load){cls.RESET}")
        print(f"  {cls.BOLD}Units:{cls.RESET} {cls.progress_bar(estimate.percent)}")
        print(f"  {cls.DIM}{cls._units(estimate.completed_units)} completed, "
              f"{cls._units(estimate.in_progress_units)} in progress, "
              f"{cls._units(estimate.remaining_units)} remaining{cls.RESET}")
        ud_color = cls.GREEN if estimate.upper_division_units >= estimate.upper_division_min else cls.YELLOW
        print(f"  {cls.BOLD}Upper division:{cls.RESET} {ud_color}{cls._units(estimate.upper_division_units)}"
              f"/{cls._units(estimate.upper_division_min)} units{cls.RESET}")

    # =========================================================================
    # TRANSCRIPT IMPORT & SEARCH
    # =========================================================================

    @classmethod
    def print_parsed_courses(cls, courses: list):
        cls.print_subheader(f"Found {len(courses)} course(s)")
        if not courses:
            print(f"  {cls.YELLOW}No course codes found. Try pasting the lines that list your courses.{cls.RESET}")
            return
        for c in courses:
            grade = f"{cls.GREEN}{c.grade}{cls.RESET}" if c.grade else f"{cls.DIM}-{cls.RESET}"
            print(f"  • {c.code:<11} {cls._units(c.units):>4} units  {grade}")

    @classmethod
    def print_search_results(cls, results: list):
        if not results:
            cls.print_info("No matching courses.")
            return
        for i, c in enumerate(results, 1):
            print(f"  {i:>2}. {cls.BOLD}{c.code:<11}{cls.RESET} {c.name} {cls.DIM}({cls._units(c.units)} units){cls.RESET}")

    # =========================================================================
    # CHAT
    # =========================================================================

    @classmethod
    def print_chat_message(cls, message):
        if message.role == "user":
            print(f"\n  {cls.BOLD}{cls.BLUE}You:{cls.RESET} {message.content}")
        else:
            print(f"\n  {cls.BOLD}{cls.MAGENTA}Advisor:{cls.RESET}")
            for line in message.content.splitlines():
                print(f"    {line}")
