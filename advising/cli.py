"""
Command-Line Interface for the Degree Advisor.

This module provides the interactive CLI. It handles user input and hands
everything else to DegreeAdvisor.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
or, once installed:
    course-compass
"""

import logging

from .config import LOG_LEVEL
from .advisor import DegreeAdvisor
from .chat import QUICK_PROMPTS
from .exceptions import AdvisingError
from .models import CompletedCourse, GenEdChecks
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

D = TerminalDisplay

MENU = [
    ("1", "Dashboard"),
    ("2", "Gen ed progress"),
    ("3", "My courses"),
    ("4", "Search & add a course"),
    ("5", "Import transcript text"),
    ("6", "Remove a course"),
    ("7", "Gen ed checklist"),
    ("8", "Recommendations"),
    ("9", "Profiles"),
    ("c", "Ask the advisor"),
    ("q", "Quit"),
]


def _ask(prompt: str, default: str = "") -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return default


def _print_banner():
    print(f"\n{D.BOLD}{D.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         COURSE COMPASS                                           ║")
    print("║         Degree progress for University of Arizona undergrads     ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{D.RESET}")


def _print_menu(advisor: DegreeAdvisor):
    profile = advisor.store.current_profile()
    who = f"{profile.name} ({profile.primary_major})" if profile else "no profile"
    print(f"\n{D.BOLD}Current:{D.RESET} {who}")
    for key, label in MENU:
        print(f"  {D.CYAN}{key}{D.RESET}. {label}")


# =============================================================================
# COURSE ENTRY
# =============================================================================

def _search_and_add(advisor: DegreeAdvisor):
    """
    Search the catalog and add a result as completed or current.

    Mirrors the "search & add" flow: type at least two characters of a
    code or name, then pick a result by number.
    """
    query = _ask("  Search courses (code or name): ")
    results = advisor.search_courses(query)
    if not results:
        return

    choice = _ask(f"  Pick 1-{len(results)} (Enter to cancel): ")
    if not choice.isdigit() or not 1 <= int(choice) <= len(results):
        return
    picked = results[int(choice) - 1]

    kind = _ask("  (c)ompleted or (e)nrolled now? [c]: ", "c").lower() or "c"
    if kind.startswith("e"):
        course = CompletedCourse(code=picked.code, name=picked.name, units=picked.units)
        added = advisor.store.add_current_course(course)
    else:
        grade = _ask("  Grade (optional): ").upper() or None
        semester = _ask("  Term, e.g. Fall 2025 (optional): ") or None
        course = CompletedCourse(
            code=picked.code, name=picked.name, units=picked.units, grade=grade, semester=semester
        )
        added = advisor.store.add_completed_course(course)

    if added:
        D.print_success(f"Added {picked.code}")
    else:
        D.print_info(f"{picked.code} is already on your record.")


def _import_transcript(advisor: DegreeAdvisor):
    print(f"\n  {D.DIM}Paste your transcript, then an empty line to finish.{D.RESET}")
    lines = []
    while True:
        line = _ask("", "")
        if not line:
            break
        lines.append(line)

    courses = advisor.parse_transcript("\n".join(lines))
    if not courses:
        return
    if _ask("  Import these as completed courses? [y/N]: ").lower().startswith("y"):
        advisor.import_courses(courses)


def _remove_course(advisor: DegreeAdvisor):
    code = _ask("  Course code to remove (e.g. ENGL 101): ").upper()
    if not code:
        return
    if advisor.store.remove_completed_course(code) or advisor.store.remove_current_course(code):
        D.print_success(f"Removed {code}")
    else:
        D.print_info(f"{code} isn't on your record.")


def _edit_checklist(advisor: DegreeAdvisor):
    profile = advisor.store.current_profile()
    if profile is None:
        D.print_error("No profile selected.")
        return

    keys = GenEdChecks.keys()
    labels = {}
    for group in advisor.catalog.gen_ed_rules["checklists"].values():
        for item in group["items"]:
            labels[item["key"]] = item["label"]

    for i, key in enumerate(keys, 1):
        mark = f"{D.GREEN}[x]{D.RESET}" if getattr(profile.gen_ed_checks, key) else "[ ]"
        print(f"  {i}. {mark} {labels.get(key, key)}")

    choice = _ask("  Toggle which item? (Enter to cancel): ")
    if choice.isdigit() and 1 <= int(choice) <= len(keys):
        key = keys[int(choice) - 1]
        advisor.store.update_gen_ed_checks(**{key: not getattr(profile.gen_ed_checks, key)})


# =============================================================================
# PROFILES
# =============================================================================

def _create_profile(advisor: DegreeAdvisor):
    name = _ask("  Name: ")
    majors_text = _ask(f"  Major(s), comma separated (known: {', '.join(advisor.catalog.list_major_names())}): ")
    minors_text = _ask("  Minor(s), comma separated (optional): ")
    interests = _ask("  What do you want to do after graduating? ")

    data = {
        "name": name,
        "majors": [m.strip() for m in majors_text.split(",") if m.strip()],
        "selectedMinors": [m.strip() for m in minors_text.split(",") if m.strip()],
        "interests": interests,
        "completedCourses": [],
        "currentCourses": [],
    }
    profile_id = advisor.store.create_profile(data)
    D.print_success(f"Created profile {profile_id}")


def _manage_profiles(advisor: DegreeAdvisor):
    profiles = advisor.show_profiles()
    print(f"\n  {D.CYAN}s{D.RESET}. Switch  {D.CYAN}n{D.RESET}. New  {D.CYAN}d{D.RESET}. Delete")
    action = _ask("  Action (Enter to go back): ").lower()

    if action == "n":
        _create_profile(advisor)
        return
    if action not in ("s", "d") or not profiles:
        return

    choice = _ask(f"  Profile number 1-{len(profiles)}: ")
    if not choice.isdigit() or not 1 <= int(choice) <= len(profiles):
        return
    target = profiles[int(choice) - 1]

    if action == "s":
        advisor.store.switch_profile(target.id)
        D.print_success(f"Switched to {target.name}")
    elif _ask(f"  Delete {target.name}? This can't be undone. [y/N]: ").lower().startswith("y"):
        advisor.store.delete_profile(target.id)
        D.print_success(f"Deleted {target.name}")


def _chat(advisor: DegreeAdvisor):
    print(f"\n  {D.DIM}Ask anything about your plan. Empty line to go back.{D.RESET}")
    for i, prompt in enumerate(QUICK_PROMPTS, 1):
        print(f"  {D.DIM}{i}. {prompt}{D.RESET}")

    while True:
        text = _ask(f"\n  {D.BOLD}You:{D.RESET} ")
        if not text:
            return
        if text.isdigit() and 1 <= int(text) <= len(QUICK_PROMPTS):
            text = QUICK_PROMPTS[int(text) - 1]
        advisor.ask(text)


ACTIONS = {
    "1": lambda a: a.show_dashboard(),
    "2": lambda a: a.show_gen_ed(),
    "3": lambda a: a.show_courses(),
    "4": _search_and_add,
    "5": _import_transcript,
    "6": _remove_course,
    "7": _edit_checklist,
    "8": lambda a: a.show_recommendations(),
    "9": _manage_profiles,
    "c": _chat,
}


def main():
    """
    Command-line interface for the degree advisor.

    ═══════════════════════════════════════════════════════════════════════════
    FIRST RUN
    ═══════════════════════════════════════════════════════════════════════════

    When the profile store is empty, a demo student is created from the
    bundled seed profile so every view has something to show. Profiles are
    saved under $COURSE_COMPASS_HOME (default ~/.course_compass).

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    advisor = DegreeAdvisor()
    seeded = advisor.store.ensure_seeded(advisor.catalog.seed_profile)
    if seeded:
        logger.info("Created demo profile %s", seeded)

    _print_banner()
    while True:
        _print_menu(advisor)
        choice = _ask(f"{D.BOLD}Select: {D.RESET}", "q").lower()
        if choice in ("q", "quit", "exit"):
            break
        action = ACTIONS.get(choice)
        if action is None:
            D.print_error("Unknown option.")
            continue
        try:
            action(advisor)
        except AdvisingError as e:
            D.print_error(str(e))


if __name__ == "__main__":
    main()
