"""
Advisor chat context.

Builds the system prompt that tells the chat model who the student is.
The snapshot is plain text, rebuilt before every request.
"""

from ..models import GenEdProgress, StudentProfile

QUICK_PROMPTS = [
    "What should I take this summer?",
    "Best double-dip strategy for my gen eds?",
    "Map out my remaining semesters to graduate",
    "What gen eds build the best career story for me?",
]

GUIDELINES = """\
- Give specific, actionable course recommendations using UA course codes
- Consider the student's interests and career goals when recommending gen eds
- Highlight double-dip opportunities (courses that satisfy multiple requirements)
- Keep responses concise and practical
- When unsure about current offerings, say so and suggest the student verify on UAccess"""


def _course_lines(courses: list) -> str:
    lines = []
    for c in courses:
        grade = f" ({c.grade})" if c.grade else ""
        lines.append(f"- {c.code}{grade}")
    return "\n".join(lines) or "None yet"


def build_system_prompt(profile: StudentProfile, progress: GenEdProgress) -> str:
    """
    Text context for the advisor model.

    Args:
        profile: Current student
        progress: Gen-ed progress already computed for that student

    Returns:
        Markdown-ish prompt: profile, course lists, gen-ed counts, guidelines
    """
    minors = ", ".join(profile.selected_minors) or "None"
    return f"""You are CourseCompass AI, an academic advisor for University of Arizona undergraduates. You help students plan their courses strategically.

## Current Student Profile
- Name: {profile.name}
- Major(s): {", ".join(profile.majors)}
- Minor(s): {minors}
- Interests: {profile.interests or "Not specified"}
- Planning Semester: {profile.plan_semester}
- Catalog Year: {profile.catalog_year}

## Completed Courses ({len(profile.completed_courses)})
{_course_lines(profile.completed_courses)}

## Current Courses ({len(profile.current_courses)})
{_course_lines(profile.current_courses)}

## Gen Ed Progress
- Foundations: {progress.foundations_complete}/{progress.foundations_total}
- Second Language: {progress.language_complete}/{progress.language_total}
- UNIV: {progress.univ_complete}/{progress.univ_total}
- Exploring Perspectives: {progress.ep_domains_complete}/{progress.ep_domains_total} domains satisfied
- Building Connections: {progress.bc_units_complete:g}/{progress.bc_units_total:g} units

## Guidelines
{GUIDELINES}"""
