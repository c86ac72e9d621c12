"""
Transcript text parsing.

This module turns text pasted from a student's academic history page into
course records that can be imported into a profile.
"""

import logging
import re

from ..config import DEFAULT_COURSE_UNITS
from ..models import CompletedCourse

logger = logging.getLogger(__name__)


class TranscriptParser:
    """
    Extracts (code, units, grade) triples from free-form transcript text.

    BEST EFFORT, NOT AUTHORITATIVE:
    Pasted transcripts come from many pages and browsers, so this is a
    heuristic. False positives and misses are expected; the user reviews the
    parsed list before importing it.

    MATCHING LOGIC (per line):
    1. Course code: 2-5 uppercase letters, whitespace, a 3-digit number with
       an optional trailing letter and digit ("ENGL 101", "MUS 160D1")
    2. Grade: first standalone A/B/C/D/F, optionally followed by + or -,
       found AFTER the code on the same line
    3. Units: first number followed by "unit(s)", "credit(s)", "cr" or
       ".00", found after the code on the same line

    DUPLICATE HANDLING:
    The first occurrence of a course code anywhere in the text wins. Later
    lines mentioning the same code (repeat listings, totals sections) are
    dropped silently.

    Example:
        >>> TranscriptParser().parse("MATH 112  College Algebra  3.00  B+")
        [CompletedCourse(code='MATH 112', name='', units=3.0, grade='B+', semester=None)]
    """

    CODE_PATTERN = re.compile(r"\b([A-Z]{2,5})\s+(\d{3}[A-Z]?\d?)\b")
    # A trailing \b never matches after "+", so the end is a lookahead
    GRADE_PATTERN = re.compile(r"\b([ABCDF][+-]?)(?![\w+-])")
    UNITS_PATTERN = re.compile(r"(\d+\.?\d*)\s*(units?|credits?|cr|\.00)", re.IGNORECASE)

    def parse(self, text: str) -> list:
        """
        Parse pasted transcript text.

        Args:
            text: Raw text, any number of lines

        Returns:
            List of CompletedCourse with an empty name; empty if nothing
            matched (the caller decides how to tell the user)
        """
        if not text or not text.strip():
            return []

        courses = []
        seen = set()

        for line in text.splitlines():
            for match in self.CODE_PATTERN.finditer(line):
                code = f"{match.group(1)} {match.group(2)}"
                if code in seen:
                    continue
                seen.add(code)

                after_code = line[match.end():]
                courses.append(CompletedCourse(
                    code=code,
                    name="",
                    units=self._parse_units(after_code),
                    grade=self._parse_grade(after_code),
                ))

        logger.debug("Parsed %d course(s) from %d line(s)", len(courses), len(text.splitlines()))
        return courses

    def _parse_grade(self, text: str):
        match = self.GRADE_PATTERN.search(text)
        return match.group(1) if match else None

    def _parse_units(self, text: str) -> float:
        match = self.UNITS_PATTERN.search(text)
        if not match:
            return DEFAULT_COURSE_UNITS
        return float(match.group(1))
