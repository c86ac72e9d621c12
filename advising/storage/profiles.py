"""
Profile store.

Owns the set of student profiles, the ordered profile index and the
current-profile pointer, and keeps all three in sync with a key-value
backend.
"""

import copy
import logging
import re
from dataclasses import fields, replace
from datetime import datetime
from typing import Callable, Optional

from ..config import (
    CURRENT_PROFILE_KEY,
    PROFILE_SCHEMA_VERSION,
    PROFILES_LIST_KEY,
    profile_key,
)
from ..exceptions import ProfileNotFoundError, ProfileValidationError
from ..models import CompletedCourse, GenEdChecks, StudentProfile
from .backends import KeyValueStore
from .migrations import upgrade_profile_record

logger = logging.getLogger(__name__)

MAX_MAJORS = 3

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def slugify(name: str) -> str:
    """Lowercase name with everything but letters and digits stripped."""
    return re.sub(r"[^a-z0-9]", "", name.lower())


class ProfileStore:
    """
    Single-writer repository of student profiles.

    PERSISTED LAYOUT:
    -----------------
        profiles-list    ["alex-m1abc", "sam-m1abd"]
        current-profile  "alex-m1abc"
        profile-<id>     {"id": ..., "name": ..., "majors": [...], ...}

    Every mutation writes the touched profile record and the index straight
    away. There is no transaction across keys; a crash between the two
    writes leaves a record the index doesn't list, which is harmless.

    LOADING:
    --------
    Records that are missing or can't be decoded are skipped with a warning.
    Older records are upgraded (see migrations) and written back. If no
    current profile is set but profiles exist, the first one becomes current.

    Profiles handed out are copies; change them through update_profile()
    or the course helpers.

    Usage:
        store = ProfileStore(JsonFileStore(STORAGE_DIR))
        store.ensure_seeded(catalog.seed_profile)
        store.add_completed_course(CompletedCourse("PHIL 101", "Intro to Philosophy", 3))
    """

    def __init__(self, backend: KeyValueStore, clock: Optional[Callable[[], datetime]] = None):
        self.backend = backend
        self.clock = clock or datetime.now
        self._ids = []
        self._profiles = {}
        self._current_id = None
        self._load()

    # =========================================================================
    # LOADING & PERSISTENCE
    # =========================================================================

    def _load(self):
        ids = self.backend.get(PROFILES_LIST_KEY)
        if ids is None:
            ids = []
        elif not isinstance(ids, list):
            logger.warning("Ignoring malformed profile index: %r", ids)
            ids = []

        for profile_id in ids:
            profile = self._load_profile(profile_id)
            if profile is not None and profile.id not in self._profiles:
                self._ids.append(profile.id)
                self._profiles[profile.id] = profile

        current = self.backend.get(CURRENT_PROFILE_KEY)
        self._current_id = current if current in self._profiles else None

        if self._current_id is None and self._ids:
            self.switch_profile(self._ids[0])

    def _load_profile(self, profile_id) -> Optional[StudentProfile]:
        if not isinstance(profile_id, str):
            logger.warning("Ignoring non-string profile id %r", profile_id)
            return None

        key = profile_key(profile_id)
        record = self.backend.get(key)
        if not isinstance(record, dict):
            logger.warning("Skipping missing or malformed profile record %s", key)
            return None

        try:
            record, changed = upgrade_profile_record(record)
            profile = StudentProfile.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping unreadable profile record %s: %s", key, e)
            return None

        if changed:
            logger.info("Upgraded profile record %s to schema %d", key, PROFILE_SCHEMA_VERSION)
            self.backend.set(key, profile.to_dict())
        return profile

    def _save(self, profile: StudentProfile):
        self._profiles[profile.id] = profile
        self.backend.set(profile_key(profile.id), profile.to_dict())
        self.backend.set(PROFILES_LIST_KEY, list(self._ids))

    def _require(self, profile_id: str) -> StudentProfile:
        if profile_id not in self._profiles:
            raise ProfileNotFoundError(profile_id)
        return self._profiles[profile_id]

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def current_id(self) -> Optional[str]:
        return self._current_id

    def list_profiles(self) -> list:
        """All profiles in index order."""
        return [copy.deepcopy(self._profiles[pid]) for pid in self._ids]

    def get_profile(self, profile_id: str) -> StudentProfile:
        return copy.deepcopy(self._require(profile_id))

    def current_profile(self) -> Optional[StudentProfile]:
        if self._current_id is None:
            return None
        return copy.deepcopy(self._profiles[self._current_id])

    # =========================================================================
    # PROFILE LIFECYCLE
    # =========================================================================

    def switch_profile(self, profile_id: str):
        self._require(profile_id)
        self._current_id = profile_id
        self.backend.set(CURRENT_PROFILE_KEY, profile_id)

    @staticmethod
    def _validate_name(name):
        if not isinstance(name, str) or not name.strip():
            raise ProfileValidationError("Profile name must not be empty")

    @staticmethod
    def _validate_majors(majors):
        if not isinstance(majors, list) or not 1 <= len(majors) <= MAX_MAJORS:
            raise ProfileValidationError(f"A profile needs between 1 and {MAX_MAJORS} majors")
        if not all(isinstance(m, str) and m.strip() for m in majors):
            raise ProfileValidationError("Major names must be non-empty strings")

    def create_profile(self, data: dict) -> str:
        """
        Create a profile, persist it and make it current.

        Args:
            data: Profile fields in persisted (camelCase) form; id, createdAt
                  and genEdChecks are assigned here and ignored if present

        Returns:
            The new profile id, slug(name) + "-" + base36(epoch millis)

        Raises:
            ProfileValidationError: empty name, or not 1-3 majors
        """
        record, _ = upgrade_profile_record(data)
        self._validate_name(record.get("name"))
        self._validate_majors(record.get("majors"))

        now = self.clock()
        record["id"] = f"{slugify(record['name'])}-{to_base36(int(now.timestamp() * 1000))}"
        record["createdAt"] = now.date().isoformat()
        record["genEdChecks"] = GenEdChecks().to_dict()

        try:
            profile = StudentProfile.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            raise ProfileValidationError(f"Invalid profile data: {e}") from e

        if profile.id in self._profiles:
            raise ProfileValidationError(f"Profile id '{profile.id}' already exists")

        self._ids.append(profile.id)
        self._save(profile)
        self.switch_profile(profile.id)
        logger.info("Created profile %s", profile.id)
        return profile.id

    def update_profile(self, profile_id: str, **changes) -> StudentProfile:
        """
        Shallow-merge field changes into a profile and persist it.

        Keyword names are StudentProfile fields (completed_courses=[...],
        selected_minors=[...]); id can't be changed.

        Raises:
            ProfileNotFoundError: unknown id
            ProfileValidationError: unknown field, or invalid name/majors
        """
        profile = self._require(profile_id)

        allowed = {f.name for f in fields(StudentProfile)} - {"id"}
        unknown = set(changes) - allowed
        if unknown:
            raise ProfileValidationError(f"Unknown profile field(s): {', '.join(sorted(unknown))}")

        # Only fields being changed are validated; migrated records may lack majors
        if "name" in changes:
            self._validate_name(changes["name"])
        if "majors" in changes:
            self._validate_majors(changes["majors"])

        updated = replace(profile, **changes)
        self._save(updated)
        return copy.deepcopy(updated)

    def delete_profile(self, profile_id: str) -> bool:
        """
        Delete a profile and its record.

        Deleting the current profile makes the first remaining one current
        (or none). Unknown ids are ignored.

        Returns:
            True if a profile was deleted
        """
        if profile_id not in self._profiles:
            return False

        self._ids.remove(profile_id)
        del self._profiles[profile_id]
        self.backend.remove(profile_key(profile_id))
        self.backend.set(PROFILES_LIST_KEY, list(self._ids))

        if self._current_id == profile_id:
            self._current_id = self._ids[0] if self._ids else None
            self.backend.set(CURRENT_PROFILE_KEY, self._current_id)

        logger.info("Deleted profile %s", profile_id)
        return True

    def ensure_seeded(self, seed: dict) -> Optional[str]:
        """
        Create the demo profile on first run.

        Returns:
            The new id, or None if any profile already exists
        """
        if self._ids:
            return None
        return self.create_profile(seed)

    # =========================================================================
    # COURSE HELPERS (act on the current profile)
    # =========================================================================

    def add_completed_course(self, course: CompletedCourse) -> bool:
        """
        Add a course to the current profile's completed list.

        A course finished this term moves off the current-courses list.

        Returns:
            False if there is no current profile or the code is already listed
        """
        profile = self._profiles.get(self._current_id)
        if profile is None or course.code in profile.completed_codes:
            return False
        self.update_profile(
            profile.id,
            completed_courses=profile.completed_courses + [course],
            current_courses=[c for c in profile.current_courses if c.code != course.code],
        )
        return True

    def remove_completed_course(self, code: str) -> bool:
        profile = self._profiles.get(self._current_id)
        if profile is None or code not in profile.completed_codes:
            return False
        self.update_profile(
            profile.id,
            completed_courses=[c for c in profile.completed_courses if c.code != code],
        )
        return True

    def add_current_course(self, course: CompletedCourse) -> bool:
        """Enroll the current profile in a course; no-op if already taken."""
        profile = self._profiles.get(self._current_id)
        if profile is None or course.code in profile.taken_codes:
            return False
        self.update_profile(profile.id, current_courses=profile.current_courses + [course])
        return True

    def remove_current_course(self, code: str) -> bool:
        profile = self._profiles.get(self._current_id)
        if profile is None or code not in profile.current_codes:
            return False
        self.update_profile(
            profile.id,
            current_courses=[c for c in profile.current_courses if c.code != code],
        )
        return True

    def import_courses(self, courses: list) -> int:
        """
        Add parsed transcript courses to the current profile in one write.

        Codes already on the completed list (or repeated in `courses`) are
        skipped.

        Returns:
            Number of courses added
        """
        profile = self._profiles.get(self._current_id)
        if profile is None:
            return 0

        known = set(profile.completed_codes)
        added = []
        for course in courses:
            if course.code in known:
                continue
            known.add(course.code)
            added.append(course)

        if added:
            added_codes = {c.code for c in added}
            self.update_profile(
                profile.id,
                completed_courses=profile.completed_courses + added,
                current_courses=[c for c in profile.current_courses if c.code not in added_codes],
            )
        return len(added)

    def update_gen_ed_checks(self, **checks) -> bool:
        """
        Tick or untick checklist items on the current profile.

        Example:
            store.update_gen_ed_checks(engl101=True, engl102=True)

        Raises:
            ProfileValidationError: unknown checklist item
        """
        profile = self._profiles.get(self._current_id)
        if profile is None:
            return False
        try:
            merged = profile.gen_ed_checks.merged(**checks)
        except ValueError as e:
            raise ProfileValidationError(str(e)) from e
        self.update_profile(profile.id, gen_ed_checks=merged)
        return True
