"""
Persisted profile record migrations.

Each step upgrades a raw record (the JSON dict, before it becomes a
StudentProfile) by one schema version. Steps are pure: they return a new
dict and never touch storage.
"""

from ..config import PROFILE_SCHEMA_VERSION


def _v1_to_v2(record: dict) -> dict:
    """Single "major" string -> "majors" list."""
    upgraded = dict(record)
    major = upgraded.pop("major", None)
    upgraded["majors"] = [major] if major else []
    upgraded["schemaVersion"] = 2
    return upgraded


def upgrade_profile_record(record: dict) -> tuple:
    """
    Bring a raw profile record up to the current schema.

    Records without a schemaVersion are version 1 if they carry a "major"
    field and current otherwise. Running it on an already-current record
    returns an equal record and changed=False.

    Returns:
        (record, changed)
    """
    upgraded = dict(record)
    changed = False

    if "major" in upgraded and not isinstance(upgraded.get("majors"), list):
        upgraded = _v1_to_v2(upgraded)
        changed = True
    elif "major" in upgraded:
        # Both shapes present: the list is authoritative
        upgraded.pop("major")
        changed = True

    if upgraded.get("schemaVersion") != PROFILE_SCHEMA_VERSION:
        upgraded["schemaVersion"] = PROFILE_SCHEMA_VERSION
        changed = True

    return upgraded, changed
