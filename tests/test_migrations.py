"""Persisted profile record upgrades."""

from advising.storage import upgrade_profile_record


def test_single_major_becomes_list():
    record, changed = upgrade_profile_record({"id": "a", "name": "A", "major": "BS Information Science"})
    assert changed is True
    assert record["majors"] == ["BS Information Science"]
    assert record["schemaVersion"] == 2
    assert "major" not in record


def test_empty_major_becomes_empty_list():
    record, _ = upgrade_profile_record({"id": "a", "major": ""})
    assert record["majors"] == []


def test_non_list_majors_is_replaced():
    record, _ = upgrade_profile_record({"id": "a", "major": "BA Dance", "majors": "BA Dance"})
    assert record["majors"] == ["BA Dance"]


def test_both_fields_keep_the_list():
    record, changed = upgrade_profile_record({
        "id": "a",
        "major": "BA Dance",
        "majors": ["BS Information Science", "BA Dance"],
        "schemaVersion": 2,
    })
    assert changed is True
    assert record["majors"] == ["BS Information Science", "BA Dance"]
    assert "major" not in record


def test_missing_version_is_stamped():
    record, changed = upgrade_profile_record({"id": "a", "majors": ["BA Dance"]})
    assert changed is True
    assert record["schemaVersion"] == 2


def test_current_record_is_unchanged():
    original = {"id": "a", "majors": ["BA Dance"], "schemaVersion": 2}
    record, changed = upgrade_profile_record(original)
    assert changed is False
    assert record == original


def test_upgrade_is_idempotent():
    once, _ = upgrade_profile_record({"id": "a", "major": "BA Dance"})
    twice, changed = upgrade_profile_record(once)
    assert changed is False
    assert twice == once


def test_input_is_not_mutated():
    original = {"id": "a", "major": "BA Dance"}
    upgrade_profile_record(original)
    assert original == {"id": "a", "major": "BA Dance"}
