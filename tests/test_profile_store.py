"""Profile store: lifecycle, course helpers, persistence and loading."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from advising.config import CURRENT_PROFILE_KEY, PROFILES_LIST_KEY, profile_key
from advising.exceptions import ProfileNotFoundError, ProfileValidationError
from advising.models import CompletedCourse
from advising.storage import JsonFileStore, MemoryStore, ProfileStore
from advising.storage.profiles import slugify, to_base36

START = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def new_profile(name="Sam Rivera", majors=("BS Information Science",), **extra):
    data = {"name": name, "majors": list(majors)}
    data.update(extra)
    return data


def course(code, units=3, **kw):
    return CompletedCourse(code=code, name="", units=units, **kw)


class Ticker:
    """Clock that moves one millisecond per call."""

    def __init__(self, start):
        self.now = start
        self.calls = 0

    def __call__(self):
        value = self.now + timedelta(milliseconds=self.calls)
        self.calls += 1
        return value


# =============================================================================
# Helpers
# =============================================================================

def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"


def test_slugify():
    assert slugify("Sam Rivera-Ochoa!") == "samriveraochoa"


# =============================================================================
# Create / switch / delete
# =============================================================================

def test_new_store_is_empty(store):
    assert store.list_profiles() == []
    assert store.current_profile() is None
    assert store.current_id is None


def test_create_profile(store, backend):
    profile_id = store.create_profile(new_profile(interests="sound design"))

    assert profile_id.startswith("samrivera-")
    assert store.current_id == profile_id

    profile = store.current_profile()
    assert profile.name == "Sam Rivera"
    assert profile.created_at == "2026-03-01"
    assert profile.interests == "sound design"
    assert not any(profile.gen_ed_checks.to_dict().values())

    assert backend.get(PROFILES_LIST_KEY) == [profile_id]
    assert backend.get(CURRENT_PROFILE_KEY) == profile_id
    assert backend.get(profile_key(profile_id))["majors"] == ["BS Information Science"]


def test_create_ignores_supplied_id_and_checks(store):
    profile_id = store.create_profile(new_profile(id="hacked", genEdChecks={"engl101": True}))
    assert profile_id != "hacked"
    assert store.get_profile(profile_id).gen_ed_checks.engl101 is False


def test_create_accepts_legacy_single_major(store):
    profile_id = store.create_profile({"name": "Lee", "major": "BS Information Science"})
    assert store.get_profile(profile_id).majors == ["BS Information Science"]


@pytest.mark.parametrize("data", [
    new_profile(name=""),
    new_profile(name="   "),
    new_profile(majors=()),
    new_profile(majors=("A", "B", "C", "D")),
    new_profile(majors=("BS Information Science", "")),
])
def test_create_validation(store, data):
    with pytest.raises(ProfileValidationError):
        store.create_profile(data)
    assert store.list_profiles() == []


def test_same_name_same_tick_is_rejected(store):
    store.create_profile(new_profile())
    with pytest.raises(ProfileValidationError):
        store.create_profile(new_profile())
    assert len(store.list_profiles()) == 1


def test_ids_unique_across_ticks(backend):
    store = ProfileStore(backend, clock=Ticker(START))
    first = store.create_profile(new_profile())
    second = store.create_profile(new_profile())
    assert first != second
    assert [p.id for p in store.list_profiles()] == [first, second]
    assert store.current_id == second


def test_switch_profile(backend):
    store = ProfileStore(backend, clock=Ticker(START))
    first = store.create_profile(new_profile("Ana"))
    store.create_profile(new_profile("Ben"))

    store.switch_profile(first)
    assert store.current_profile().name == "Ana"
    assert backend.get(CURRENT_PROFILE_KEY) == first


def test_switch_to_unknown_profile(store):
    with pytest.raises(ProfileNotFoundError):
        store.switch_profile("ghost")


def test_delete_current_moves_to_first_remaining(backend):
    store = ProfileStore(backend, clock=Ticker(START))
    first = store.create_profile(new_profile("Ana"))
    second = store.create_profile(new_profile("Ben"))

    assert store.delete_profile(second) is True
    assert store.current_id == first
    assert backend.get(profile_key(second)) is None
    assert backend.get(PROFILES_LIST_KEY) == [first]


def test_delete_last_profile_clears_current(store, backend):
    profile_id = store.create_profile(new_profile())
    store.delete_profile(profile_id)
    assert store.current_profile() is None
    assert backend.get(CURRENT_PROFILE_KEY) is None


def test_delete_unknown_profile(store):
    assert store.delete_profile("ghost") is False


def test_ensure_seeded(store, catalog):
    seeded = store.ensure_seeded(catalog.seed_profile)
    assert seeded.startswith("alex-")
    assert store.current_profile().name == "Alex"
    assert len(store.current_profile().completed_courses) == 14
    assert store.ensure_seeded(catalog.seed_profile) is None
    assert len(store.list_profiles()) == 1


# =============================================================================
# Update
# =============================================================================

def test_update_profile(store, backend):
    profile_id = store.create_profile(new_profile())
    updated = store.update_profile(profile_id, selected_minors=["Music"], emphasis="interactive")

    assert updated.selected_minors == ["Music"]
    assert store.get_profile(profile_id).emphasis == "interactive"
    assert backend.get(profile_key(profile_id))["selectedMinors"] == ["Music"]


def test_update_unknown_field(store):
    profile_id = store.create_profile(new_profile())
    with pytest.raises(ProfileValidationError):
        store.update_profile(profile_id, favourite_colour="red")
    with pytest.raises(ProfileValidationError):
        store.update_profile(profile_id, id="other")


def test_update_validates_majors(store):
    profile_id = store.create_profile(new_profile())
    with pytest.raises(ProfileValidationError):
        store.update_profile(profile_id, majors=[])
    assert store.get_profile(profile_id).majors == ["BS Information Science"]


def test_update_unknown_profile(store):
    with pytest.raises(ProfileNotFoundError):
        store.update_profile("ghost", name="x")


def test_returned_profiles_are_copies(store):
    profile_id = store.create_profile(new_profile())
    profile = store.current_profile()
    profile.majors.append("BA Dance")
    profile.completed_courses.append(course("ENGL 101"))

    fresh = store.get_profile(profile_id)
    assert fresh.majors == ["BS Information Science"]
    assert fresh.completed_courses == []


# =============================================================================
# Course helpers
# =============================================================================

def test_add_completed_course(store):
    store.create_profile(new_profile())
    assert store.add_completed_course(course("ENGL 101", grade="A")) is True
    assert store.add_completed_course(course("ENGL 101")) is False
    assert store.current_profile().completed_codes == {"ENGL 101"}


def test_completing_a_current_course_moves_it(store):
    store.create_profile(new_profile())
    store.add_current_course(course("PHIL 101"))
    store.add_completed_course(course("PHIL 101", grade="B"))

    profile = store.current_profile()
    assert profile.completed_codes == {"PHIL 101"}
    assert profile.current_codes == set()


def test_add_current_course_skips_taken(store):
    store.create_profile(new_profile())
    store.add_completed_course(course("ENGL 101"))
    assert store.add_current_course(course("ENGL 101")) is False
    assert store.add_current_course(course("GEOG 101")) is True
    assert store.add_current_course(course("GEOG 101")) is False
    assert store.current_profile().current_codes == {"GEOG 101"}


def test_remove_courses(store):
    store.create_profile(new_profile())
    store.add_completed_course(course("ENGL 101"))
    store.add_current_course(course("GEOG 101"))

    assert store.remove_completed_course("ENGL 101") is True
    assert store.remove_completed_course("ENGL 101") is False
    assert store.remove_current_course("GEOG 101") is True
    assert store.remove_current_course("GEOG 101") is False

    profile = store.current_profile()
    assert profile.completed_courses == []
    assert profile.current_courses == []


def test_course_helpers_without_profile(store):
    assert store.add_completed_course(course("ENGL 101")) is False
    assert store.add_current_course(course("ENGL 101")) is False
    assert store.remove_completed_course("ENGL 101") is False
    assert store.remove_current_course("ENGL 101") is False
    assert store.import_courses([course("ENGL 101")]) == 0
    assert store.update_gen_ed_checks(engl101=True) is False


def test_import_courses(store):
    store.create_profile(new_profile())
    store.add_completed_course(course("ENGL 101"))
    store.add_current_course(course("PSY 101"))

    added = store.import_courses([
        course("ENGL 101"),
        course("ENGL 102"),
        course("ENGL 102"),
        course("PSY 101", grade="A"),
    ])

    assert added == 2
    profile = store.current_profile()
    assert [c.code for c in profile.completed_courses] == ["ENGL 101", "ENGL 102", "PSY 101"]
    assert profile.current_courses == []


def test_update_gen_ed_checks(store, backend):
    profile_id = store.create_profile(new_profile())
    assert store.update_gen_ed_checks(engl101=True, lang1=True) is True

    checks = store.current_profile().gen_ed_checks
    assert checks.engl101 and checks.lang1
    assert not checks.engl102
    assert backend.get(profile_key(profile_id))["genEdChecks"]["engl101"] is True


def test_update_gen_ed_checks_unknown_item(store):
    store.create_profile(new_profile())
    with pytest.raises(ProfileValidationError):
        store.update_gen_ed_checks(engl999=True)


# =============================================================================
# Loading
# =============================================================================

def test_reload_from_backend(store, backend, clock):
    profile_id = store.create_profile(new_profile())
    store.add_completed_course(course("ENGL 101", grade="A", semester="Fall 2025"))

    reloaded = ProfileStore(backend, clock=clock)
    assert reloaded.current_id == profile_id
    assert reloaded.current_profile() == store.current_profile()


def test_malformed_record_is_skipped(caplog):
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["bad", "good"])
    backend.set_raw(profile_key("bad"), "{not json")
    backend.set(profile_key("good"), {"id": "good", "name": "Good", "majors": ["BA Dance"]})

    with caplog.at_level(logging.WARNING):
        store = ProfileStore(backend)

    assert [p.id for p in store.list_profiles()] == ["good"]
    assert store.current_id == "good"
    assert "bad" in caplog.text


def test_missing_record_is_skipped():
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["ghost"])
    store = ProfileStore(backend)
    assert store.list_profiles() == []
    assert store.current_profile() is None


def test_malformed_index_is_ignored():
    backend = MemoryStore()
    backend.set_raw(PROFILES_LIST_KEY, "[oops")
    assert ProfileStore(backend).list_profiles() == []


def test_dangling_current_pointer_falls_back_to_first():
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["a"])
    backend.set(profile_key("a"), {"id": "a", "name": "A", "majors": ["BA Dance"]})
    backend.set(CURRENT_PROFILE_KEY, "ghost")

    store = ProfileStore(backend)
    assert store.current_id == "a"
    assert backend.get(CURRENT_PROFILE_KEY) == "a"


def test_legacy_record_is_upgraded_and_written_back():
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["old"])
    backend.set(profile_key("old"), {"id": "old", "name": "Old", "major": "BS Information Science"})

    store = ProfileStore(backend)

    assert store.get_profile("old").majors == ["BS Information Science"]
    record = backend.get(profile_key("old"))
    assert record["majors"] == ["BS Information Science"]
    assert record["schemaVersion"] == 2
    assert "major" not in record


def test_legacy_record_without_major_still_accepts_courses():
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["old"])
    backend.set(profile_key("old"), {"id": "old", "name": "Old", "major": ""})

    store = ProfileStore(backend)
    assert store.current_profile().majors == []

    assert store.add_completed_course(course("ENGL 101"))
    assert store.add_current_course(course("MUS 109"))
    assert store.update_gen_ed_checks(engl101=True)

    profile = store.get_profile("old")
    assert profile.completed_codes == {"ENGL 101"}
    assert profile.majors == []


def test_update_validates_only_changed_fields():
    backend = MemoryStore()
    backend.set(PROFILES_LIST_KEY, ["old"])
    backend.set(profile_key("old"), {"id": "old", "name": "Old"})
    store = ProfileStore(backend)

    assert store.update_profile("old", name="Renamed").name == "Renamed"
    with pytest.raises(ProfileValidationError):
        store.update_profile("old", majors=[])
    assert store.update_profile("old", majors=["BA Dance"]).majors == ["BA Dance"]


# =============================================================================
# JSON file backend
# =============================================================================

def test_json_file_store_round_trip(tmp_path):
    backend = JsonFileStore(tmp_path / "profiles")
    assert backend.get("profiles-list") is None

    backend.set("profiles-list", ["a", "b"])
    assert backend.get("profiles-list") == ["a", "b"]
    assert (tmp_path / "profiles" / "profiles-list.json").exists()

    backend.remove("profiles-list")
    backend.remove("profiles-list")
    assert backend.get("profiles-list") is None


def test_json_file_store_sanitizes_keys(tmp_path):
    backend = JsonFileStore(tmp_path)
    backend.set("profile-../escape", {"x": 1})
    assert backend.get("profile-../escape") == {"x": 1}
    assert list(tmp_path.iterdir()) == [tmp_path / "profile-.._escape.json"]


def test_json_file_store_truncated_file(tmp_path, caplog):
    (tmp_path / "current-profile.json").write_text('"half')
    with caplog.at_level(logging.WARNING):
        assert JsonFileStore(tmp_path).get("current-profile") is None
    assert "current-profile" in caplog.text


def test_profile_store_on_disk(tmp_path, clock):
    store = ProfileStore(JsonFileStore(tmp_path), clock=clock)
    profile_id = store.create_profile(new_profile())
    store.add_completed_course(course("MUS 109", grade="A"))

    reloaded = ProfileStore(JsonFileStore(tmp_path), clock=clock)
    assert reloaded.current_id == profile_id
    assert reloaded.current_profile().completed_codes == {"MUS 109"}
