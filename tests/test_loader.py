"""Catalog loading, lookups and search."""

import json

import pytest

from advising.data import CatalogLoader


# =============================================================================
# Bundled data
# =============================================================================

def test_gen_ed_rules_shape(catalog):
    rules = catalog.gen_ed_rules
    assert [d["key"] for d in rules["exploring_perspectives"]["domains"]] == ["A", "H", "N", "S"]
    assert rules["building_connections"]["key"] == "B"


def test_domain_course_lists(catalog):
    artist = catalog.gen_ed_courses_for_domain("A")
    assert len(artist) == 6
    assert all("A" in c.domains for c in artist)
    assert catalog.gen_ed_courses_for_domain("Z") == []


def test_double_tagged_course_in_both_lists(catalog):
    humanist = [c.code for c in catalog.gen_ed_courses_for_domain("H")]
    bc = [c.code for c in catalog.gen_ed_courses_for_domain("B")]
    assert "PHIL 321" in humanist
    assert "PHIL 321" in bc


def test_seed_profile(catalog):
    seed = catalog.seed_profile
    assert seed["name"] == "Alex"
    assert seed["majors"] == ["BS Information Science"]
    assert "id" not in seed


def test_properties_are_cached(catalog):
    assert catalog.gen_ed_courses is catalog.gen_ed_courses
    assert catalog.majors is catalog.majors


def test_missing_catalog_dir(tmp_path):
    loader = CatalogLoader(tmp_path)
    with pytest.raises(FileNotFoundError):
        loader.majors


def test_custom_catalog_dir(tmp_path):
    (tmp_path / "majors.json").write_text(json.dumps({
        "ba_dance": {"name": "BA Dance", "match": ["dance"], "core": []},
    }))
    loader = CatalogLoader(tmp_path)
    key, major = loader.find_major("BFA Dance")
    assert key == "ba_dance"
    assert major["name"] == "BA Dance"


# =============================================================================
# Lookups
# =============================================================================

def test_find_major(catalog):
    key, major = catalog.find_major("Information Science and eSociety")
    assert key == "bsis"
    assert major["short_name"] == "BSIS"
    assert catalog.find_major("BA Dance") is None


def test_find_minor_is_case_insensitive(catalog):
    assert catalog.find_minor("  MUSIC ")["name"] == "Music"
    assert catalog.find_minor("Studio Art") is None


def test_lookup_course(catalog):
    course = catalog.lookup_course("ISTA 130")
    assert course.name == "Computational Thinking & Doing"
    assert course.units == 4
    assert catalog.lookup_course("XYZ 999") is None


def test_lookup_falls_back_to_gen_ed_list(catalog):
    course = catalog.lookup_course("CLAS 160D1")
    assert course.name == "Greek Mythology"
    assert course.department == "CLAS"


def test_name_lists(catalog):
    assert catalog.list_major_names() == ["BS Information Science"]
    assert catalog.list_minor_names() == ["Business Administration", "Music"]


# =============================================================================
# Search
# =============================================================================

def test_search_by_code_prefix(catalog):
    assert [c.code for c in catalog.search_courses("ista 13")] == ["ISTA 130", "ISTA 131"]


def test_search_by_name(catalog):
    codes = [c.code for c in catalog.search_courses("Greek")]
    assert codes == ["CLAS 160D1"]


def test_search_needs_two_characters(catalog):
    assert catalog.search_courses("") == []
    assert catalog.search_courses(" m ") == []


def test_search_limit(catalog):
    results = catalog.search_courses("mus", limit=3)
    assert len(results) == 3
    assert [c.code for c in results] == sorted(c.code for c in results)
