from winter_chances.core.utils import (
    create_athlete_slug,
    normalize_key,
    parse_athlete_slug,
    parse_int,
    slugify,
)


def test_normalize_key_trims_and_lowercases():
    assert normalize_key("  ABC ") == "abc"
    assert normalize_key(None) == ""


def test_athlete_slug_round_trip_for_simple_names():
    assert create_athlete_slug("Anne", "Hansen") == "anne-hansen"
    assert parse_athlete_slug("anne-hansen") == {"firstname": "Anne", "lastname": "Hansen"}


def test_athlete_slug_collapses_whitespace_and_strips_symbols():
    assert create_athlete_slug("Jean  Luc", "O'Neil") == "jean-luc-oneil"
    assert create_athlete_slug("Ester", "Ledecká") == "ester-ledeck"


def test_slug_decoding_is_lossy_for_compound_names():
    slug = create_athlete_slug("Franjo", "von Allmen")
    assert slug == "franjo-von-allmen"
    assert parse_athlete_slug(slug) == {"firstname": "Franjo von", "lastname": "Allmen"}


def test_slug_without_separator_cannot_be_decoded():
    assert parse_athlete_slug("madonna") is None
    assert parse_athlete_slug("") is None


def test_parse_int_is_lenient():
    assert parse_int("08") == 8
    assert parse_int(" 12 ") == 12
    assert parse_int("3rd") == 3
    assert parse_int("day") is None
    assert parse_int("", 0) == 0


def test_slugify():
    assert slugify("Great Britain") == "great-britain"
    assert slugify("  ") == "unknown"
