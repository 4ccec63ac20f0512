from winter_chances.core.tables import CalendarDay, Disciplin
from winter_chances.views.joins import (
    day_for,
    disciplin_label,
    find_by_disciplin_id,
    index_by_disciplin_id,
    rows_for_disciplin,
    sport_for,
)


DISCIPLINS = (
    Disciplin(disciplin_id="ABC", name="Alpha", sport="Luge"),
    Disciplin(disciplin_id="abc", name="Shadowed", sport="Skeleton"),
    Disciplin(disciplin_id="xyz", name="", sport=""),
)


def test_join_keys_ignore_case_and_whitespace():
    assert find_by_disciplin_id(" ABC ", [Disciplin(disciplin_id="abc")]).disciplin_id == "abc"
    assert find_by_disciplin_id("abc", DISCIPLINS).name == "Alpha"


def test_first_match_wins():
    assert index_by_disciplin_id(DISCIPLINS)["abc"].name == "Alpha"
    assert [row.name for row in rows_for_disciplin("ABC", DISCIPLINS)] == ["Alpha", "Shadowed"]


def test_unmatched_lookups_are_empty_not_errors():
    assert find_by_disciplin_id("nope", DISCIPLINS) is None
    assert sport_for("nope", DISCIPLINS) is None
    assert sport_for("xyz", DISCIPLINS) is None
    assert disciplin_label("nope", DISCIPLINS) == "nope"
    assert disciplin_label("xyz", DISCIPLINS) == "xyz"
    assert disciplin_label("abc", DISCIPLINS) == "Alpha"


def test_day_for():
    calendar = (CalendarDay(day="9", disciplin_id="ABC"), CalendarDay(day="", disciplin_id="xyz"))
    assert day_for("abc", calendar) == "9"
    assert day_for("xyz", calendar) is None
    assert day_for("nope", calendar) is None
    assert day_for("abc", ()) is None
