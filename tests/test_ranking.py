from winter_chances.core.tables import Dataset
from winter_chances.views.ranking import rank_athletes

from conftest import athlete


def test_rows_of_one_athlete_are_aggregated():
    dataset = Dataset.from_payload(
        {
            "athletes": [
                athlete("Anna", "Lee", "USA", "d1", "Favourite"),
                athlete("anna", "LEE ", "usa", "d2", "Wildcard"),
                athlete("Bo", "Kim", "KOR", "d1", "Big Favourite"),
            ],
            "disciplins": [{"disciplin_id": "d1", "name": "Slopestyle"}],
            "calendar": [{"day": "9", "disciplin_id": "D1"}],
        }
    )
    ranked = rank_athletes(dataset)

    assert [(entry.firstname, entry.total_power) for entry in ranked] == [("Anna", 5), ("Bo", 5)]
    anna = ranked[0]
    assert anna.chance_count == 2
    assert anna.slug == "anna-lee"
    assert [chance.chance for chance in anna.chances] == ["Favourite", "Wildcard"]
    assert anna.chances[0].disciplin.name == "Slopestyle"
    assert anna.chances[0].day == "9"
    assert anna.chances[1].disciplin is None
    assert anna.chances[1].day is None


def test_total_power_orders_the_list(dataset):
    ranked = rank_athletes(dataset)
    assert [(entry.lastname, entry.total_power) for entry in ranked] == [
        ("Simon", 6),
        ("Odermatt", 5),
        ("Boe", 5),
        ("von Allmen", 4),
        ("Laegreid", 4),
        ("McDavid", 4),
        ("Paris", 3),
        ("Rider", 1),
    ]
    simon = ranked[0]
    assert simon.chance_count == 2
    assert [chance.disciplin_id for chance in simon.chances] == ["bia-pur", "bia-spr-w"]


def test_unknown_chance_counts_but_adds_no_power():
    dataset = Dataset.from_payload(
        {"athletes": [athlete("Cy", "Ng", "CHN", "d1", "Dark horse"), athlete("Cy", "Ng", "CHN", "d2", "Outsider")]}
    )
    (entry,) = rank_athletes(dataset)
    assert entry.chance_count == 2
    assert entry.total_power == 2


def test_empty_tables():
    assert rank_athletes(Dataset.empty()) == []


def test_two_entries_of_one_athlete():
    dataset = Dataset.from_payload(
        {
            "athletes": [
                athlete("Anna", "Lee", "NOR", "d1", "Favourite"),
                athlete("Anna", "Lee", "NOR", "d2", "Big Favourite"),
            ]
        }
    )
    (entry,) = rank_athletes(dataset)
    assert entry.chance_count == 2
    assert entry.total_power == 9
    assert [chance.disciplin_id for chance in entry.chances] == ["d2", "d1"]
