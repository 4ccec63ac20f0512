from __future__ import annotations

import pytest

from winter_chances.core.tables import Dataset


def athlete(firstname, lastname, country, disciplin_id, chance, desc=""):
    return {
        "firstname": firstname,
        "lastname": lastname,
        "country": country,
        "disciplin_id": disciplin_id,
        "chance": chance,
        "desc": desc,
    }


def event(day, disciplin_id, time_begin, is_medal="0", is_game="0", team_1="", team_2="", desc=""):
    return {
        "day": day,
        "disciplin_id": disciplin_id,
        "time_begin": time_begin,
        "time_end": "",
        "desc": desc,
        "is_medal": is_medal,
        "is_game": is_game,
        "team_1": team_1,
        "team_2": team_2,
    }


@pytest.fixture
def dataset() -> Dataset:
    return Dataset.from_payload(
        {
            "athletes": [
                athlete("Marco", "Odermatt", "SUI", "alp-dh", "Big Favourite"),
                athlete("Dominik", "Paris", "ITA", "ALP-DH", "Challenger"),
                athlete("Franjo", "von Allmen", "SUI", " alp-dh ", "Favourite"),
                athlete("Johannes", "Boe", "NOR", "bia-spr", "Big Favourite"),
                athlete("Sturla", "Laegreid", "NOR", "bia-spr", "Favourite"),
                athlete("Julia", "Simon", "FRA", "bia-pur", "Favourite"),
                athlete("Julia", "Simon", "FRA", "bia-spr-w", "Outsider", desc="Sprint backup"),
                athlete("Connor", "McDavid", "CAN", "iho", "Favourite"),
                athlete("Ghost", "Rider", "XXX", "nope", "Wildcard"),
            ],
            "disciplins": [
                {"disciplin_id": "ALP-DH", "name": "Men's Downhill", "sport": "Alpine Skiing", "gender": "M"},
                {"disciplin_id": "bia-spr", "name": "Men's Sprint", "sport": "Biathlon", "gender": "M"},
                {"disciplin_id": "bia-pur", "name": "Women's Pursuit", "sport": "Biathlon", "gender": "W"},
                {"disciplin_id": "bia-spr-w", "name": "Women's Sprint", "sport": "Biathlon", "gender": "W"},
                {"disciplin_id": "iho", "name": "Men's Ice Hockey", "sport": "Ice Hockey", "gender": "M"},
            ],
            "calendar": [
                {"day": "7", "disciplin_id": "alp-dh"},
                {"day": "13", "disciplin_id": "BIA-SPR"},
                {"day": "15", "disciplin_id": "bia-pur"},
                {"day": "13", "disciplin_id": "bia-spr-w"},
                {"day": "22", "disciplin_id": "iho"},
            ],
            "events": [
                event("7", "alp-dh", "11:30", is_medal="1"),
                event("13", "bia-spr", "14:00", is_medal="1"),
                event("13", "bia-spr-w", "09:15"),
                event("13", "iho", "21:10", is_game="1", team_1="CAN", team_2="SUI"),
                event("13", "iho", "00:40", is_game="1", team_1="NOR", team_2="ITA"),
                event("13", "mystery", "18:05"),
                event("15", "bia-pur", "14:45", is_medal="1"),
                event("22", "iho", "14:10", is_medal="1", is_game="1", team_1="CAN", team_2="SUI"),
            ],
        }
    )
