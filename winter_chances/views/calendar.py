from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Iterable, Optional

from winter_chances.core.chances import chance_weight
from winter_chances.core.tables import Athlete, Dataset, Disciplin, Event
from winter_chances.core.timeutils import (
    EVENING,
    SESSIONS,
    VENUE_TZ,
    evening_sort_hour,
    hour_of,
    session_for_hour,
    venue_display_time,
    venue_to_viewer,
)
from winter_chances.core.utils import normalize_key, parse_int

from .countries import calendar_country_power, rank_countries
from .joins import index_by_disciplin_id


class TimeBase(str, enum.Enum):
    VENUE = "venue"
    VIEWER = "viewer"


@dataclass(frozen=True)
class CalendarParams:
    day: Optional[str] = None
    countries: tuple[str, ...] = ()
    time_base: TimeBase = TimeBase.VENUE
    viewer_tz: tzinfo = VENUE_TZ


@dataclass(frozen=True)
class EventCard:
    event: Event
    disciplin_label: str
    sport: Optional[str]
    display_time: str
    display_hour: int
    country_athletes: list[Athlete] = field(default_factory=list)
    favourites: list[tuple[int, list[Athlete]]] = field(default_factory=list)

    @property
    def is_medal(self) -> bool:
        return self.event.medal

    @property
    def is_game(self) -> bool:
        return self.event.game

    @property
    def is_medal_chance(self) -> bool:
        return self.is_medal and bool(self.country_athletes)


@dataclass(frozen=True)
class SessionGrid:
    name: str
    cards: list[EventCard] = field(default_factory=list)
    sports: list[str] = field(default_factory=list)
    hours: list[int] = field(default_factory=list)
    cells: dict[tuple[str, int], list[EventCard]] = field(default_factory=dict)


@dataclass(frozen=True)
class CalendarView:
    day: Optional[str]
    time_base: TimeBase
    sessions: list[SessionGrid] = field(default_factory=list)
    days: list[str] = field(default_factory=list)
    countries: list[str] = field(default_factory=list)
    country_power: dict[str, int] = field(default_factory=dict)


def calendar_days(events: Iterable[Event]) -> list[str]:
    days = {str(event.day) for event in events if event.day}
    return sorted(days, key=lambda day: (parse_int(day, 0), day))


def default_day(events: Iterable[Event]) -> Optional[str]:
    """Day preselected on first load: the smallest day present in the schedule."""
    days = calendar_days(events)
    return days[0] if days else None


def display_time(event: Event, params: CalendarParams) -> str:
    if params.time_base is TimeBase.VIEWER:
        return venue_to_viewer(event.time_begin, event.day, params.viewer_tz)
    return venue_display_time(event.time_begin)


def _country_athletes(event: Event, athletes: list[Athlete], countries: set[str]) -> list[Athlete]:
    if not countries:
        return []
    if event.game and not {normalize_key(event.team_1), normalize_key(event.team_2)} & countries:
        return []
    selected = [athlete for athlete in athletes if normalize_key(athlete.country) in countries]
    return sorted(selected, key=lambda athlete: -chance_weight(athlete.chance))


def _favourites(event: Event, athletes: list[Athlete]) -> list[tuple[int, list[Athlete]]]:
    if not event.medal:
        return []
    by_stars: dict[int, list[Athlete]] = {}
    for athlete in athletes:
        by_stars.setdefault(chance_weight(athlete.chance), []).append(athlete)
    return [(weight, by_stars[weight]) for weight in sorted(by_stars, reverse=True)]


def build_event_card(
    event: Event,
    params: CalendarParams,
    disciplins: dict[str, Disciplin],
    athletes_by_disciplin: dict[str, list[Athlete]],
) -> EventCard:
    key = normalize_key(event.disciplin_id)
    disciplin = disciplins.get(key)
    athletes = athletes_by_disciplin.get(key, [])
    time_text = display_time(event, params)
    return EventCard(
        event=event,
        disciplin_label=(disciplin.name if disciplin and disciplin.name else event.disciplin_id),
        sport=(disciplin.sport or None) if disciplin else None,
        display_time=time_text,
        display_hour=hour_of(time_text),
        country_athletes=_country_athletes(event, athletes, {normalize_key(c) for c in params.countries}),
        favourites=_favourites(event, athletes),
    )


def _session_grid(name: str, cards: list[EventCard]) -> SessionGrid:
    hours = {card.display_hour for card in cards}
    if name == EVENING:
        ordered_hours = sorted(hours, key=evening_sort_hour)
    else:
        ordered_hours = sorted(hours)
    columns = sorted({card.sport for card in cards if card.sport})

    cells: dict[tuple[str, int], list[EventCard]] = {}
    for card in cards:
        if card.sport:
            cells.setdefault((card.sport, card.display_hour), []).append(card)

    return SessionGrid(
        name=name,
        cards=sorted(cards, key=lambda card: (evening_sort_hour(card.display_hour), card.display_time)),
        sports=columns,
        hours=ordered_hours,
        cells=cells,
    )


def calendar_view(dataset: Dataset, params: CalendarParams | None = None) -> CalendarView:
    """Session grid for one day, the first scheduled day when none is selected.

    Country selection only decides which athletes are attached to each card,
    it never hides events. Session, hour row and order inside a session all
    follow the display time of the chosen time base.
    """
    params = params or CalendarParams()
    day = params.day or default_day(dataset.events)
    events = [event for event in dataset.events if str(event.day) == str(day)]

    disciplins = index_by_disciplin_id(dataset.disciplins)
    athletes_by_disciplin: dict[str, list[Athlete]] = {}
    for athlete in dataset.athletes:
        athletes_by_disciplin.setdefault(normalize_key(athlete.disciplin_id), []).append(athlete)

    by_session: dict[str, list[EventCard]] = {name: [] for name, _, _ in SESSIONS}
    for event in events:
        card = build_event_card(event, params, disciplins, athletes_by_disciplin)
        by_session[session_for_hour(card.display_hour)].append(card)

    power = calendar_country_power(dataset)
    return CalendarView(
        day=day,
        time_base=params.time_base,
        sessions=[_session_grid(name, by_session[name]) for name, _, _ in SESSIONS if by_session[name]],
        days=calendar_days(dataset.events),
        countries=rank_countries(dataset.athletes, power),
        country_power=power,
    )
