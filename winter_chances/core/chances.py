from __future__ import annotations

from typing import Any, Iterable, TypeVar


T = TypeVar("T")

BIG_FAVOURITE = "Big Favourite"
FAVOURITE = "Favourite"
CHALLENGER = "Challenger"
OUTSIDER = "Outsider"
WILDCARD = "Wildcard"

# Display order of the category groups, strongest first.
CHANCE_CATEGORIES: tuple[str, ...] = (BIG_FAVOURITE, FAVOURITE, CHALLENGER, OUTSIDER, WILDCARD)

CHANCE_WEIGHTS: dict[str, int] = {
    BIG_FAVOURITE: 5,
    FAVOURITE: 4,
    CHALLENGER: 3,
    OUTSIDER: 2,
    WILDCARD: 1,
}

WEIGHT_TO_CHANCE: dict[int, str] = {weight: chance for chance, weight in CHANCE_WEIGHTS.items()}

UNKNOWN_CATEGORY_RANK = 999


def chance_weight(chance: Any) -> int:
    """5 for Big Favourite down to 1 for Wildcard; anything else weighs 0."""
    if not isinstance(chance, str):
        return 0
    return CHANCE_WEIGHTS.get(chance, 0)


def category_rank(chance: str) -> int:
    try:
        return CHANCE_CATEGORIES.index(chance)
    except ValueError:
        return UNKNOWN_CATEGORY_RANK


def coerce_chance(value: Any) -> str:
    """Turn a numeric spreadsheet chance ("4", 4) into its label; labels pass through."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return WEIGHT_TO_CHANCE.get(value, str(value))
    if isinstance(value, float) and value.is_integer():
        return WEIGHT_TO_CHANCE.get(int(value), str(value))
    text = "" if value is None else str(value)
    if text.strip().isdigit():
        return WEIGHT_TO_CHANCE.get(int(text.strip()), text)
    return text


def stars(weight: int) -> str:
    return "⭐" * max(weight, 0)


def group_by_category(items: Iterable[T], chance_of) -> list[tuple[str, list[T]]]:
    """Bucket already-sorted items under their chance label.

    Known categories come first in ``CHANCE_CATEGORIES`` order, unknown labels
    follow in first-seen order. Item order inside a bucket is preserved.
    """
    buckets: dict[str, list[T]] = {}
    for item in items:
        buckets.setdefault(chance_of(item), []).append(item)
    ordered = sorted(buckets, key=category_rank)
    return [(label, buckets[label]) for label in ordered]
