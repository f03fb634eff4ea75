"""Hyrox race weights per division."""

from __future__ import annotations

from .models import RaceWeights

DEFAULT_DIVISION = "womens-open"

# Sled weights are the same in every division
_SLED_PUSH_KG = 102
_SLED_PULL_KG = 78

# (farmers carry per hand, sandbag, wall ball)
_LIGHT = (16, 10, 4)
_MIXED = (20, 15, 5)
_STANDARD = (24, 20, 6)
_HEAVY = (32, 30, 9)

_DIVISION_LOADS: dict[str, tuple[int, int, int]] = {
    "womens-open": _LIGHT,
    "mens-open": _STANDARD,
    "womens-pro": _STANDARD,
    "mens-pro": _HEAVY,
    "womens-doubles": _LIGHT,
    "mens-doubles": _STANDARD,
    "mixed-doubles": _MIXED,
    "womens-pro-doubles": _STANDARD,
    "mens-pro-doubles": _HEAVY,
    "womens-relay": _LIGHT,
    "mens-relay": _STANDARD,
    "mixed-relay": _MIXED,
    "womens-adaptive": _LIGHT,
    "mens-adaptive": _STANDARD,
}

DIVISIONS: tuple[str, ...] = tuple(_DIVISION_LOADS)


def get_race_weights(division: str) -> RaceWeights:
    """Race weights for a division; unknown divisions get women's open."""
    farmers, sandbag, wall_ball = _DIVISION_LOADS.get(
        division, _DIVISION_LOADS[DEFAULT_DIVISION]
    )
    return RaceWeights(
        sled_push=_SLED_PUSH_KG,
        sled_pull=_SLED_PULL_KG,
        farmers_carry=farmers,
        sandbag_lunges=sandbag,
        wall_balls=wall_ball,
    )


def format_division_name(division: str) -> str:
    """'mens-pro-doubles' → "Men's Pro Doubles"."""
    name = " ".join(word.capitalize() for word in division.split("-"))
    return name.replace("Mens", "Men's").replace("Womens", "Women's")
