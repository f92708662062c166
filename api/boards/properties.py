"""
Closed value sets for the optional board fields.

Anything not listed here is rejected by validation before it reaches the
database.
"""

from __future__ import annotations

from enum import Enum


class Background(str, Enum):
    DEFAULT = "default"
    BG_1 = "bg-1"
    BG_2 = "bg-2"
    BG_3 = "bg-3"
    BG_4 = "bg-4"
    BG_5 = "bg-5"
    BG_6 = "bg-6"
    BG_7 = "bg-7"
    BG_8 = "bg-8"
    BG_9 = "bg-9"
    BG_10 = "bg-10"
    BG_11 = "bg-11"
    BG_12 = "bg-12"
    BG_13 = "bg-13"
    BG_14 = "bg-14"
    BG_15 = "bg-15"


class Icon(str, Enum):
    PROJECT = "project"
    STAR = "star"
    LOADING = "loading"
    PUZZLE = "puzzle"
    CONTAINER = "container"
    LIGHTNING = "lightning"
    COLORS = "colors"
    HEXAGON = "hexagon"


class FilterType(str, Enum):
    ALL = "all"
    WITHOUT = "without"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def catalog() -> dict[str, list[str]]:
    return {
        "backgrounds": [item.value for item in Background],
        "icons": [item.value for item in Icon],
        "filterTypes": [item.value for item in FilterType],
    }
