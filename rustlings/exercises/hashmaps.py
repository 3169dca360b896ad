"""Hash map solutions: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "default_fruit_basket",
    "Fruit",
    "fill_fruit_basket",
    "Team",
    "build_scores_table",
]

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def default_fruit_basket() -> dict[str, int]:
    """A basket holding three kinds of fruit, two of each."""
    basket = {"banana": 2, "apple": 2, "mango": 2}
    if "orange" in basket:
        basket["orange"] += 10
    return basket


class Fruit(Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add twelve of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 12)


def _check_u8(value: int) -> int:
    if not 0 <= value <= _U8_MAX:
        raise OverflowError(f"goal count {value} does not fit in 0..={_U8_MAX}")
    return value


def _parse_u8(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass
class Team:
    """A team with the goals it scored and conceded."""

    name: str
    goals_scored: int
    goals_conceded: int

    def add(self, other: Team) -> None:
        """Add another record of the same team to this one."""
        if self.name != other.name:
            raise ValueError(f"cannot add {other.name!r} to {self.name!r}")
        scored = _check_u8(self.goals_scored + other.goals_scored)
        conceded = _check_u8(self.goals_conceded + other.goals_conceded)
        self.goals_scored = scored
        self.goals_conceded = conceded


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of the form team1,team2,goals1,goals2."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])
        for team in (
            Team(team_1_name, team_1_score, team_2_score),
            Team(team_2_name, team_2_score, team_1_score),
        ):
            existing = scores.get(team.name)
            if existing is None:
                scores[team.name] = team
            else:
                existing.add(team)
    return scores